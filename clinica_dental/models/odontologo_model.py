from sqlalchemy import Column, Integer, String, DateTime, ForeignKey, Table
from sqlalchemy.orm import relationship

from clinica_dental.database import Base
from clinica_dental.core.tiempo import ahora

# tabla intermedia odontólogo <-> servicio (qué servicios atiende cada odontólogo)
odontologo_servicios = Table(
    "odontologo_servicios",
    Base.metadata,
    Column("odontologo_id", Integer, ForeignKey("odontologos.id"), primary_key=True),
    Column("servicio_id", Integer, ForeignKey("servicios.id"), primary_key=True),
)

class Odontologo(Base):
    __tablename__ = "odontologos"

    id = Column(Integer, primary_key=True)
    nombres = Column(String(50), nullable=False)
    apellidos = Column(String(50), nullable=False)
    especialidad = Column(String(100))

    creado_en = Column(DateTime, default=ahora)
    eliminado_en = Column(DateTime)

    servicios = relationship("Servicio", secondary=odontologo_servicios)
