from sqlalchemy import Column, Integer, String, Text, Numeric, DateTime

from clinica_dental.database import Base
from clinica_dental.core.tiempo import ahora

class Servicio(Base):
    __tablename__ = "servicios"

    id = Column(Integer, primary_key=True)
    nombre = Column(String(100), nullable=False)
    descripcion = Column(Text)
    precio = Column(Numeric(10, 2), nullable=False)

    creado_en = Column(DateTime, default=ahora)
    eliminado_en = Column(DateTime)
