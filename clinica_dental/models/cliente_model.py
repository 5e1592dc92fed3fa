from sqlalchemy import Column, Integer, String, DateTime

from clinica_dental.database import Base
from clinica_dental.core.tiempo import ahora

class Cliente(Base):
    __tablename__ = "clientes"

    id = Column(Integer, primary_key=True)
    nombres = Column(String(50), nullable=False)
    apellidos = Column(String(50), nullable=False)
    telefono = Column(String(20))
    email = Column(String(120))

    creado_en = Column(DateTime, default=ahora)
    eliminado_en = Column(DateTime) # soft delete: NULL mientras el registro está vigente
