import enum

from sqlalchemy import Column, Integer, DateTime, ForeignKey, String, CheckConstraint
from sqlalchemy.orm import relationship

from clinica_dental.database import Base
from clinica_dental.core.tiempo import ahora

class EstadoCita(str, enum.Enum):
    PENDIENTE = "Pendiente"
    CONFIRMADO = "Confirmado"
    RECHAZADO = "Rechazado"

class Cita(Base):
    __tablename__ = "citas"

    id = Column(Integer, primary_key=True)
    cliente_id = Column(Integer, ForeignKey("clientes.id"), nullable=False)
    odontologo_id = Column(Integer, ForeignKey("odontologos.id"), nullable=False)
    servicio_id = Column(Integer, ForeignKey("servicios.id"), nullable=False)

    fecha_hora_inicio = Column(DateTime, nullable=False)
    fecha_hora_fin = Column(DateTime, nullable=False)

    # se guarda el texto del estado ("Pendiente", "Confirmado", "Rechazado")
    estado = Column(String(20), nullable=False, default=EstadoCita.PENDIENTE.value)
    fecha_confirmacion = Column(DateTime)
    fecha_suspension = Column(DateTime)

    creado_en = Column(DateTime, default=ahora)
    actualizado_en = Column(DateTime, default=ahora, onupdate=ahora)
    eliminado_en = Column(DateTime)

    #relationships para devolver cliente, odontologo y servicio completos al frontend
    cliente = relationship("Cliente")
    odontologo = relationship("Odontologo")
    servicio = relationship("Servicio")

    __table_args__ = (
        CheckConstraint('fecha_hora_inicio < fecha_hora_fin', name='chk_cita_fechas'),
    )

    def __repr__(self):
        return f"<Cita {self.id}: odontologo={self.odontologo_id} {self.fecha_hora_inicio} - {self.fecha_hora_fin}>"
