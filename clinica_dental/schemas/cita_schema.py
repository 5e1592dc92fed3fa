from pydantic import BaseModel, field_validator
from datetime import datetime

from clinica_dental.core.tiempo import a_hora_local
from clinica_dental.models.cita_model import EstadoCita
from clinica_dental.schemas.catalogo_schema import ClienteOut, OdontologoOut, ServicioOut

class CitaCreate(BaseModel): # datos necesarios para reservar una cita
    cliente_id: int
    odontologo_id: int
    servicio_id: int
    fecha_hora_inicio: datetime
    fecha_hora_fin: datetime

    @field_validator("fecha_hora_inicio", "fecha_hora_fin")
    @classmethod
    def _to_local_naive(cls, v: datetime) -> datetime:
        # Si viene con offset (ej: 2026-01-22T10:00:00-03:00) la llevamos a la hora local de la clínica,
        # que es la que usan los horarios de atención.
        return a_hora_local(v)

class CitaUpdate(BaseModel): # actualización parcial: solo se aplica lo que viene en el request
    cliente_id: int | None = None
    odontologo_id: int | None = None
    servicio_id: int | None = None
    fecha_hora_inicio: datetime | None = None
    fecha_hora_fin: datetime | None = None
    estado: EstadoCita | None = None
    # normalmente las calcula el servidor al cambiar el estado, pero se aceptan explícitas
    fecha_confirmacion: datetime | None = None
    fecha_suspension: datetime | None = None

    @field_validator("fecha_hora_inicio", "fecha_hora_fin", "fecha_confirmacion", "fecha_suspension")
    @classmethod
    def _to_local_naive(cls, v: datetime | None) -> datetime | None:
        if v is None:
            return v
        return a_hora_local(v)

class CitaOut(BaseModel):
    id: int
    cliente_id: int
    odontologo_id: int
    servicio_id: int
    fecha_hora_inicio: datetime
    fecha_hora_fin: datetime
    estado: EstadoCita
    fecha_confirmacion: datetime | None = None
    fecha_suspension: datetime | None = None
    creado_en: datetime | None = None

    # relationships, no son columnas de la tabla citas
    cliente: ClienteOut | None = None
    odontologo: OdontologoOut | None = None
    servicio: ServicioOut | None = None

    model_config = {
        "from_attributes": True
    }
