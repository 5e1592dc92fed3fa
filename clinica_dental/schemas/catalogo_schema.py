from decimal import Decimal
from pydantic import BaseModel

class ClienteOut(BaseModel):
    id: int
    nombres: str
    apellidos: str
    telefono: str | None = None
    email: str | None = None

    model_config = {
        "from_attributes": True
    }

class OdontologoOut(BaseModel):
    id: int
    nombres: str
    apellidos: str
    especialidad: str | None = None

    model_config = {
        "from_attributes": True
    }

class ServicioOut(BaseModel):
    id: int
    nombre: str
    descripcion: str | None = None
    precio: Decimal

    model_config = {
        "from_attributes": True
    }
