# En este archivo definimos las rutas o endpoints relacionados con las citas.
from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from clinica_dental.database import get_db
from clinica_dental.repositories.cita_repository import CitaRepository
from clinica_dental.repositories.catalogo_repository import (
    ClienteRepository,
    OdontologoRepository,
    ServicioRepository,
)
from clinica_dental.schemas.catalogo_schema import ServicioOut
from clinica_dental.schemas.cita_schema import CitaCreate, CitaUpdate, CitaOut
from clinica_dental.services.citas_service import CitasService

citas_router = APIRouter(prefix="/citas", tags=["citas"])


def get_citas_service(db: Session = Depends(get_db)) -> CitasService:
    return CitasService(
        citas = CitaRepository(db),
        clientes = ClienteRepository(db),
        odontologos = OdontologoRepository(db),
        servicios = ServicioRepository(db),
    )


@citas_router.post("", response_model=CitaOut, status_code=201)
def crear_cita(payload: CitaCreate, service: CitasService = Depends(get_citas_service)):
    return service.crear(payload)

@citas_router.get("", response_model=list[CitaOut])
def obtener_citas(service: CitasService = Depends(get_citas_service)):
    return service.listar()

# va antes de /{cita_id} para que "odontologos" no se interprete como id
@citas_router.get("/odontologos/{odontologo_id}/servicios", response_model=list[ServicioOut])
def obtener_servicios_por_odontologo(odontologo_id: int, service: CitasService = Depends(get_citas_service)):
    return service.servicios_por_odontologo(odontologo_id)

@citas_router.get("/{cita_id}", response_model=CitaOut)
def obtener_cita_por_id(cita_id: int, service: CitasService = Depends(get_citas_service)):
    return service.obtener(cita_id)

@citas_router.patch("/{cita_id}", response_model=CitaOut)
def actualizar_cita(cita_id: int, payload: CitaUpdate, service: CitasService = Depends(get_citas_service)):
    return service.actualizar(cita_id, payload)

@citas_router.delete("/{cita_id}", response_model=CitaOut)
def eliminar_cita(cita_id: int, service: CitasService = Depends(get_citas_service)):
    return service.eliminar(cita_id)
