#acá va la lógica de las citas y no en los endpoints que están en clinica_dental/api/citas_router.py
import logging
from datetime import datetime

from fastapi import HTTPException

from clinica_dental.core.config import settings
from clinica_dental.core.tiempo import ahora
from clinica_dental.models.cita_model import Cita, EstadoCita
from clinica_dental.repositories.cita_repository import CitaRepository
from clinica_dental.repositories.catalogo_repository import (
    ClienteRepository,
    OdontologoRepository,
    ServicioRepository,
)
from clinica_dental.schemas.cita_schema import CitaCreate, CitaUpdate
from clinica_dental.services.horario_service import validar_horario_permitido, formatear_horarios_ocupados

logger = logging.getLogger(__name__)


class CitasService:
    def __init__(
        self,
        citas: CitaRepository,
        clientes: ClienteRepository,
        odontologos: OdontologoRepository,
        servicios: ServicioRepository,
        permitir_contiguas: bool | None = None,
    ):
        self.citas = citas
        self.clientes = clientes
        self.odontologos = odontologos
        self.servicios = servicios
        # por defecto dos citas que se tocan en un extremo (09:00-10:00 y 10:00-11:00) se consideran solapadas
        if permitir_contiguas is None:
            permitir_contiguas = settings.permitir_citas_contiguas
        self.permitir_contiguas = permitir_contiguas

    # --- validaciones ---

    def _validar_cliente(self, cliente_id: int):
        if not self.clientes.obtener(cliente_id):
            raise HTTPException(status_code=404, detail=f"El cliente con ID {cliente_id} no existe")

    def _validar_odontologo(self, odontologo_id: int):
        if not self.odontologos.obtener(odontologo_id):
            raise HTTPException(status_code=404, detail=f"El odontólogo con ID {odontologo_id} no existe")

    def _validar_servicio(self, servicio_id: int):
        if not self.servicios.obtener(servicio_id):
            raise HTTPException(status_code=404, detail=f"El servicio con ID {servicio_id} no existe")

    def _validar_agenda(
        self,
        odontologo_id: int,
        inicio: datetime,
        fin: datetime,
        excluir_id: int | None = None,
    ):
        if fin <= inicio:
            raise HTTPException(status_code=400, detail="fecha_hora_fin debe ser mayor que fecha_hora_inicio")

        validar_horario_permitido(inicio, fin)

        ocupadas = self.citas.buscar_solapadas(
            odontologo_id,
            inicio,
            fin,
            excluir_id=excluir_id,
            inclusivo=not self.permitir_contiguas,
        )
        if ocupadas:
            horarios = formatear_horarios_ocupados(ocupadas)
            logger.info(
                "Cita rechazada: odontólogo %s ocupado entre %s y %s (%d citas)",
                odontologo_id, inicio, fin, len(ocupadas),
            )
            raise HTTPException(
                status_code=409,
                detail=(
                    "El odontólogo seleccionado ya tiene citas en el rango de horas especificado. "
                    f"Horarios ocupados: {horarios}."
                ),
            )

    # --- operaciones ---

    def crear(self, payload: CitaCreate) -> Cita:
        self._validar_cliente(payload.cliente_id)
        self._validar_odontologo(payload.odontologo_id)
        self._validar_servicio(payload.servicio_id)
        self._validar_agenda(payload.odontologo_id, payload.fecha_hora_inicio, payload.fecha_hora_fin)

        cita = Cita(
            cliente_id = payload.cliente_id,
            odontologo_id = payload.odontologo_id,
            servicio_id = payload.servicio_id,
            fecha_hora_inicio = payload.fecha_hora_inicio,
            fecha_hora_fin = payload.fecha_hora_fin,
            estado = EstadoCita.PENDIENTE.value,
        )
        cita = self.citas.guardar(cita)
        logger.info("Cita %s creada para el odontólogo %s", cita.id, cita.odontologo_id)
        return cita

    def listar(self) -> list[Cita]:
        return self.citas.listar()

    def obtener(self, cita_id: int) -> Cita:
        cita = self.citas.obtener(cita_id)
        if not cita:
            raise HTTPException(status_code=404, detail=f"La cita con ID {cita_id} no existe")
        return cita

    def actualizar(self, cita_id: int, payload: CitaUpdate) -> Cita:
        cita = self.obtener(cita_id)

        if payload.cliente_id is not None and payload.cliente_id != cita.cliente_id:
            self._validar_cliente(payload.cliente_id)
        if payload.odontologo_id is not None and payload.odontologo_id != cita.odontologo_id:
            self._validar_odontologo(payload.odontologo_id)
        if payload.servicio_id is not None and payload.servicio_id != cita.servicio_id:
            self._validar_servicio(payload.servicio_id)

        # la agenda se revisa si cambia el horario o el odontólogo; lo que no viene se toma de la cita guardada
        odontologo_id = payload.odontologo_id if payload.odontologo_id is not None else cita.odontologo_id
        inicio = payload.fecha_hora_inicio if payload.fecha_hora_inicio is not None else cita.fecha_hora_inicio
        fin = payload.fecha_hora_fin if payload.fecha_hora_fin is not None else cita.fecha_hora_fin
        cambia_agenda = (
            payload.fecha_hora_inicio is not None
            or payload.fecha_hora_fin is not None
            or odontologo_id != cita.odontologo_id
        )
        if cambia_agenda:
            self._validar_agenda(odontologo_id, inicio, fin, excluir_id=cita.id)

        # Recién ahora se toca el objeto: campo por campo, solo lo que vino en el request
        cita.cliente_id = payload.cliente_id if payload.cliente_id is not None else cita.cliente_id
        cita.odontologo_id = odontologo_id
        cita.servicio_id = payload.servicio_id if payload.servicio_id is not None else cita.servicio_id
        cita.fecha_hora_inicio = inicio
        cita.fecha_hora_fin = fin

        if payload.estado is not None:
            cita.estado = payload.estado.value
            if payload.estado == EstadoCita.CONFIRMADO:
                cita.fecha_confirmacion = ahora()
            elif payload.estado == EstadoCita.RECHAZADO:
                cita.fecha_suspension = ahora()

        # si el cliente manda las fechas de estado explícitas, ganan sobre las calculadas
        enviados = payload.model_fields_set
        if "fecha_confirmacion" in enviados:
            cita.fecha_confirmacion = payload.fecha_confirmacion
        if "fecha_suspension" in enviados:
            cita.fecha_suspension = payload.fecha_suspension

        cita = self.citas.guardar(cita)
        logger.info("Cita %s actualizada (campos: %s)", cita.id, ", ".join(sorted(enviados)))
        return cita

    def eliminar(self, cita_id: int) -> Cita:
        cita = self.obtener(cita_id)
        cita = self.citas.eliminar(cita)
        logger.info("Cita %s eliminada (soft delete)", cita.id)
        return cita

    def servicios_por_odontologo(self, odontologo_id: int):
        # odontólogo inexistente -> 404; existente sin servicios -> lista vacía
        self._validar_odontologo(odontologo_id)
        return self.servicios.listar_por_odontologo(odontologo_id)
