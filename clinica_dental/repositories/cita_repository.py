import logging
from datetime import datetime

from fastapi import HTTPException
from sqlalchemy.orm import Session, joinedload

from clinica_dental.core.tiempo import ahora
from clinica_dental.models.cita_model import Cita

logger = logging.getLogger(__name__)


class CitaRepository:
    def __init__(self, db: Session):
        self.db = db

    def _vigentes(self):
        return (
            self.db.query(Cita)
            .options(joinedload(Cita.cliente), joinedload(Cita.odontologo), joinedload(Cita.servicio))
            .filter(Cita.eliminado_en.is_(None))
        )

    def listar(self) -> list[Cita]:
        return self._vigentes().order_by(Cita.fecha_hora_inicio.asc(), Cita.id.asc()).all()

    def obtener(self, cita_id: int) -> Cita | None:
        return self._vigentes().filter(Cita.id == cita_id).first()

    def buscar_solapadas(
        self,
        odontologo_id: int,
        inicio: datetime,
        fin: datetime,
        excluir_id: int | None = None,
        inclusivo: bool = True,
    ) -> list[Cita]:
        """
        Citas vigentes del odontólogo que se solapan con [inicio, fin].
        - inclusivo: los extremos que se tocan cuentan como solapamiento (<= / >=).
        - excluir_id: la cita que se está editando no choca consigo misma.
        """
        q = self.db.query(Cita).filter(
            Cita.odontologo_id == odontologo_id,
            Cita.eliminado_en.is_(None),
        )
        if inclusivo:
            q = q.filter(Cita.fecha_hora_inicio <= fin, Cita.fecha_hora_fin >= inicio)
        else:
            q = q.filter(Cita.fecha_hora_inicio < fin, Cita.fecha_hora_fin > inicio)

        if excluir_id is not None:
            q = q.filter(Cita.id != excluir_id)

        return q.order_by(Cita.fecha_hora_inicio.asc()).all()

    def guardar(self, cita: Cita) -> Cita:
        self.db.add(cita)
        try:
            self.db.commit()
        except Exception as e:
            self.db.rollback()
            logger.exception("No se pudo guardar la cita %s", cita.id)
            raise HTTPException(status_code=500, detail="Error al guardar la cita.\n" + str(e))
        self.db.refresh(cita)
        return cita

    def eliminar(self, cita: Cita) -> Cita:
        cita.eliminado_en = ahora()
        return self.guardar(cita)
