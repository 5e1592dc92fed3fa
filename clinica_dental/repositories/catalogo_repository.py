# Acceso a clientes, odontólogos y servicios. Las citas solo los consultan (el ABM vive en otro módulo).
from sqlalchemy.orm import Session
from sqlalchemy import select

from clinica_dental.models.cliente_model import Cliente
from clinica_dental.models.odontologo_model import Odontologo, odontologo_servicios
from clinica_dental.models.servicio_model import Servicio


class ClienteRepository:
    def __init__(self, db: Session):
        self.db = db

    def obtener(self, cliente_id: int) -> Cliente | None:
        return self.db.execute(
            select(Cliente).where(Cliente.id == cliente_id, Cliente.eliminado_en.is_(None))
        ).scalar_one_or_none()


class OdontologoRepository:
    def __init__(self, db: Session):
        self.db = db

    def obtener(self, odontologo_id: int) -> Odontologo | None:
        return self.db.execute(
            select(Odontologo).where(Odontologo.id == odontologo_id, Odontologo.eliminado_en.is_(None))
        ).scalar_one_or_none()


class ServicioRepository:
    def __init__(self, db: Session):
        self.db = db

    def obtener(self, servicio_id: int) -> Servicio | None:
        return self.db.execute(
            select(Servicio).where(Servicio.id == servicio_id, Servicio.eliminado_en.is_(None))
        ).scalar_one_or_none()

    def listar_por_odontologo(self, odontologo_id: int) -> list[Servicio]:
        return list(
            self.db.execute(
                select(Servicio)
                .join(odontologo_servicios, odontologo_servicios.c.servicio_id == Servicio.id)
                .where(
                    odontologo_servicios.c.odontologo_id == odontologo_id,
                    Servicio.eliminado_en.is_(None),
                )
                .order_by(Servicio.id)
            ).scalars().all()
        )
