import os

os.environ.setdefault("DATABASE_URL", "sqlite://")

from datetime import datetime
from decimal import Decimal

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import sessionmaker
from sqlalchemy.pool import StaticPool

from clinica_dental.database import Base, get_db
from clinica_dental.main import app
from clinica_dental.models import Cliente, Odontologo, Servicio
from clinica_dental.repositories.cita_repository import CitaRepository
from clinica_dental.repositories.catalogo_repository import (
    ClienteRepository,
    OdontologoRepository,
    ServicioRepository,
)
from clinica_dental.services.citas_service import CitasService

# día hábil cualquiera para armar los horarios de prueba
DIA = datetime(2030, 3, 4)


def en(hora: int, minuto: int = 0) -> datetime:
    return DIA.replace(hour=hora, minute=minuto)


@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )
    Base.metadata.create_all(bind=engine)
    yield engine
    Base.metadata.drop_all(bind=engine)
    engine.dispose()


@pytest.fixture
def db(engine):
    Session = sessionmaker(bind=engine, autocommit=False, autoflush=False)
    session = Session()

    limpieza = Servicio(id=1, nombre="Limpieza", descripcion="Profilaxis dental", precio=Decimal("150.00"))
    extraccion = Servicio(id=2, nombre="Extracción", precio=Decimal("300.00"))
    ortodoncia = Servicio(id=3, nombre="Ortodoncia", precio=Decimal("2500.00"))
    session.add_all([
        Cliente(id=1, nombres="Ana", apellidos="Quispe", telefono="70000001"),
        Cliente(id=2, nombres="Luis", apellidos="Mamani"),
        Odontologo(id=1, nombres="Carla", apellidos="Rojas", especialidad="General",
                   servicios=[limpieza, extraccion]),
        Odontologo(id=2, nombres="Jorge", apellidos="Vargas", especialidad="Ortodoncia"),
        ortodoncia,
    ])
    session.commit()

    yield session
    session.close()


@pytest.fixture
def service(db):
    return CitasService(
        citas=CitaRepository(db),
        clientes=ClienteRepository(db),
        odontologos=OdontologoRepository(db),
        servicios=ServicioRepository(db),
        permitir_contiguas=False,
    )


@pytest.fixture
def client(db):
    def _get_db():
        yield db

    app.dependency_overrides[get_db] = _get_db
    yield TestClient(app)
    app.dependency_overrides.clear()
