# Configuración de la aplicación: se lee del entorno (y de un .env si existe)
import logging
import os
from dataclasses import dataclass

from dotenv import load_dotenv

load_dotenv()


def _bool_env(nombre: str, default: bool = False) -> bool:
    valor = os.environ.get(nombre)
    if valor is None:
        return default
    return valor.strip().lower() in ("1", "true", "si", "sí", "yes")


@dataclass(frozen=True)
class Settings:
    database_url: str
    frontend_origin: str
    clinica_timezone: str
    permitir_citas_contiguas: bool
    log_level: str
    port: int


def cargar_settings() -> Settings:
    return Settings(
        database_url=os.environ.get("DATABASE_URL", "sqlite:///./clinica_dental.db"),
        frontend_origin=os.environ.get(
            "FRONTEND_ORIGIN", "https://frontend-sis257-clinica-dental-nlk7.onrender.com"
        ),
        clinica_timezone=os.environ.get("CLINICA_TIMEZONE", "America/La_Paz"),
        permitir_citas_contiguas=_bool_env("PERMITIR_CITAS_CONTIGUAS"),
        log_level=os.environ.get("LOG_LEVEL", "INFO").upper(),
        port=int(os.environ.get("PORT", "3000")),
    )


settings = cargar_settings()


def configurar_logging(nivel: str | None = None):
    logging.basicConfig(
        level=nivel or settings.log_level,
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )
