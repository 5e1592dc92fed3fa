# Convención del proyecto: todas las fechas se guardan "naive" en hora local de la clínica.
from datetime import datetime
from zoneinfo import ZoneInfo

from clinica_dental.core.config import settings


def zona_clinica() -> ZoneInfo:
    return ZoneInfo(settings.clinica_timezone)


def ahora() -> datetime:
    return datetime.now(zona_clinica()).replace(tzinfo=None)


def a_hora_local(v: datetime) -> datetime:
    """Pasa un datetime con offset a hora local de la clínica sin tzinfo; los naive se asumen ya locales."""
    if v.tzinfo is not None:
        return v.astimezone(zona_clinica()).replace(tzinfo=None)
    return v
