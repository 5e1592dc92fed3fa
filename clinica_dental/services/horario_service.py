# Reglas de horario de atención de la clínica. Funciones puras: no tocan la base de datos.
from datetime import datetime, time
from fastapi import HTTPException

# Franjas permitidas (hora local de la clínica): mañana y tarde
HORARIOS_ATENCION = (
    (time(8, 0), time(12, 30)),
    (time(14, 0), time(18, 0)),
)

MENSAJE_FUERA_DE_HORARIO = "Las citas solo se pueden programar entre 08:00-12:30 y 14:00-18:00."

FORMATO_FECHA_HORA = "%d/%m/%Y %H:%M:%S"


def validar_horario_permitido(inicio: datetime, fin: datetime):
    """
    Lanza 409 si [inicio, fin] no cae completo dentro de una de las franjas de atención.

    Las franjas se arman sobre la fecha de `inicio`, así que una cita que termina otro día
    queda rechazada (su fin se compara contra el límite del mismo día).
    No valida que inicio < fin; eso lo hace quien llama.
    """
    dia = inicio.date()
    for apertura, cierre in HORARIOS_ATENCION:
        if inicio >= datetime.combine(dia, apertura) and fin <= datetime.combine(dia, cierre):
            return
    raise HTTPException(status_code=409, detail=MENSAJE_FUERA_DE_HORARIO)


def formatear_horarios_ocupados(citas) -> str:
    return ", ".join(
        f"De {c.fecha_hora_inicio.strftime(FORMATO_FECHA_HORA)} a {c.fecha_hora_fin.strftime(FORMATO_FECHA_HORA)}"
        for c in citas
    )
