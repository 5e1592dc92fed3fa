import logging

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from clinica_dental import models  # noqa: F401  registra las tablas en Base.metadata
from clinica_dental.api.citas_router import citas_router
from clinica_dental.core.config import settings, configurar_logging
from clinica_dental.database import Base, engine

configurar_logging()
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Api Rest Clínica Dental",
    description="Gestión de citas de la clínica: clientes, odontólogos y servicios",
    version="1.0",
    docs_url="/apidoc",
)

# CORS solo para el frontend de la clínica
app.add_middleware(
    CORSMiddleware,
    allow_origins=[settings.frontend_origin],
    allow_methods=["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"],
    allow_headers=["*"],
    allow_credentials=True,
)

app.include_router(citas_router, prefix="/api/v1")

@app.get("/health")
def health_check():
    return {"status": "ok"}

@app.on_event("startup")
def crear_tablas():
    Base.metadata.create_all(bind=engine)
    logger.info("Tablas creadas/verificadas en %s", engine.url.render_as_string(hide_password=True))


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("clinica_dental.main:app", host="0.0.0.0", port=settings.port)
