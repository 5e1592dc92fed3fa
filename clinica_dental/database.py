from sqlalchemy import create_engine
from sqlalchemy.orm import declarative_base, sessionmaker

from clinica_dental.core.config import settings

# check_same_thread solo aplica a sqlite (FastAPI atiende requests en otro hilo)
connect_args = {"check_same_thread": False} if settings.database_url.startswith("sqlite") else {}

engine = create_engine(settings.database_url, connect_args=connect_args)
SessionLocal = sessionmaker(bind=engine, autocommit=False, autoflush=False)

Base = declarative_base()


def get_db():
    db = SessionLocal()
    try:
        yield db
    finally:
        db.close()
