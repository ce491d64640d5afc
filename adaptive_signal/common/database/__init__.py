from .database import Base, DATABASE_URL, create_db_engine, create_session_factory, init_db
from .models import SimulationRunDB

__all__ = [
    "Base", "DATABASE_URL", "create_db_engine", "create_session_factory", "init_db",
    "SimulationRunDB"
]
