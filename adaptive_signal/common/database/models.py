from datetime import datetime, timezone
from sqlalchemy import Column, Integer, String, Boolean
from .database import Base

def _utc_timestamp() -> str:
    return datetime.now(timezone.utc).isoformat()

class SimulationRunDB(Base):
    __tablename__ = "simulation_runs"

    id = Column(Integer, primary_key=True, autoincrement=True, index=True)
    pedestrians = Column(Integer, nullable=False)
    vehicles = Column(Integer, nullable=False)
    is_peak_hour = Column(Boolean, nullable=False)
    calculated_green_time = Column(Integer, nullable=False)
    risk_level = Column(String, nullable=False) # "Low", "Moderate", "High"
    explanation = Column(String, nullable=False)
    created_at = Column(String, nullable=False, default=_utc_timestamp)
