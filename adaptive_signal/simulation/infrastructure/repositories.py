import logging
from typing import List
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import sessionmaker

from ..domain import HistoryRepository, RiskLevel, SimulationRecord, SimulationRun
from ...common.database import SimulationRunDB
from ...common.exceptions import StorageError
from ...common.logging import log_execution_time

logger = logging.getLogger(__name__)


class SQLAlchemyHistoryRepository(HistoryRepository):
    """
    Stores simulation runs in the simulation_runs table.
    Ids come from the database autoincrement, so concurrent appends never collide.
    """
    def __init__(self, session_factory: sessionmaker):
        self.session_factory = session_factory

    @staticmethod
    def _to_entity(row: SimulationRunDB) -> SimulationRun:
        return SimulationRun(
            id=row.id,
            pedestrians=row.pedestrians,
            vehicles=row.vehicles,
            is_peak_hour=row.is_peak_hour,
            calculated_green_time=row.calculated_green_time,
            risk_level=RiskLevel(row.risk_level),
            explanation=row.explanation,
            created_at=row.created_at
        )

    @log_execution_time(logger)
    def append(self, record: SimulationRecord) -> SimulationRun:
        try:
            with self.session_factory() as session:
                row = SimulationRunDB(
                    pedestrians=record.pedestrians,
                    vehicles=record.vehicles,
                    is_peak_hour=record.is_peak_hour,
                    calculated_green_time=record.calculated_green_time,
                    risk_level=RiskLevel(record.risk_level).value,
                    explanation=record.explanation
                )
                session.add(row)
                session.commit()
                session.refresh(row)
                return self._to_entity(row)
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to persist simulation run: {e}") from e

    @log_execution_time(logger)
    def list_all(self) -> List[SimulationRun]:
        try:
            with self.session_factory() as session:
                rows = session.query(SimulationRunDB).order_by(SimulationRunDB.id).all()
                return [self._to_entity(row) for row in rows]
        except SQLAlchemyError as e:
            raise StorageError(f"Failed to read simulation history: {e}") from e
