import pytest
from sqlalchemy import create_engine
from sqlalchemy.pool import StaticPool

from adaptive_signal.common.database import create_session_factory, init_db
from adaptive_signal.simulation.application import SignalRuleEvaluator, SimulationService
from adaptive_signal.simulation.infrastructure.repositories import SQLAlchemyHistoryRepository
from adaptive_signal.simulation.domain import RiskLevel, SimulationRecord

@pytest.fixture
def evaluator():
    return SignalRuleEvaluator()

@pytest.fixture
def engine():
    engine = create_engine(
        "sqlite://",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool
    )
    init_db(engine)
    yield engine
    engine.dispose()

@pytest.fixture
def repository(engine):
    return SQLAlchemyHistoryRepository(create_session_factory(engine))

@pytest.fixture
def service(evaluator, repository):
    return SimulationService(evaluator, repository)

@pytest.fixture
def sample_record():
    return SimulationRecord(
        pedestrians=20,
        vehicles=10,
        is_peak_hour=False,
        calculated_green_time=35,
        risk_level=RiskLevel.MODERATE,
        explanation="Base green time starts at 25s. Increased by 10s due to moderate pedestrian traffic (>15)."
    )
