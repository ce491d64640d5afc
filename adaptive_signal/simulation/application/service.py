"""
Application service exposing the simulation operations.
"""
import logging
from typing import List

from ..domain.entities import GraphPoint, SimulationRecord, SimulationResult, SimulationRun
from ..domain.protocols import HistoryRepository
from .evaluator import SignalRuleEvaluator
from .graph import generate_graph_samples

logger = logging.getLogger(__name__)


class SimulationService:
    def __init__(self, evaluator: SignalRuleEvaluator, repository: HistoryRepository):
        self.evaluator = evaluator
        self.repository = repository

    def calculate(self, pedestrians, vehicles, is_peak_hour) -> SimulationResult:
        result = self.evaluator.evaluate(pedestrians, vehicles, is_peak_hour)
        logger.info(
            f"Calculated {result.adaptive_green_time}s green ({result.risk_level.value}) "
            f"for {pedestrians} pedestrians, {vehicles} vehicles, peak={is_peak_hour}"
        )
        return result

    def save(self, record: SimulationRecord) -> SimulationRun:
        run = self.repository.append(record)
        logger.info(f"Saved simulation run {run.id}")
        return run

    def history(self) -> List[SimulationRun]:
        return self.repository.list_all()

    def graph_data(self) -> List[GraphPoint]:
        return generate_graph_samples(self.evaluator)
