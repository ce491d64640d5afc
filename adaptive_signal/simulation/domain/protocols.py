"""
Domain protocols for the signal simulation module.
"""
from typing import List, Protocol
from .entities import SimulationRecord, SimulationRun, TrafficEstimate, SimulationInput

class HistoryRepository(Protocol):
    """
    Append-only log of completed simulation runs.
    """
    def append(self, record: SimulationRecord) -> SimulationRun:
        ...

    def list_all(self) -> List[SimulationRun]:
        ...

class TrafficEstimator(Protocol):
    """
    Estimates pedestrian and vehicle counts from an uploaded file.
    """
    def estimate(self, payload: bytes, filename: str) -> TrafficEstimate:
        ...

class CountsProvider(Protocol):
    """
    Supplies the counts for the next automatic cycle.
    """
    def __call__(self) -> SimulationInput:
        ...
