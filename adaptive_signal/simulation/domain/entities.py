"""
Domain entities for the signal simulation module.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import List

class RiskLevel(str, Enum):
    LOW = "Low"
    MODERATE = "Moderate"
    HIGH = "High"

@dataclass(frozen=True)
class SimulationInput:
    """
    Counts observed at the crossing for one evaluation.
    """
    pedestrians: int
    vehicles: int
    is_peak_hour: bool

@dataclass(frozen=True)
class RuleAdjustment:
    """
    A single named adjustment, in seconds, applied by a rule that fired.
    """
    rule: str
    adjustment: int

@dataclass(frozen=True)
class SimulationResult:
    """
    Outcome of evaluating the rule table against a SimulationInput.
    The breakdown adjustments always sum to adaptive_green_time.
    """
    base_green_time: int
    adaptive_green_time: int
    risk_level: RiskLevel
    explanation: str
    breakdown: List[RuleAdjustment] = field(default_factory=list)

@dataclass(frozen=True)
class SimulationRecord:
    """
    A completed simulation as submitted for persistence.
    """
    pedestrians: int
    vehicles: int
    is_peak_hour: bool
    calculated_green_time: int
    risk_level: RiskLevel
    explanation: str

    @classmethod
    def from_result(cls, counts: SimulationInput, result: SimulationResult) -> "SimulationRecord":
        return cls(
            pedestrians=counts.pedestrians,
            vehicles=counts.vehicles,
            is_peak_hour=counts.is_peak_hour,
            calculated_green_time=result.adaptive_green_time,
            risk_level=result.risk_level,
            explanation=result.explanation
        )

@dataclass(frozen=True)
class SimulationRun:
    """
    A persisted simulation record with its store-assigned fields.
    """
    id: int
    pedestrians: int
    vehicles: int
    is_peak_hour: bool
    calculated_green_time: int
    risk_level: RiskLevel
    explanation: str
    created_at: str

@dataclass(frozen=True)
class GraphPoint:
    pedestrians: int
    green_time: int

@dataclass(frozen=True)
class TrafficEstimate:
    """
    Counts estimated from an uploaded image sequence or video.
    """
    estimated_pedestrians: int
    estimated_vehicles: int

class TrafficLightState(Enum):
    RED = "RED"
    YELLOW = "YELLOW"
    GREEN = "GREEN"

@dataclass(frozen=True)
class TrafficLightPhase:
    """
    Represents a phase in the traffic light cycle.
    """
    phase_id: str
    state: TrafficLightState
    duration_seconds: int

@dataclass(frozen=True)
class SignalCyclePlan:
    """
    The timed phase sequence driven by one simulation result.
    """
    generated_at: float
    green_time: int
    phases: List[TrafficLightPhase]

    @property
    def total_seconds(self) -> int:
        return sum(phase.duration_seconds for phase in self.phases)
