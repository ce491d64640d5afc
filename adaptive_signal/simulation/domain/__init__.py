"""
Domain module initialization.
"""
from .entities import (
    RiskLevel,
    SimulationInput,
    RuleAdjustment,
    SimulationResult,
    SimulationRecord,
    SimulationRun,
    GraphPoint,
    TrafficEstimate,
    TrafficLightState,
    TrafficLightPhase,
    SignalCyclePlan
)
from .protocols import HistoryRepository, TrafficEstimator, CountsProvider
from .rules import RuleTable, DEFAULT_RULES
