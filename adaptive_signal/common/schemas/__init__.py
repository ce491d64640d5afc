from .simulation import (
    MAX_COUNT,
    CalculateSignalRequest,
    RuleAdjustmentSchema,
    SimulationResultSchema,
    SimulationRunCreate,
    SimulationRunSchema,
    GraphPointSchema,
    TrafficEstimateSchema,
)

__all__ = [
    "MAX_COUNT",
    "CalculateSignalRequest",
    "RuleAdjustmentSchema",
    "SimulationResultSchema",
    "SimulationRunCreate",
    "SimulationRunSchema",
    "GraphPointSchema",
    "TrafficEstimateSchema",
]
