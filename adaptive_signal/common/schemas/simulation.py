from enum import Enum
from typing import List, Literal
from pydantic import BaseModel, ConfigDict, Field, field_validator
from pydantic.alias_generators import to_camel

# Largest count a 32-bit INTEGER column holds
MAX_COUNT = 2**31 - 1

RiskLevelLabel = Literal['Low', 'Moderate', 'High']

class CamelModel(BaseModel):
    """
    Snake_case attributes, camelCase on the wire.
    """
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, from_attributes=True)

class CalculateSignalRequest(CamelModel):
    """
    Counts submitted for a single evaluation.
    """
    pedestrians: int = Field(..., ge=0, le=MAX_COUNT, strict=True, description="Pedestrians waiting to cross")
    vehicles: int = Field(..., ge=0, le=MAX_COUNT, strict=True, description="Vehicles queued at the signal")
    is_peak_hour: bool = Field(..., strict=True, description="Whether the peak hour bonus applies")

class RuleAdjustmentSchema(CamelModel):
    rule: str = Field(..., description="Label of the rule that fired")
    adjustment: int = Field(..., description="Signed adjustment in seconds")

class RiskLevelMixin(CamelModel):
    risk_level: RiskLevelLabel = Field(..., description="Low, Moderate or High")

    @field_validator('risk_level', mode='before')
    @classmethod
    def unwrap_enum(cls, value):
        return value.value if isinstance(value, Enum) else value

class SimulationResultSchema(RiskLevelMixin):
    """
    Evaluation result. The breakdown adjustments sum to adaptive_green_time.
    """
    base_green_time: int = Field(..., description="Base green time in seconds")
    adaptive_green_time: int = Field(..., ge=0, description="Final green time in seconds")
    explanation: str = Field(..., description="One clause per rule that fired")
    breakdown: List[RuleAdjustmentSchema] = Field(default_factory=list, description="Adjustments in firing order")

class SimulationRunCreate(RiskLevelMixin):
    """
    A completed simulation submitted for persistence.
    """
    pedestrians: int = Field(..., ge=0, le=MAX_COUNT, strict=True)
    vehicles: int = Field(..., ge=0, le=MAX_COUNT, strict=True)
    is_peak_hour: bool = Field(..., strict=True)
    calculated_green_time: int = Field(..., ge=0, le=MAX_COUNT, strict=True, description="Green time that was played")
    explanation: str

class SimulationRunSchema(SimulationRunCreate):
    """
    A stored simulation run.
    Corresponds to the simulation_runs table.
    """
    id: int = Field(..., description="Sequential identifier assigned by the store")
    created_at: str = Field(..., description="Server-assigned ISO-8601 timestamp")

class GraphPointSchema(CamelModel):
    pedestrians: int
    green_time: int

class TrafficEstimateSchema(CamelModel):
    estimated_pedestrians: int = Field(..., ge=0)
    estimated_vehicles: int = Field(..., ge=0)
