"""
API for signal simulation: calculate, save, history and graph data.
"""
import logging
from contextlib import contextmanager
from fastapi import FastAPI, HTTPException
from typing import List, Optional

from ....application.service import SimulationService
from ....domain import RiskLevel, SimulationRecord
from .....common.exceptions import SignalError, InternalError
from .....common.schemas import (
    CalculateSignalRequest, SimulationResultSchema, SimulationRunCreate,
    SimulationRunSchema, GraphPointSchema
)

logger = logging.getLogger(__name__)

app = FastAPI()

# Singleton
_service: Optional[SimulationService] = None

def init_service(service: Optional[SimulationService]):
    global _service
    _service = service

def get_service() -> SimulationService:
    if _service is None:
        raise HTTPException(500, "Simulation service not initialized")
    return _service

@contextmanager
def reraise_unexpected(operation: str):
    """Reports anything that is not a SignalError as a generic InternalError."""
    try:
        yield
    except SignalError:
        raise
    except Exception as e:
        logger.error(f"{operation} failed unexpectedly: {e}", exc_info=True)
        raise InternalError("Internal server error") from e

@app.post("/api/simulation/calculate", response_model=SimulationResultSchema)
def calculate(request: CalculateSignalRequest):
    """Evaluates the rule table for the submitted counts."""
    service = get_service()
    with reraise_unexpected("calculate"):
        result = service.calculate(request.pedestrians, request.vehicles, request.is_peak_hour)
    return SimulationResultSchema.model_validate(result)

@app.post("/api/simulation/save", response_model=SimulationRunSchema, status_code=201)
def save(run: SimulationRunCreate):
    """Appends a completed simulation to the history log."""
    service = get_service()
    with reraise_unexpected("save"):
        record = SimulationRecord(**{**run.model_dump(), "risk_level": RiskLevel(run.risk_level)})
        stored = service.save(record)
    return SimulationRunSchema.model_validate(stored)

@app.get("/api/simulation/history", response_model=List[SimulationRunSchema])
def history():
    """All stored runs in ascending id order."""
    service = get_service()
    with reraise_unexpected("history"):
        runs = service.history()
    return [SimulationRunSchema.model_validate(run) for run in runs]

@app.get("/api/simulation/graph-data", response_model=List[GraphPointSchema])
def graph_data():
    """Green time vs pedestrians, vehicles fixed at 20 and peak hour off."""
    service = get_service()
    return [GraphPointSchema.model_validate(point) for point in service.graph_data()]
