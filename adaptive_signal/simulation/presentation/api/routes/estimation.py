"""
API for estimating counts from an uploaded video.
"""
from fastapi import FastAPI, HTTPException, UploadFile, File
from starlette.concurrency import run_in_threadpool
from typing import Optional

from ....domain import TrafficEstimator
from .....common.exceptions import ValidationError
from .....common.schemas import TrafficEstimateSchema
from .simulation import reraise_unexpected

DEFAULT_MAX_UPLOAD_BYTES = 50 * 1024 * 1024

app = FastAPI()

# Singleton
_estimator: Optional[TrafficEstimator] = None
_max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES

def init_estimator(estimator: Optional[TrafficEstimator], max_upload_bytes: int = DEFAULT_MAX_UPLOAD_BYTES):
    global _estimator, _max_upload_bytes
    _estimator = estimator
    _max_upload_bytes = max_upload_bytes

def get_estimator() -> TrafficEstimator:
    if _estimator is None:
        raise HTTPException(500, "Estimator not initialized")
    return _estimator

@app.post("/api/simulation/estimate", response_model=TrafficEstimateSchema)
async def estimate(file: UploadFile = File(...)):
    """
    Estimates pedestrian and vehicle counts from an uploaded clip.
    The result can be fed straight into /api/simulation/calculate.
    """
    estimator = get_estimator()
    # One byte past the limit is enough to detect an oversized upload
    payload = await file.read(_max_upload_bytes + 1)
    if len(payload) > _max_upload_bytes:
        raise ValidationError(f"Upload exceeds {_max_upload_bytes} bytes")
    with reraise_unexpected("estimate"):
        result = await run_in_threadpool(estimator.estimate, payload, file.filename or "")
    return TrafficEstimateSchema.model_validate(result)
