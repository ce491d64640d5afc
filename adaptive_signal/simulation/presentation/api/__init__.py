"""
API package.
"""
import logging
from fastapi import FastAPI, Request
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from omegaconf import DictConfig

from .routes import simulation, estimation
from ...application.builder import SimulationApplicationBuilder
from ....common.exceptions import ValidationError, StorageError, InternalError

logger = logging.getLogger(__name__)

# Initialize main app
app = FastAPI(title="Adaptive Signal Simulator API")

# Configure CORS
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],  # Allow all origins for development
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

# Include routers
app.include_router(simulation.app.router, tags=["simulation"])
app.include_router(estimation.app.router, tags=["estimation"])

@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(status_code=exc.status_code, content={"message": exc.detail}, headers=exc.headers)

@app.exception_handler(RequestValidationError)
async def request_validation_handler(request: Request, exc: RequestValidationError):
    return JSONResponse(status_code=400, content={"message": jsonable_encoder(exc.errors())})

@app.exception_handler(ValidationError)
async def validation_error_handler(request: Request, exc: ValidationError):
    return JSONResponse(status_code=400, content={"message": str(exc)})

@app.exception_handler(StorageError)
async def storage_error_handler(request: Request, exc: StorageError):
    logger.error(f"Storage failure on {request.url.path}: {exc}")
    return JSONResponse(status_code=500, content={"message": "History store unavailable"})

@app.exception_handler(InternalError)
async def internal_error_handler(request: Request, exc: InternalError):
    return JSONResponse(status_code=500, content={"message": "Internal server error"})

@app.get("/status")
def status():
    return {"status": "running", "service_ready": simulation._service is not None}

def configure(cfg: DictConfig) -> SimulationApplicationBuilder:
    """Builds the application components from config and wires them into the routes."""
    builder = SimulationApplicationBuilder(cfg)
    simulation.init_service(builder.build_service())
    estimation.init_estimator(
        builder.build_estimator().estimator,
        max_upload_bytes=cfg.signal.estimation.max_upload_bytes
    )
    return builder
