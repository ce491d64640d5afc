from dataclasses import dataclass, field
from typing import Optional, List

@dataclass
class RuleConfig:
    base_green_time: int = 25
    moderate_pedestrian_threshold: int = 15
    moderate_pedestrian_bonus: int = 10
    heavy_pedestrian_threshold: int = 30
    heavy_pedestrian_bonus: int = 20
    peak_hour_bonus: int = 5
    vehicle_cap_threshold: int = 40
    vehicle_cap_green_time: int = 45
    max_green_time: int = 60

@dataclass
class CycleConfig:
    red_lead_in_seconds: int = 2
    yellow_seconds: int = 3

@dataclass
class PersistenceConfig:
    database_url: Optional[str] = None # Falls back to DATABASE_URL env var

@dataclass
class EstimationConfig:
    type: str = "frame_difference"
    diff_threshold: int = 25
    min_blob_area: float = 20.0
    vehicle_blob_area: float = 1500.0
    max_frames: int = 150
    max_upload_bytes: int = 50 * 1024 * 1024

@dataclass
class AutoModeConfig:
    interval_seconds: float = 10.0
    emergency_green_time: int = 60
    max_pedestrians: int = 50
    max_vehicles: int = 60
    peak_hours: List[int] = field(default_factory=lambda: [7, 8, 9, 17, 18, 19])
    seed: Optional[int] = None
    max_cycles: Optional[int] = None

@dataclass
class ServerConfig:
    host: str = "0.0.0.0"
    port: int = 8000

@dataclass
class LoggingConfig:
    level: str = "INFO"

@dataclass
class SignalConfig:
    rules: RuleConfig = field(default_factory=RuleConfig)
    cycle: CycleConfig = field(default_factory=CycleConfig)
    persistence: PersistenceConfig = field(default_factory=PersistenceConfig)
    estimation: EstimationConfig = field(default_factory=EstimationConfig)
    auto_mode: AutoModeConfig = field(default_factory=AutoModeConfig)
    server: ServerConfig = field(default_factory=ServerConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
