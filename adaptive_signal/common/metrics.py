from dataclasses import dataclass
from datetime import datetime, timezone
from typing import Dict, List, Optional

@dataclass
class CycleMetrics:
    """Session-level signal cycle metrics"""
    total_cycles: int
    avg_vehicle_wait: float
    avg_pedestrian_wait: float
    last_priority_shift: Optional[str]
    is_auto_mode: bool

    def to_dict(self) -> Dict:
        return {
            'total_cycles': self.total_cycles,
            'avg_vehicle_wait': self.avg_vehicle_wait,
            'avg_pedestrian_wait': self.avg_pedestrian_wait,
            'last_priority_shift': self.last_priority_shift,
            'is_auto_mode': self.is_auto_mode
        }


class CycleMetricsCollector:
    """Collects and aggregates cycle metrics for the current session"""

    def __init__(self, is_auto_mode: bool = False):
        self.vehicle_waits: List[float] = []
        self.pedestrian_waits: List[float] = []
        self.total_cycles = 0
        self.last_priority_shift: Optional[str] = None
        self.is_auto_mode = is_auto_mode

    def record_cycle(self, plan) -> None:
        """
        Records a completed cycle plan.

        Vehicles hold through the green and yellow phases, pedestrians
        through the red lead-in.
        """
        vehicle_wait = 0
        pedestrian_wait = 0
        for phase in plan.phases:
            if phase.phase_id in ('green', 'yellow'):
                vehicle_wait += phase.duration_seconds
            elif phase.phase_id == 'red_lead_in':
                pedestrian_wait += phase.duration_seconds

        self.vehicle_waits.append(vehicle_wait)
        self.pedestrian_waits.append(pedestrian_wait)
        # Keep buffer size manageable
        if len(self.vehicle_waits) > 1000:
            self.vehicle_waits.pop(0)
        if len(self.pedestrian_waits) > 1000:
            self.pedestrian_waits.pop(0)

        self.total_cycles += 1
        self.last_priority_shift = datetime.now(timezone.utc).isoformat()

    def get_metrics(self) -> CycleMetrics:
        avg_vehicle = sum(self.vehicle_waits) / len(self.vehicle_waits) if self.vehicle_waits else 0.0
        avg_pedestrian = sum(self.pedestrian_waits) / len(self.pedestrian_waits) if self.pedestrian_waits else 0.0

        return CycleMetrics(
            total_cycles=self.total_cycles,
            avg_vehicle_wait=avg_vehicle,
            avg_pedestrian_wait=avg_pedestrian,
            last_priority_shift=self.last_priority_shift,
            is_auto_mode=self.is_auto_mode
        )
