"""
Rule table used by the signal rule evaluator.
"""
from dataclasses import dataclass, fields
from typing import Any, Mapping

@dataclass(frozen=True)
class RuleTable:
    """
    Thresholds and bonuses, in seconds. Thresholds are strict (count > threshold).
    """
    base_green_time: int = 25
    moderate_pedestrian_threshold: int = 15
    moderate_pedestrian_bonus: int = 10
    heavy_pedestrian_threshold: int = 30
    heavy_pedestrian_bonus: int = 20
    peak_hour_bonus: int = 5
    vehicle_cap_threshold: int = 40
    vehicle_cap_green_time: int = 45
    max_green_time: int = 60

    def __post_init__(self):
        if self.heavy_pedestrian_threshold <= self.moderate_pedestrian_threshold:
            raise ValueError("heavy_pedestrian_threshold must exceed moderate_pedestrian_threshold")
        if not 0 <= self.base_green_time <= self.max_green_time:
            raise ValueError("base_green_time must lie within [0, max_green_time]")
        if not 0 <= self.vehicle_cap_green_time <= self.max_green_time:
            raise ValueError("vehicle_cap_green_time must lie within [0, max_green_time]")
        for name in ('moderate_pedestrian_bonus', 'heavy_pedestrian_bonus', 'peak_hour_bonus'):
            if getattr(self, name) < 0:
                raise ValueError(f"{name} must be non-negative")

    @classmethod
    def from_config(cls, cfg: Mapping[str, Any]) -> "RuleTable":
        """Builds a table from a config mapping, ignoring unknown keys."""
        known = {f.name for f in fields(cls)}
        return cls(**{k: int(v) for k, v in cfg.items() if k in known})

DEFAULT_RULES = RuleTable()
