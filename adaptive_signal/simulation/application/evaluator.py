"""
Signal rule evaluator.

Maps pedestrian and vehicle counts plus the peak hour flag to an adaptive
green time. Every rule that fires appends a named adjustment to the
breakdown, so the breakdown always sums to the final green time.
"""
from numbers import Integral, Real
from typing import List, Optional

from ..domain.entities import RiskLevel, RuleAdjustment, SimulationInput, SimulationResult
from ..domain.rules import RuleTable, DEFAULT_RULES
from ...common.exceptions import ValidationError
from ...common.schemas import MAX_COUNT

def _validate_count(name: str, value) -> int:
    if isinstance(value, bool) or not isinstance(value, Real):
        raise ValidationError(f"{name} must be a non-negative integer, got {value!r}")
    if not isinstance(value, Integral):
        if not float(value).is_integer():
            raise ValidationError(f"{name} must be a whole number, got {value!r}")
        value = int(value)
    if value < 0:
        raise ValidationError(f"{name} must be >= 0, got {value}")
    if value > MAX_COUNT:
        raise ValidationError(f"{name} must be <= {MAX_COUNT}, got {value}")
    return int(value)

def validate_input(pedestrians, vehicles, is_peak_hour) -> SimulationInput:
    """
    Validates raw counts and returns a SimulationInput.
    Raises ValidationError naming the violated constraint.
    """
    if not isinstance(is_peak_hour, bool):
        raise ValidationError(f"is_peak_hour must be a boolean, got {is_peak_hour!r}")
    return SimulationInput(
        pedestrians=_validate_count("pedestrians", pedestrians),
        vehicles=_validate_count("vehicles", vehicles),
        is_peak_hour=is_peak_hour
    )


class SignalRuleEvaluator:
    """
    Stateless evaluator over an immutable RuleTable. Safe to share between threads.
    """

    def __init__(self, rules: Optional[RuleTable] = None):
        self.rules = rules or DEFAULT_RULES

    def evaluate(self, pedestrians, vehicles, is_peak_hour) -> SimulationResult:
        return self.evaluate_input(validate_input(pedestrians, vehicles, is_peak_hour))

    def evaluate_input(self, counts: SimulationInput) -> SimulationResult:
        rules = self.rules
        breakdown: List[RuleAdjustment] = []
        clauses: List[str] = []
        green_time = 0

        def apply(rule: str, adjustment: int, clause: str):
            nonlocal green_time
            green_time += adjustment
            breakdown.append(RuleAdjustment(rule=rule, adjustment=adjustment))
            clauses.append(clause)

        apply("Base Time", rules.base_green_time,
              f"Base green time starts at {rules.base_green_time}s.")

        # Pedestrian density, first match wins
        if counts.pedestrians > rules.heavy_pedestrian_threshold:
            apply(f"Heavy Pedestrians (>{rules.heavy_pedestrian_threshold})",
                  rules.heavy_pedestrian_bonus,
                  f"Increased by {rules.heavy_pedestrian_bonus}s due to heavy pedestrian "
                  f"traffic (>{rules.heavy_pedestrian_threshold}).")
            risk_level = RiskLevel.HIGH
        elif counts.pedestrians > rules.moderate_pedestrian_threshold:
            apply(f"Moderate Pedestrians (>{rules.moderate_pedestrian_threshold})",
                  rules.moderate_pedestrian_bonus,
                  f"Increased by {rules.moderate_pedestrian_bonus}s due to moderate pedestrian "
                  f"traffic (>{rules.moderate_pedestrian_threshold}).")
            risk_level = RiskLevel.MODERATE
        else:
            risk_level = RiskLevel.LOW

        if counts.is_peak_hour:
            apply("Peak Hour Bonus", rules.peak_hour_bonus,
                  f"Added {rules.peak_hour_bonus}s bonus for Peak Hour.")

        # Caps are negative corrections so the breakdown keeps summing to the total
        if counts.vehicles > rules.vehicle_cap_threshold and green_time > rules.vehicle_cap_green_time:
            apply("High Vehicle Traffic Cap", rules.vehicle_cap_green_time - green_time,
                  f"Capped at {rules.vehicle_cap_green_time}s due to high vehicle "
                  f"traffic (>{rules.vehicle_cap_threshold}).")

        if green_time > rules.max_green_time:
            apply("Maximum Green Time Cap", rules.max_green_time - green_time,
                  f"Capped at {rules.max_green_time}s maximum green time.")

        return SimulationResult(
            base_green_time=rules.base_green_time,
            adaptive_green_time=green_time,
            risk_level=risk_level,
            explanation=" ".join(clauses),
            breakdown=breakdown
        )
