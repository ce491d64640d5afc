"""
Auto-adaptive control loop with emergency override.
"""
import logging
import asyncio
from typing import Optional

from ..domain.entities import (
    RiskLevel, RuleAdjustment, SimulationInput, SimulationRecord, SimulationResult, SimulationRun
)
from ..domain.protocols import CountsProvider, HistoryRepository
from .cycle import SignalCycleRunner, build_cycle_plan
from .evaluator import SignalRuleEvaluator
from ...common.metrics import CycleMetricsCollector

logger = logging.getLogger(__name__)


class AutoAdaptiveController:
    """
    Periodically reads counts, evaluates them, plays the resulting cycle
    and logs the run to history.

    While emergency mode is set the evaluator is bypassed and every cycle
    holds green for emergency_green_time.
    """

    def __init__(
        self,
        evaluator: SignalRuleEvaluator,
        repository: HistoryRepository,
        counts_provider: CountsProvider,
        runner: Optional[SignalCycleRunner] = None,
        metrics: Optional[CycleMetricsCollector] = None,
        interval_seconds: float = 10.0,
        emergency_green_time: int = 60,
        red_lead_in_seconds: int = 2,
        yellow_seconds: int = 3
    ):
        base = evaluator.rules.base_green_time
        if not base <= emergency_green_time <= evaluator.rules.max_green_time:
            raise ValueError(
                f"emergency_green_time must lie within [{base}, {evaluator.rules.max_green_time}]"
            )
        self.evaluator = evaluator
        self.repository = repository
        self.counts_provider = counts_provider
        self.runner = runner or SignalCycleRunner()
        self.metrics = metrics or CycleMetricsCollector(is_auto_mode=True)
        self.interval_seconds = interval_seconds
        self.emergency_green_time = emergency_green_time
        self.red_lead_in_seconds = red_lead_in_seconds
        self.yellow_seconds = yellow_seconds
        self.emergency_active = False
        self._stop_event = asyncio.Event()

    def set_emergency(self, active: bool):
        if active != self.emergency_active:
            logger.warning(f"Emergency override {'engaged' if active else 'released'}")
        self.emergency_active = active

    def emergency_result(self) -> SimulationResult:
        base = self.evaluator.rules.base_green_time
        return SimulationResult(
            base_green_time=base,
            adaptive_green_time=self.emergency_green_time,
            risk_level=RiskLevel.HIGH,
            explanation=f"Emergency override active: green held at {self.emergency_green_time}s.",
            breakdown=[
                RuleAdjustment(rule="Base Time", adjustment=base),
                RuleAdjustment(rule="Emergency Override", adjustment=self.emergency_green_time - base),
            ]
        )

    def decide(self, counts: SimulationInput) -> SimulationResult:
        if self.emergency_active:
            return self.emergency_result()
        return self.evaluator.evaluate_input(counts)

    async def run_cycle(self) -> SimulationRun:
        counts = self.counts_provider()
        result = self.decide(counts)
        plan = build_cycle_plan(result, self.red_lead_in_seconds, self.yellow_seconds)

        await self.runner.run(plan)

        run = self.repository.append(SimulationRecord.from_result(counts, result))
        self.metrics.record_cycle(plan)
        logger.info(
            f"Cycle {run.id} finished: {counts.pedestrians} pedestrians, {counts.vehicles} vehicles, "
            f"green {result.adaptive_green_time}s, risk {result.risk_level.value}"
        )
        return run

    async def run(self, max_cycles: Optional[int] = None) -> int:
        """Runs cycles until stop() is called or max_cycles is reached. Returns cycles run."""
        self._stop_event.clear()
        cycles = 0
        while not self._stop_event.is_set():
            await self.run_cycle()
            cycles += 1
            if max_cycles is not None and cycles >= max_cycles:
                break
            try:
                await asyncio.wait_for(self._stop_event.wait(), timeout=self.interval_seconds)
            except asyncio.TimeoutError:
                pass
        logger.info(f"Auto mode stopped after {cycles} cycles: {self.metrics.get_metrics().to_dict()}")
        return cycles

    def stop(self):
        self._stop_event.set()
