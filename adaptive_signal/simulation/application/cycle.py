"""
Timed signal cycle driven by a simulation result.

Sequence: red lead-in, green for the computed duration, yellow, back to red.
"""
import logging
import asyncio
import time
from typing import Awaitable, Callable, Optional

from ..domain.entities import SimulationResult, SignalCyclePlan, TrafficLightPhase, TrafficLightState

logger = logging.getLogger(__name__)

def build_cycle_plan(
    result: SimulationResult,
    red_lead_in_seconds: int = 2,
    yellow_seconds: int = 3
) -> SignalCyclePlan:
    return SignalCyclePlan(
        generated_at=time.time(),
        green_time=result.adaptive_green_time,
        phases=[
            TrafficLightPhase("red_lead_in", TrafficLightState.RED, red_lead_in_seconds),
            TrafficLightPhase("green", TrafficLightState.GREEN, result.adaptive_green_time),
            TrafficLightPhase("yellow", TrafficLightState.YELLOW, yellow_seconds),
            TrafficLightPhase("red_rest", TrafficLightState.RED, 0),
        ]
    )


class SignalCycleRunner:
    """
    Walks a cycle plan phase by phase.
    Cancelling the running task interrupts the current phase.
    """

    def __init__(self, sleep: Callable[[float], Awaitable[None]] = asyncio.sleep):
        self._sleep = sleep
        self.current_phase: Optional[TrafficLightPhase] = None

    async def run(
        self,
        plan: SignalCyclePlan,
        on_phase: Optional[Callable[[TrafficLightPhase], None]] = None
    ) -> None:
        for phase in plan.phases:
            self.current_phase = phase
            logger.debug(f"Phase {phase.phase_id}: {phase.state.value} for {phase.duration_seconds}s")
            if on_phase:
                on_phase(phase)
            if phase.duration_seconds > 0:
                await self._sleep(phase.duration_seconds)
