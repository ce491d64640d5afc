import asyncio
import pytest
from unittest.mock import MagicMock
from adaptive_signal.common.metrics import CycleMetricsCollector
from adaptive_signal.simulation.application.controller import AutoAdaptiveController
from adaptive_signal.simulation.application.cycle import SignalCycleRunner
from adaptive_signal.simulation.domain import RiskLevel, SimulationInput

async def no_sleep(seconds):
    return None

@pytest.fixture
def counts():
    return MagicMock(return_value=SimulationInput(pedestrians=35, vehicles=45, is_peak_hour=True))

@pytest.fixture
def controller(evaluator, repository, counts):
    return AutoAdaptiveController(
        evaluator=evaluator,
        repository=repository,
        counts_provider=counts,
        runner=SignalCycleRunner(sleep=no_sleep),
        metrics=CycleMetricsCollector(is_auto_mode=True),
        interval_seconds=0
    )

def test_decide_uses_evaluator(controller):
    result = controller.decide(SimulationInput(20, 10, False))
    assert result.adaptive_green_time == 35
    assert result.risk_level == RiskLevel.MODERATE

def test_emergency_override_forces_fixed_result(controller):
    controller.set_emergency(True)
    result = controller.decide(SimulationInput(0, 0, False))
    assert result.adaptive_green_time == 60
    assert result.risk_level == RiskLevel.HIGH
    assert [(b.rule, b.adjustment) for b in result.breakdown] == [("Base Time", 25), ("Emergency Override", 35)]
    assert sum(b.adjustment for b in result.breakdown) == result.adaptive_green_time

def test_emergency_release_restores_evaluation(controller):
    controller.set_emergency(True)
    controller.set_emergency(False)
    assert controller.decide(SimulationInput(0, 0, False)).adaptive_green_time == 25

def test_emergency_green_time_must_fit_rule_table(evaluator, repository, counts):
    with pytest.raises(ValueError):
        AutoAdaptiveController(evaluator, repository, counts, emergency_green_time=90)

@pytest.mark.asyncio
async def test_run_cycle_persists_and_records_metrics(controller, repository):
    run = await controller.run_cycle()

    assert run.id == 1
    assert run.calculated_green_time == 45
    assert run.risk_level == RiskLevel.HIGH
    assert repository.list_all() == [run]

    metrics = controller.metrics.get_metrics()
    assert metrics.total_cycles == 1
    assert metrics.avg_vehicle_wait == 48.0
    assert metrics.avg_pedestrian_wait == 2.0
    assert metrics.is_auto_mode

@pytest.mark.asyncio
async def test_run_stops_after_max_cycles(controller, repository, counts):
    cycles = await controller.run(max_cycles=3)
    assert cycles == 3
    assert counts.call_count == 3
    assert [r.id for r in repository.list_all()] == [1, 2, 3]

@pytest.mark.asyncio
async def test_stop_interrupts_interval_wait(controller):
    controller.interval_seconds = 5
    task = asyncio.create_task(controller.run())
    await asyncio.sleep(0.05)
    controller.stop()
    cycles = await asyncio.wait_for(task, timeout=1)
    assert cycles == 1
