from adaptive_signal.common.metrics import CycleMetricsCollector
from adaptive_signal.simulation.application.cycle import build_cycle_plan

def test_empty_metrics():
    metrics = CycleMetricsCollector().get_metrics()
    assert metrics.total_cycles == 0
    assert metrics.avg_vehicle_wait == 0.0
    assert metrics.avg_pedestrian_wait == 0.0
    assert metrics.last_priority_shift is None

def test_record_cycles_averages_waits(evaluator):
    collector = CycleMetricsCollector(is_auto_mode=True)
    collector.record_cycle(build_cycle_plan(evaluator.evaluate(0, 0, False)))   # green 25
    collector.record_cycle(build_cycle_plan(evaluator.evaluate(20, 0, False)))  # green 35

    metrics = collector.get_metrics()
    assert metrics.total_cycles == 2
    assert metrics.avg_vehicle_wait == 33.0
    assert metrics.avg_pedestrian_wait == 2.0
    assert metrics.last_priority_shift is not None
    assert metrics.to_dict()["is_auto_mode"] is True

def test_wait_buffers_are_bounded(evaluator):
    collector = CycleMetricsCollector()
    plan = build_cycle_plan(evaluator.evaluate(0, 0, False))
    for _ in range(1005):
        collector.record_cycle(plan)
    assert len(collector.vehicle_waits) == 1000
    assert collector.total_cycles == 1005
