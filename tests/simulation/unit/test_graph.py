from unittest.mock import MagicMock
from adaptive_signal.simulation.application.graph import generate_graph_samples
from adaptive_signal.simulation.domain import GraphPoint

def test_graph_samples_cover_zero_to_sixty(evaluator):
    points = generate_graph_samples(evaluator)
    assert [p.pedestrians for p in points] == list(range(0, 61, 5))

def test_graph_samples_follow_rule_table(evaluator):
    points = generate_graph_samples(evaluator)
    assert points[0] == GraphPoint(pedestrians=0, green_time=25)
    assert points[3] == GraphPoint(pedestrians=15, green_time=25)
    assert points[4] == GraphPoint(pedestrians=20, green_time=35)
    assert points[6] == GraphPoint(pedestrians=30, green_time=35)
    assert points[7] == GraphPoint(pedestrians=35, green_time=45)
    assert points[-1] == GraphPoint(pedestrians=60, green_time=45)

def test_graph_samples_hold_vehicles_and_peak_hour_fixed():
    evaluator = MagicMock()
    evaluator.evaluate.return_value.adaptive_green_time = 25
    generate_graph_samples(evaluator)
    assert evaluator.evaluate.call_count == 13
    for call in evaluator.evaluate.call_args_list:
        assert call.args[1:] == (20, False)
