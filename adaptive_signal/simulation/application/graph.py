from typing import List
from ..domain.entities import GraphPoint
from .evaluator import SignalRuleEvaluator

def generate_graph_samples(
    evaluator: SignalRuleEvaluator,
    max_pedestrians: int = 60,
    step: int = 5,
    vehicles: int = 20,
    is_peak_hour: bool = False
) -> List[GraphPoint]:
    """
    Green time as a function of pedestrians, holding vehicles and peak hour fixed.
    Recomputed on every call.
    """
    return [
        GraphPoint(
            pedestrians=p,
            green_time=evaluator.evaluate(p, vehicles, is_peak_hour).adaptive_green_time
        )
        for p in range(0, max_pedestrians + 1, step)
    ]
