from .evaluator import SignalRuleEvaluator, validate_input
from .graph import generate_graph_samples
from .cycle import SignalCycleRunner, build_cycle_plan
from .controller import AutoAdaptiveController
from .service import SimulationService
