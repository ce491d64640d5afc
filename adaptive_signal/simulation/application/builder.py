import logging
from omegaconf import DictConfig
from typing import Optional

from ..domain import HistoryRepository, TrafficEstimator, CountsProvider, RuleTable
from ..infrastructure.repositories import SQLAlchemyHistoryRepository
from ..infrastructure.estimation import FrameDifferenceEstimator
from ..infrastructure.counts import RandomCountsProvider
from .evaluator import SignalRuleEvaluator
from .service import SimulationService
from .controller import AutoAdaptiveController
from .cycle import SignalCycleRunner
from ...common.database import DATABASE_URL, create_db_engine, create_session_factory, init_db
from ...common.exceptions import ConfigurationError
from ...common.metrics import CycleMetricsCollector

logger = logging.getLogger(__name__)


class SimulationApplicationBuilder:
    """
    Builder pattern for constructing the simulation application.
    Centralizes component instantiation and wiring.
    """

    def __init__(self, config: DictConfig):
        self.config = config
        self.signal_cfg = config.signal
        self.metrics_collector = CycleMetricsCollector()

        # Components
        self.evaluator: Optional[SignalRuleEvaluator] = None
        self.repository: Optional[HistoryRepository] = None
        self.estimator: Optional[TrafficEstimator] = None
        self.service: Optional[SimulationService] = None

    def build_evaluator(self) -> 'SimulationApplicationBuilder':
        try:
            rules = RuleTable.from_config(self.signal_cfg.rules)
        except ValueError as e:
            raise ConfigurationError(f"Invalid rule table: {e}") from e
        logger.info(f"Rule table loaded: {rules}")
        self.evaluator = SignalRuleEvaluator(rules)
        return self

    def build_repository(self) -> 'SimulationApplicationBuilder':
        url = self.signal_cfg.get('persistence', {}).get('database_url') or DATABASE_URL
        logger.info(f"Opening history store: {url}")
        engine = create_db_engine(url)
        init_db(engine)
        self.repository = SQLAlchemyHistoryRepository(create_session_factory(engine))
        return self

    def build_estimator(self) -> 'SimulationApplicationBuilder':
        est_cfg = self.signal_cfg.estimation
        if est_cfg.type != 'frame_difference':
            raise ConfigurationError(f"Unknown estimator type: {est_cfg.type}")
        self.estimator = FrameDifferenceEstimator(
            diff_threshold=est_cfg.diff_threshold,
            min_blob_area=est_cfg.min_blob_area,
            vehicle_blob_area=est_cfg.vehicle_blob_area,
            max_frames=est_cfg.max_frames
        )
        return self

    def build_service(self) -> SimulationService:
        if not self.evaluator:
            self.build_evaluator()
        if not self.repository:
            self.build_repository()
        self.service = SimulationService(self.evaluator, self.repository)
        return self.service

    def build_controller(self, counts_provider: Optional[CountsProvider] = None) -> AutoAdaptiveController:
        if not self.evaluator:
            self.build_evaluator()
        if not self.repository:
            self.build_repository()

        auto_cfg = self.signal_cfg.auto_mode
        if counts_provider is None:
            counts_provider = RandomCountsProvider(
                max_pedestrians=auto_cfg.max_pedestrians,
                max_vehicles=auto_cfg.max_vehicles,
                peak_hours=list(auto_cfg.peak_hours),
                seed=auto_cfg.seed
            )

        self.metrics_collector.is_auto_mode = True
        return AutoAdaptiveController(
            evaluator=self.evaluator,
            repository=self.repository,
            counts_provider=counts_provider,
            runner=SignalCycleRunner(),
            metrics=self.metrics_collector,
            interval_seconds=auto_cfg.interval_seconds,
            emergency_green_time=auto_cfg.emergency_green_time,
            red_lead_in_seconds=self.signal_cfg.cycle.red_lead_in_seconds,
            yellow_seconds=self.signal_cfg.cycle.yellow_seconds
        )

