import random
from datetime import datetime
from typing import Callable, Iterable, Optional

from ..domain import SimulationInput


class RandomCountsProvider:
    """
    Demo counts source for auto mode. Peak hour follows the local clock.
    """
    def __init__(
        self,
        max_pedestrians: int = 50,
        max_vehicles: int = 60,
        peak_hours: Iterable[int] = (7, 8, 9, 17, 18, 19),
        seed: Optional[int] = None,
        clock: Callable[[], datetime] = datetime.now
    ):
        self.max_pedestrians = max_pedestrians
        self.max_vehicles = max_vehicles
        self.peak_hours = frozenset(peak_hours)
        self.clock = clock
        self._random = random.Random(seed)

    def __call__(self) -> SimulationInput:
        return SimulationInput(
            pedestrians=self._random.randint(0, self.max_pedestrians),
            vehicles=self._random.randint(0, self.max_vehicles),
            is_peak_hour=self.clock().hour in self.peak_hours
        )
