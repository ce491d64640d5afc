from datetime import datetime
from adaptive_signal.simulation.infrastructure.counts import RandomCountsProvider

def test_counts_within_bounds():
    provider = RandomCountsProvider(max_pedestrians=10, max_vehicles=5, seed=1)
    for _ in range(50):
        counts = provider()
        assert 0 <= counts.pedestrians <= 10
        assert 0 <= counts.vehicles <= 5

def test_seeded_providers_repeat():
    first = RandomCountsProvider(seed=3)
    second = RandomCountsProvider(seed=3)
    assert [first() for _ in range(5)] == [second() for _ in range(5)]

def test_peak_hour_follows_clock():
    rush = RandomCountsProvider(peak_hours=[8], clock=lambda: datetime(2024, 5, 6, 8, 30))
    night = RandomCountsProvider(peak_hours=[8], clock=lambda: datetime(2024, 5, 6, 2, 0))
    assert rush().is_peak_hour is True
    assert night().is_peak_hour is False
