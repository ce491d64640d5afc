"""
Infrastructure layer for the signal simulation module.
"""
from .repositories import SQLAlchemyHistoryRepository
from .counts import RandomCountsProvider
from .estimation import FrameDifferenceEstimator

__all__ = [
    "SQLAlchemyHistoryRepository",
    "RandomCountsProvider",
    "FrameDifferenceEstimator",
]
