"""Application ports package."""

from .clock import ClockPort
from .computation_cache import ComputationCachePort
from .database import DatabaseEnginePort
from .patrimony_repository import PatrimonyRepositoryPort
from .scenario_repository import ScenarioRepositoryPort

__all__ = [
    "ClockPort",
    "ComputationCachePort",
    "DatabaseEnginePort",
    "PatrimonyRepositoryPort",
    "ScenarioRepositoryPort",
]
