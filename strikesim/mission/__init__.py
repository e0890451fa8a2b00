# strikesim/mission/__init__.py
"""
Mission planning: target assignment under ammunition limits and synthesis of
the time-parameterized flight paths replayed by the simulation.
"""
from .core import MissionPlanner
from .config import SynthesisConfig
from .planner import TargetAssignmentPlanner
from .synthesizer import FlightPathSynthesizer
from .data_models import (
    Priority,
    TargetType,
    GeoPoint,
    TimedWaypoint,
    PlannedRoute,
    FlightPath,
    AttackTarget,
    MissionAircraft,
    AssignmentPlan,
    AttackMission,
    index_targets,
    resolve_target,
)
from .exceptions import MissionError, MissionSetupError, InsufficientCapacity, MissingTargetReference

__all__ = [
    'MissionPlanner',
    'SynthesisConfig',
    'TargetAssignmentPlanner',
    'FlightPathSynthesizer',
    'Priority',
    'TargetType',
    'GeoPoint',
    'TimedWaypoint',
    'PlannedRoute',
    'FlightPath',
    'AttackTarget',
    'MissionAircraft',
    'AssignmentPlan',
    'AttackMission',
    'index_targets',
    'resolve_target',
    'MissionError',
    'MissionSetupError',
    'InsufficientCapacity',
    'MissingTargetReference',
]
