# strikesim/simulation/__init__.py
"""
Time-stepped replay of a planned strike mission: flight interpolation,
proportional-navigation missiles, target destruction and proximity hazards.
"""
from .core import PlaybackController, advance_state, seek_state, initial_state, compute_positions
from .config import SimulationConfig
from .scenario import build_scenario
from .interpolation import interpolate_position, validate_path
from .guidance import should_launch, create_missile, update_missile
from .proximity import detect_proximity_conflicts, classify_separation
from .engagement import mission_status
from .data_models import (
    FlightStatus,
    MissileStatus,
    GuidanceMode,
    EventType,
    Severity,
    PositionFix,
    TrafficAircraft,
    SimulatedFlight,
    Missile,
    MissionEvent,
    ProximityWarning,
    MissionScenario,
    SimulationState,
    MissionStatus,
)
from .exceptions import SimulationError, InvalidPath, PlaybackError

__all__ = [
    'PlaybackController',
    'advance_state',
    'seek_state',
    'initial_state',
    'compute_positions',
    'SimulationConfig',
    'build_scenario',
    'interpolate_position',
    'validate_path',
    'should_launch',
    'create_missile',
    'update_missile',
    'detect_proximity_conflicts',
    'classify_separation',
    'mission_status',
    'FlightStatus',
    'MissileStatus',
    'GuidanceMode',
    'EventType',
    'Severity',
    'PositionFix',
    'TrafficAircraft',
    'SimulatedFlight',
    'Missile',
    'MissionEvent',
    'ProximityWarning',
    'MissionScenario',
    'SimulationState',
    'MissionStatus',
    'SimulationError',
    'InvalidPath',
    'PlaybackError',
]
