# strikesim/simulation/data_models.py
"""
Runtime data structures of the engagement simulation. Everything handed to a
presentation layer is immutable; each tick produces new objects.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, FrozenSet, Mapping, Optional, Tuple

from ..mission.data_models import AttackTarget, TimedWaypoint

class FlightStatus(Enum):
    EN_ROUTE = 'en_route'
    ATTACKING = 'attacking'
    RTB = 'rtb'
    LANDED = 'landed'

class MissileStatus(Enum):
    FLYING = 'flying'
    HIT = 'hit'
    MISS = 'miss'

class GuidanceMode(Enum):
    MIDCOURSE = 'midcourse'
    TERMINAL = 'terminal'

class EventType(Enum):
    LAUNCH = 'launch'
    HIT = 'hit'
    MISS = 'miss'

class Severity(Enum):
    CRITICAL = 'critical'
    WARNING = 'warning'

@dataclass(frozen=True)
class PositionFix:
    """Instantaneous position of a flight."""
    lat: float
    lon: float
    alt_ft: float
    heading_deg: float

@dataclass(frozen=True)
class TrafficAircraft:
    """Ambient, non-mission traffic as reported by the traffic feed."""
    flight_id: str
    lat: float
    lon: float
    alt_ft: float
    heading_deg: float = 0.0
    speed_kts: float = 0.0
    callsign: Optional[str] = None
    is_simulated: bool = False

@dataclass(frozen=True)
class SimulatedFlight:
    """
    Runtime projection of a mission aircraft or of ambient traffic. Mission
    aircraft carry a path; traffic carries a single static kinematic state.
    """
    flight_id: str
    callsign: str
    color: str
    is_mission_aircraft: bool
    path: Tuple[TimedWaypoint, ...] = ()
    eta_min: Optional[float] = None
    assigned_target_ids: Tuple[str, ...] = ()
    current_lat: float = 0.0
    current_lon: float = 0.0
    current_alt_ft: float = 0.0
    heading_deg: float = 0.0
    speed_kts: float = 0.0

@dataclass(frozen=True)
class Missile:
    missile_id: str
    launcher_id: str
    target_id: str
    lat: float
    lon: float
    alt_ft: float
    heading_deg: float
    speed_kts: float
    launch_time_min: float
    status: MissileStatus = MissileStatus.FLYING
    trail: Tuple[Tuple[float, float], ...] = ()
    guidance_mode: GuidanceMode = GuidanceMode.MIDCOURSE
    prev_los_angle: Optional[float] = None

    @property
    def is_flying(self) -> bool:
        return self.status is MissileStatus.FLYING

@dataclass(frozen=True)
class MissionEvent:
    time_min: float
    event_type: EventType
    target_id: str
    target_name: str
    aircraft_callsign: str
    missile_id: Optional[str] = None

@dataclass(frozen=True)
class ProximityWarning:
    """Derived each tick, never carried over to the next one."""
    flight_id: str
    other_flight_id: str
    callsign: str
    other_callsign: str
    distance_nm: float
    altitude_diff_ft: float
    severity: Severity

@dataclass(frozen=True)
class MissionScenario:
    """Static inputs of a simulation run, built once from a planned mission."""
    flights: Tuple[SimulatedFlight, ...]
    targets: Tuple[AttackTarget, ...]
    max_time_min: float
    targets_by_id: Mapping[str, AttackTarget] = field(default_factory=dict)
    mission_name: str = ""

    @property
    def mission_flights(self) -> Tuple[SimulatedFlight, ...]:
        return tuple(f for f in self.flights if f.is_mission_aircraft)

@dataclass(frozen=True)
class SimulationState:
    """
    Snapshot of the simulation at one instant. Destruction, missiles and
    events accumulate forward and are not recomputed when time is sought.
    """
    time_min: float = 0.0
    positions: Mapping[str, PositionFix] = field(default_factory=dict)
    flight_statuses: Mapping[str, FlightStatus] = field(default_factory=dict)
    missiles: Tuple[Missile, ...] = ()
    destroyed_target_ids: FrozenSet[str] = frozenset()
    events: Tuple[MissionEvent, ...] = ()
    warnings: Tuple[ProximityWarning, ...] = ()
    launch_sequence: int = 0

    @property
    def active_missiles(self) -> Tuple[Missile, ...]:
        return tuple(m for m in self.missiles if m.is_flying)

@dataclass
class MissionStatus:
    """Mission-level progress figures."""
    total_targets: int
    destroyed_targets: int
    targets_remaining: int
    active_missiles: int
    destroyed_by_aircraft: Dict[str, int] = field(default_factory=dict)
    assigned_by_aircraft: Dict[str, int] = field(default_factory=dict)
