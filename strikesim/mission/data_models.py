# strikesim/mission/data_models.py
"""
Defines the core data structures of a strike mission: targets, aircraft,
externally planned routes and the time-parameterized flight paths that the
simulation replays.
"""
import uuid
from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, List, Optional, Sequence

from .constants import MissionConstants
from .exceptions import MissingTargetReference
from ..geodesy.coordinates import haversine_distance_nm

class Priority(Enum):
    HIGH = 'high'
    MEDIUM = 'medium'
    LOW = 'low'

    @property
    def rank(self) -> int:
        return MissionConstants.PRIORITY_RANK[self.value]

class TargetType(Enum):
    PRIMARY = 'primary'
    SECONDARY = 'secondary'
    OPPORTUNITY = 'opportunity'

@dataclass(frozen=True)
class GeoPoint:
    """A geographic position; altitude is optional."""
    lat: float
    lon: float
    alt_ft: Optional[float] = None

@dataclass(frozen=True)
class TimedWaypoint:
    """A path point tagged with elapsed mission minutes."""
    lat: float
    lon: float
    alt_ft: float
    time_offset_min: float
    cumulative_distance_nm: Optional[float] = None

@dataclass
class PlannedRoute:
    """
    Output of the external route-planning collaborator. Either a detailed
    time-stamped path or only a bare centerline may be populated.
    """
    path_id: str
    planned_path: List[TimedWaypoint] = field(default_factory=list)
    centerline: List[GeoPoint] = field(default_factory=list)
    distance_nm: float = 0.0
    eta_minutes: Optional[float] = None

@dataclass
class FlightPath:
    """A complete time-parameterized path from takeoff to landing."""
    waypoints: List[TimedWaypoint]
    source: str = 'direct'

    @property
    def eta_min(self) -> float:
        return self.waypoints[-1].time_offset_min

    @property
    def total_distance_nm(self) -> float:
        distance = 0.0
        for i in range(len(self.waypoints) - 1):
            a, b = self.waypoints[i], self.waypoints[i + 1]
            distance += haversine_distance_nm(a.lat, a.lon, b.lat, b.lon)
        return distance

    def __len__(self) -> int:
        return len(self.waypoints)

@dataclass(frozen=True)
class AttackTarget:
    """A strike target. Immutable once created; destruction is tracked by the simulation."""
    id: str
    lat: float
    lon: float
    name: str
    priority: Priority

    @property
    def ammo_required(self) -> int:
        return MissionConstants.AMMO_BY_PRIORITY[self.priority.value]

    @property
    def target_type(self) -> TargetType:
        return TargetType(MissionConstants.TARGET_TYPE_BY_PRIORITY[self.priority.value])

    @property
    def position(self) -> GeoPoint:
        return GeoPoint(self.lat, self.lon)

    @classmethod
    def create(cls, lat: float, lon: float, priority='high', name: Optional[str] = None) -> 'AttackTarget':
        target_id = f"target_{uuid.uuid4().hex[:12]}"
        return cls(
            id=target_id,
            lat=lat,
            lon=lon,
            name=name or f"Target {target_id[-4:]}",
            priority=Priority(priority) if not isinstance(priority, Priority) else priority,
        )

@dataclass
class MissionAircraft:
    """An aircraft taking part in the strike."""
    id: str
    callsign: str
    ammo_capacity: int
    color: str
    assigned_target_ids: List[str] = field(default_factory=list)
    route: Optional[PlannedRoute] = None
    path: Optional[FlightPath] = None

    @classmethod
    def create(cls, callsign: str, ammo_capacity: Optional[int] = None, index: int = 0) -> 'MissionAircraft':
        """Creates an aircraft, picking its display colour from the palette by position."""
        colors = MissionConstants.AIRCRAFT_COLORS
        return cls(
            id=f"aircraft_{uuid.uuid4().hex[:12]}",
            callsign=callsign.strip(),
            ammo_capacity=ammo_capacity if ammo_capacity is not None else MissionConstants.DEFAULT_AMMO_CAPACITY,
            color=colors[index % len(colors)],
        )

@dataclass
class AssignmentPlan:
    """Result of a target assignment run."""
    aircraft: List[MissionAircraft]
    unassigned_target_ids: List[str]
    remaining_ammo: Dict[str, int]
    total_required: int
    total_available: int

    @property
    def is_complete(self) -> bool:
        return not self.unassigned_target_ids

@dataclass
class AttackMission:
    """A planned strike mission, ready for simulation."""
    id: str
    name: str
    aircraft: List[MissionAircraft]
    targets: List[AttackTarget]
    origin: GeoPoint
    coordinated_timing: bool = True
    unassigned_target_ids: List[str] = field(default_factory=list)

def index_targets(targets: Sequence[AttackTarget]) -> Dict[str, AttackTarget]:
    return {target.id: target for target in targets}

def resolve_target(targets_by_id: Dict[str, AttackTarget], target_id: str, context: Optional[str] = None) -> AttackTarget:
    """Looks up a target by id, raising MissingTargetReference if it is unknown."""
    try:
        return targets_by_id[target_id]
    except KeyError:
        raise MissingTargetReference(target_id, context) from None
