# strikesim/simulation/engagement.py
"""
Engagement and destruction bookkeeping.

Targets are destroyed by missile hits, and independently by the coarse
overflight rule (a mission aircraft passing within 2 nm of one of its own
targets). Destruction is monotonic: nothing here ever removes a target from
the destroyed set.
"""
import logging
from typing import Dict, FrozenSet, Iterable, List, Mapping, Sequence, Tuple

from .constants import EngagementConstants
from .data_models import (
    EventType,
    FlightStatus,
    Missile,
    MissileStatus,
    MissionEvent,
    MissionScenario,
    MissionStatus,
    PositionFix,
    SimulatedFlight,
    SimulationState,
)
from ..geodesy.coordinates import haversine_distance_nm
from ..mission.data_models import AttackTarget, resolve_target
from ..mission.exceptions import MissingTargetReference

logger = logging.getLogger(__name__)

UNKNOWN = 'Unknown'

def _event(time_min: float, event_type: EventType, missile: Missile,
           targets_by_id: Mapping[str, AttackTarget], callsigns: Mapping[str, str]) -> MissionEvent:
    target = targets_by_id.get(missile.target_id)
    return MissionEvent(
        time_min=time_min,
        event_type=event_type,
        target_id=missile.target_id,
        target_name=target.name if target else UNKNOWN,
        aircraft_callsign=callsigns.get(missile.launcher_id, UNKNOWN),
        missile_id=missile.missile_id,
    )

def launch_event(time_min: float, missile: Missile, targets_by_id: Mapping[str, AttackTarget],
                 callsigns: Mapping[str, str]) -> MissionEvent:
    return _event(time_min, EventType.LAUNCH, missile, targets_by_id, callsigns)

def record_resolutions(before: Sequence[Missile], after: Sequence[Missile], destroyed: FrozenSet[str], time_min: float,
                       targets_by_id: Mapping[str, AttackTarget], callsigns: Mapping[str, str]) -> Tuple[FrozenSet[str], List[MissionEvent]]:
    """
    Compares missiles before and after a guidance update. Every missile that
    went from flying to hit destroys its target and logs a hit event; every
    flying-to-miss transition logs a miss event.
    """
    was_flying = {m.missile_id for m in before if m.is_flying}
    newly_destroyed = set(destroyed)
    events = []
    for missile in after:
        if missile.missile_id not in was_flying or missile.is_flying:
            continue
        if missile.status is MissileStatus.HIT:
            events.append(_event(time_min, EventType.HIT, missile, targets_by_id, callsigns))
            if missile.target_id not in newly_destroyed:
                newly_destroyed.add(missile.target_id)
                logger.info(f"T+{time_min:.1f}: {events[-1].aircraft_callsign} destroyed {events[-1].target_name}.")
        else:
            events.append(_event(time_min, EventType.MISS, missile, targets_by_id, callsigns))
            logger.info(f"T+{time_min:.1f}: missile {missile.missile_id} missed {events[-1].target_name}.")
    return frozenset(newly_destroyed), events

def apply_overflight_kills(flights: Iterable[SimulatedFlight], positions: Mapping[str, PositionFix],
                           targets_by_id: Mapping[str, AttackTarget], destroyed: FrozenSet[str], time_min: float) -> FrozenSet[str]:
    """Marks live targets destroyed when their assigned aircraft is within the kill radius."""
    newly_destroyed = set(destroyed)
    for flight in flights:
        if not flight.is_mission_aircraft:
            continue
        pos = positions.get(flight.flight_id)
        if pos is None:
            continue
        for target_id in flight.assigned_target_ids:
            if target_id in newly_destroyed:
                continue
            try:
                target = resolve_target(targets_by_id, target_id, context=f"overflight check for {flight.callsign}")
            except MissingTargetReference as e:
                logger.warning(str(e))
                continue
            if haversine_distance_nm(pos.lat, pos.lon, target.lat, target.lon) < EngagementConstants.OVERFLIGHT_KILL_RADIUS_NM:
                logger.info(f"T+{time_min:.1f}: {target.name} destroyed by {flight.callsign} overflight.")
                newly_destroyed.add(target_id)
    return frozenset(newly_destroyed)

def derive_flight_status(flight: SimulatedFlight, time_min: float, destroyed: FrozenSet[str],
                         missiles: Iterable[Missile]) -> FlightStatus:
    """Informational status only; nothing in the simulation branches on it."""
    if not flight.is_mission_aircraft:
        return FlightStatus.EN_ROUTE
    if flight.eta_min is not None and time_min >= flight.eta_min:
        return FlightStatus.LANDED
    if flight.assigned_target_ids and all(t in destroyed for t in flight.assigned_target_ids):
        return FlightStatus.RTB
    if any(m.launcher_id == flight.flight_id and m.is_flying for m in missiles):
        return FlightStatus.ATTACKING
    return FlightStatus.EN_ROUTE

def mission_status(scenario: MissionScenario, state: SimulationState) -> MissionStatus:
    destroyed = state.destroyed_target_ids
    destroyed_by_aircraft: Dict[str, int] = {}
    assigned_by_aircraft: Dict[str, int] = {}
    for flight in scenario.mission_flights:
        assigned_by_aircraft[flight.callsign] = len(flight.assigned_target_ids)
        destroyed_by_aircraft[flight.callsign] = sum(1 for t in flight.assigned_target_ids if t in destroyed)

    destroyed_count = sum(1 for t in scenario.targets if t.id in destroyed)
    return MissionStatus(
        total_targets=len(scenario.targets),
        destroyed_targets=destroyed_count,
        targets_remaining=len(scenario.targets) - destroyed_count,
        active_missiles=len(state.active_missiles),
        destroyed_by_aircraft=destroyed_by_aircraft,
        assigned_by_aircraft=assigned_by_aircraft,
    )
