# strikesim/simulation/scenario.py
"""Builds the static simulation inputs from a planned mission and the traffic picture."""
import logging
from typing import List, Optional, Sequence

from .config import SimulationConfig
from .constants import PlaybackConstants
from .data_models import MissionScenario, SimulatedFlight, TrafficAircraft
from .interpolation import validate_path
from ..mission.data_models import AttackMission, MissionAircraft, index_targets

logger = logging.getLogger(__name__)

def flight_from_aircraft(aircraft: MissionAircraft) -> Optional[SimulatedFlight]:
    """
    Projects a planned aircraft into a simulated flight. Aircraft without
    targets or without a path take no part in the simulation.

    Raises:
        InvalidPath: the aircraft's path is empty or not monotonic in time.
    """
    if not aircraft.assigned_target_ids or aircraft.path is None:
        return None
    waypoints = tuple(aircraft.path.waypoints)
    validate_path(waypoints, flight_id=aircraft.id)
    first = waypoints[0]
    return SimulatedFlight(
        flight_id=aircraft.id,
        callsign=aircraft.callsign,
        color=aircraft.color,
        is_mission_aircraft=True,
        path=waypoints,
        eta_min=waypoints[-1].time_offset_min,
        assigned_target_ids=tuple(aircraft.assigned_target_ids),
        current_lat=first.lat,
        current_lon=first.lon,
        current_alt_ft=first.alt_ft,
    )

def flights_from_traffic(traffic: Sequence[TrafficAircraft], max_traffic: int) -> List[SimulatedFlight]:
    """Ambient traffic: the first `max_traffic` reports, minus simulated entries."""
    flights = []
    for i, t in enumerate(traffic[:max_traffic]):
        if t.is_simulated:
            continue
        flights.append(SimulatedFlight(
            flight_id=t.flight_id,
            callsign=t.callsign or f"Traffic {i + 1}",
            color=PlaybackConstants.TRAFFIC_COLOR,
            is_mission_aircraft=False,
            current_lat=t.lat,
            current_lon=t.lon,
            current_alt_ft=t.alt_ft,
            heading_deg=t.heading_deg,
            speed_kts=t.speed_kts,
        ))
    return flights

def build_scenario(mission: AttackMission, traffic: Sequence[TrafficAircraft] = (),
                   config: Optional[SimulationConfig] = None) -> MissionScenario:
    config = config or SimulationConfig()

    mission_flights = []
    for aircraft in mission.aircraft:
        flight = flight_from_aircraft(aircraft)
        if flight is None:
            logger.info(f"{aircraft.callsign} has no targets or path; not simulated.")
            continue
        mission_flights.append(flight)

    traffic_flights = flights_from_traffic(traffic, config.max_traffic)

    max_eta = max((f.eta_min for f in mission_flights), default=0.0)
    max_time = max(max_eta + config.end_padding_min, config.min_duration_min)

    logger.info(f"Scenario '{mission.name}': {len(mission_flights)} mission aircraft, "
                f"{len(traffic_flights)} traffic, timeline T+0 to T+{max_time:.0f} min.")
    return MissionScenario(
        flights=tuple(mission_flights + traffic_flights),
        targets=tuple(mission.targets),
        max_time_min=max_time,
        targets_by_id=index_targets(mission.targets),
        mission_name=mission.name,
    )
