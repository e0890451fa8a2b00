# strikesim/mission/core.py
"""
The core orchestrator for mission planning. Validates the operator's inputs,
assigns targets, asks the external route planner for routes and synthesizes
the flight paths the simulation will replay.
"""
import logging
import time
import uuid
from dataclasses import replace
from typing import Callable, List, Optional, Sequence

from .config import SynthesisConfig
from .constants import MissionConstants
from .data_models import AttackMission, AttackTarget, GeoPoint, MissionAircraft, PlannedRoute, index_targets
from .exceptions import MissionSetupError
from .planner import TargetAssignmentPlanner
from .synthesizer import FlightPathSynthesizer

logger = logging.getLogger(__name__)

# (aircraft, ordered target points, home base) -> route or None
RouteProvider = Callable[[MissionAircraft, List[GeoPoint], GeoPoint], Optional[PlannedRoute]]

class MissionPlanner:
    """Main class to turn targets and aircraft into a flyable strike mission."""
    def __init__(self, synthesis_config: Optional[SynthesisConfig] = None):
        self.assignment_planner = TargetAssignmentPlanner()
        self.synthesizer = FlightPathSynthesizer(synthesis_config)

        if not logging.getLogger().hasHandlers():
            logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
        logger.info("MissionPlanner initialized.")

    def plan(self, targets: Sequence[AttackTarget], aircraft: Sequence[MissionAircraft], origin: Optional[GeoPoint],
             route_provider: Optional[RouteProvider] = None, name: Optional[str] = None) -> AttackMission:
        """
        Runs a complete planning pass.

        Args:
            targets: Targets to strike.
            aircraft: Available aircraft. Not modified; the mission holds copies.
            origin: Home base the aircraft launch from and return to.
            route_provider: Optional external route planner, called once per
                aircraft with its target points in assignment order.
            name: Mission name; defaults to a timestamped name.

        Raises:
            MissionSetupError: no targets, no aircraft or no home base.
            InsufficientCapacity: not enough ammo across all aircraft.
        """
        if not targets:
            raise MissionSetupError("add at least one target")
        if not aircraft:
            raise MissionSetupError("add at least one aircraft")
        if origin is None:
            raise MissionSetupError("set an origin (base) for the mission")

        assignment = self.assignment_planner.assign(targets, aircraft)
        targets_by_id = index_targets(targets)

        tasked = [ac for ac in assignment.aircraft if ac.assigned_target_ids]
        if route_provider is not None:
            tasked = [self._request_route(ac, targets_by_id, origin, route_provider) for ac in tasked]

        planned = self.synthesizer.synthesize_all(tasked, targets_by_id, origin)

        mission = AttackMission(
            id=f"mission_{uuid.uuid4().hex[:12]}",
            name=name or f"{MissionConstants.MISSION_NAME_PREFIX} {time.strftime('%H:%M:%S')}",
            aircraft=planned,
            targets=list(targets),
            origin=origin,
            coordinated_timing=True,
            unassigned_target_ids=assignment.unassigned_target_ids,
        )
        logger.info(f"Mission '{mission.name}' planned: {len(planned)} aircraft, {len(targets)} targets, "
                    f"{len(mission.unassigned_target_ids)} unassigned.")
        return mission

    def _request_route(self, aircraft: MissionAircraft, targets_by_id, origin: GeoPoint, route_provider: RouteProvider) -> MissionAircraft:
        """Asks the route planner for a route; failures leave the aircraft on a direct path."""
        points = [GeoPoint(targets_by_id[tid].lat, targets_by_id[tid].lon)
                  for tid in aircraft.assigned_target_ids if tid in targets_by_id]
        try:
            route = route_provider(aircraft, points, origin)
        except Exception as e:
            logger.warning(f"Route planning failed for {aircraft.callsign}, falling back to direct path: {e}")
            return aircraft
        return replace(aircraft, route=route) if route is not None else aircraft
