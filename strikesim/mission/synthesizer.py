# strikesim/mission/synthesizer.py
"""
Builds the time-parameterized path each aircraft flies in the simulation.

Three sources, in order of preference:
  1. a detailed time-stamped route from the route planner, copied verbatim;
  2. a bare centerline, timed at a constant synthesis speed;
  3. a direct path base -> targets -> base when no route exists.
"""
import logging
from typing import Dict, List, Optional

from .config import SynthesisConfig
from .data_models import AttackTarget, FlightPath, GeoPoint, MissionAircraft, TimedWaypoint, resolve_target
from .exceptions import MissingTargetReference
from ..geodesy.coordinates import haversine_distance_nm

logger = logging.getLogger(__name__)

class FlightPathSynthesizer:
    def __init__(self, config: Optional[SynthesisConfig] = None):
        self.config = config or SynthesisConfig()

    def synthesize(self, aircraft: MissionAircraft, targets_by_id: Dict[str, AttackTarget], origin: GeoPoint) -> Optional[FlightPath]:
        """Returns the path for one aircraft, or None if it has nothing to strike."""
        if not aircraft.assigned_target_ids:
            return None

        route = aircraft.route
        if route is not None and route.planned_path:
            return FlightPath(waypoints=list(route.planned_path), source='planned_path')
        if route is not None and route.centerline:
            return FlightPath(waypoints=self._time_centerline(route.centerline), source='centerline')
        return FlightPath(waypoints=self._direct_path(aircraft, targets_by_id, origin), source='direct')

    def synthesize_all(self, aircraft: List[MissionAircraft], targets_by_id: Dict[str, AttackTarget], origin: GeoPoint) -> List[MissionAircraft]:
        """Attaches a path to every aircraft that has targets; the others are dropped."""
        planned = []
        for ac in aircraft:
            path = self.synthesize(ac, targets_by_id, origin)
            if path is None:
                logger.info(f"{ac.callsign} has no assigned targets and is excluded from the mission.")
                continue
            ac.path = path
            logger.info(f"{ac.callsign}: {len(path)} waypoints from {path.source}, ETA T+{path.eta_min:.1f} min.")
            planned.append(ac)
        return planned

    def _time_centerline(self, centerline: List[GeoPoint]) -> List[TimedWaypoint]:
        """Derives time offsets from cumulative great-circle distance at constant speed."""
        waypoints = []
        cumulative_nm = 0.0
        for i, point in enumerate(centerline):
            if i > 0:
                prev = centerline[i - 1]
                cumulative_nm += haversine_distance_nm(prev.lat, prev.lon, point.lat, point.lon)
            waypoints.append(TimedWaypoint(
                lat=point.lat,
                lon=point.lon,
                alt_ft=point.alt_ft if point.alt_ft is not None else self.config.cruise_alt_ft,
                time_offset_min=(cumulative_nm / self.config.speed_kts) * 60,
                cumulative_distance_nm=cumulative_nm,
            ))
        return waypoints

    def _direct_path(self, aircraft: MissionAircraft, targets_by_id: Dict[str, AttackTarget], origin: GeoPoint) -> List[TimedWaypoint]:
        cfg = self.config
        path = [
            TimedWaypoint(origin.lat, origin.lon, 0.0, 0.0),
            TimedWaypoint(origin.lat, origin.lon, cfg.cruise_alt_ft, cfg.climb_complete_min),
        ]

        time_offset = cfg.first_target_min
        for target_id in aircraft.assigned_target_ids:
            try:
                target = resolve_target(targets_by_id, target_id, context=f"path synthesis for {aircraft.callsign}")
            except MissingTargetReference as e:
                logger.warning(f"Skipping waypoint: {e}")
                continue
            path.append(TimedWaypoint(target.lat, target.lon, cfg.cruise_alt_ft, time_offset))
            time_offset += cfg.target_interval_min

        # Return to base, then land
        path.append(TimedWaypoint(origin.lat, origin.lon, cfg.cruise_alt_ft, time_offset))
        path.append(TimedWaypoint(origin.lat, origin.lon, 0.0, time_offset + cfg.landing_interval_min))
        return path
