# strikesim/simulation/proximity.py
"""
Pairwise separation scan between mission aircraft and every other flight.

Pairs are checked from the mission-aircraft side only, but each mission
aircraft is compared with all other flights including other mission aircraft,
so a conflict between two mission aircraft is reported once from each side.
"""
from typing import List, Mapping, Optional, Sequence

import numpy as np

from .constants import ProximityConstants
from .data_models import PositionFix, ProximityWarning, Severity, SimulatedFlight
from ..geodesy.coordinates import haversine_distance_nm_array

def classify_separation(distance_nm: float, altitude_diff_ft: float) -> Optional[Severity]:
    if distance_nm < ProximityConstants.CRITICAL_DISTANCE_NM and altitude_diff_ft < ProximityConstants.CRITICAL_ALTITUDE_FT:
        return Severity.CRITICAL
    if distance_nm < ProximityConstants.WARNING_DISTANCE_NM and altitude_diff_ft < ProximityConstants.WARNING_ALTITUDE_FT:
        return Severity.WARNING
    return None

def current_position(flight: SimulatedFlight, positions: Mapping[str, PositionFix]) -> Optional[PositionFix]:
    """Interpolated position for mission aircraft; the static reported state for traffic."""
    if flight.path:
        return positions.get(flight.flight_id)
    if flight.is_mission_aircraft:
        return None
    return PositionFix(flight.current_lat, flight.current_lon, flight.current_alt_ft, flight.heading_deg)

def detect_proximity_conflicts(flights: Sequence[SimulatedFlight], positions: Mapping[str, PositionFix]) -> List[ProximityWarning]:
    """Returns every critical or warning-level separation at the instant `positions` describes."""
    located = []
    for flight in flights:
        pos = current_position(flight, positions)
        if pos is not None:
            located.append((flight, pos))
    if len(located) < 2:
        return []

    lats = np.array([p.lat for _, p in located])
    lons = np.array([p.lon for _, p in located])
    alts = np.array([p.alt_ft for _, p in located])

    warnings = []
    for i, (flight, pos) in enumerate(located):
        if not flight.is_mission_aircraft:
            continue
        distances = haversine_distance_nm_array(pos.lat, pos.lon, lats, lons)
        alt_diffs = np.abs(alts - pos.alt_ft)

        critical = (distances < ProximityConstants.CRITICAL_DISTANCE_NM) & (alt_diffs < ProximityConstants.CRITICAL_ALTITUDE_FT)
        warning = ~critical & (distances < ProximityConstants.WARNING_DISTANCE_NM) & (alt_diffs < ProximityConstants.WARNING_ALTITUDE_FT)
        critical[i] = warning[i] = False

        for j in np.flatnonzero(critical | warning):
            other = located[j][0]
            if other.flight_id == flight.flight_id:
                continue
            warnings.append(ProximityWarning(
                flight_id=flight.flight_id,
                other_flight_id=other.flight_id,
                callsign=flight.callsign,
                other_callsign=other.callsign,
                distance_nm=float(distances[j]),
                altitude_diff_ft=float(alt_diffs[j]),
                severity=Severity.CRITICAL if critical[j] else Severity.WARNING,
            ))
    return warnings
