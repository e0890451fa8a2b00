# strikesim/simulation/interpolation.py
"""
Time-based position lookup along a flight path.

Positions are linearly interpolated in latitude, longitude and altitude
within the bracketing segment. Heading is the bearing of that segment and
jumps at segment boundaries. Outside the path's time span the first or last
waypoint is returned; the path is never extrapolated.
"""
from typing import Sequence

import numpy as np

from .data_models import PositionFix
from .exceptions import InvalidPath
from ..geodesy.coordinates import calculate_bearing
from ..mission.data_models import TimedWaypoint

def validate_path(path: Sequence[TimedWaypoint], flight_id=None) -> np.ndarray:
    """Checks the path invariant and returns its time offsets as an array."""
    if path is None or len(path) == 0:
        raise InvalidPath("Path has no waypoints", flight_id)
    offsets = np.fromiter((wp.time_offset_min for wp in path), dtype=float, count=len(path))
    if np.any(np.diff(offsets) < 0):
        bad = int(np.argmax(np.diff(offsets) < 0))
        raise InvalidPath(f"Time offset decreases after waypoint {bad} "
                          f"({offsets[bad]:.2f} -> {offsets[bad + 1]:.2f} min)", flight_id)
    return offsets

def _segment_heading(path: Sequence[TimedWaypoint], i: int) -> float:
    a, b = path[i], path[i + 1]
    return calculate_bearing(a.lat, a.lon, b.lat, b.lon)

def interpolate_position(path: Sequence[TimedWaypoint], time_min: float) -> PositionFix:
    """
    Returns the position on `path` at `time_min` minutes.

    Raises:
        InvalidPath: the path is empty or not monotonic in time.
    """
    offsets = validate_path(path)
    last = len(path) - 1

    if time_min <= offsets[0]:
        first = path[0]
        heading = _segment_heading(path, 0) if last > 0 else 0.0
        return PositionFix(first.lat, first.lon, first.alt_ft, heading)

    if time_min >= offsets[last]:
        final = path[last]
        heading = _segment_heading(path, last - 1) if last > 0 else 0.0
        return PositionFix(final.lat, final.lon, final.alt_ft, heading)

    # First index whose offset is >= t; offsets[j-1] < t <= offsets[j] so the segment has non-zero duration
    j = int(np.searchsorted(offsets, time_min, side='left'))
    a, b = path[j - 1], path[j]
    fraction = (time_min - a.time_offset_min) / (b.time_offset_min - a.time_offset_min)
    return PositionFix(
        lat=a.lat + fraction * (b.lat - a.lat),
        lon=a.lon + fraction * (b.lon - a.lon),
        alt_ft=a.alt_ft + fraction * (b.alt_ft - a.alt_ft),
        heading_deg=_segment_heading(path, j - 1),
    )
