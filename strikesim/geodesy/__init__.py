# strikesim/geodesy/__init__.py
"""
Geodetic helpers shared by the planner and the simulation: great-circle
distance and bearing on a spherical Earth, angle normalisation and the
short-step equirectangular displacement used by the missile model.
"""
from .constants import GeoConstants
from .coordinates import (
    haversine_distance_nm,
    calculate_bearing,
    distance_between,
    bearing_between,
    normalize_heading,
    normalize_angle_delta,
    displace_equirectangular,
    haversine_distance_nm_array,
)

__all__ = [
    'GeoConstants',
    'haversine_distance_nm',
    'calculate_bearing',
    'distance_between',
    'bearing_between',
    'normalize_heading',
    'normalize_angle_delta',
    'displace_equirectangular',
    'haversine_distance_nm_array',
]
