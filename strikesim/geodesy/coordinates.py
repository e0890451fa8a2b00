# strikesim/geodesy/coordinates.py
"""
Core coordinate geometry. Logging is omitted here as these are high-frequency,
low-level functions called on every simulation tick.
"""
import math
from typing import Tuple

import numpy as np

from .constants import GeoConstants

def haversine_distance_nm(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    lat1_rad, lon1_rad = math.radians(lat1), math.radians(lon1)
    lat2_rad, lon2_rad = math.radians(lat2), math.radians(lon2)
    dlon = lon2_rad - lon1_rad
    dlat = lat2_rad - lat1_rad
    a = math.sin(dlat / 2)**2 + math.cos(lat1_rad) * math.cos(lat2_rad) * math.sin(dlon / 2)**2
    c = 2 * math.atan2(math.sqrt(a), math.sqrt(1 - a))
    return GeoConstants.EARTH_RADIUS_NM * c

def calculate_bearing(lat1: float, lon1: float, lat2: float, lon2: float) -> float:
    lat1_rad, lon1_rad = math.radians(lat1), math.radians(lon1)
    lat2_rad, lon2_rad = math.radians(lat2), math.radians(lon2)
    dlon = lon2_rad - lon1_rad
    y = math.sin(dlon) * math.cos(lat2_rad)
    x = math.cos(lat1_rad) * math.sin(lat2_rad) - math.sin(lat1_rad) * math.cos(lat2_rad) * math.cos(dlon)
    initial_bearing = math.atan2(y, x)
    return (math.degrees(initial_bearing) + 360) % 360

def distance_between(a, b) -> float:
    """Great-circle distance in nm between any two objects exposing .lat and .lon."""
    return haversine_distance_nm(a.lat, a.lon, b.lat, b.lon)

def bearing_between(a, b) -> float:
    """Initial bearing in degrees [0, 360) from a to b."""
    return calculate_bearing(a.lat, a.lon, b.lat, b.lon)

def normalize_heading(heading_deg: float) -> float:
    """Wraps a heading into [0, 360)."""
    heading = heading_deg % 360.0
    # -1e-18 % 360 rounds up to 360.0
    return 0.0 if heading >= 360.0 else heading

def normalize_angle_delta(delta_deg: float) -> float:
    """Wraps an angular difference into [-180, 180]."""
    while delta_deg > 180.0:
        delta_deg -= 360.0
    while delta_deg < -180.0:
        delta_deg += 360.0
    return delta_deg

def displace_equirectangular(lat: float, lon: float, heading_deg: float, distance_nm: float) -> Tuple[float, float]:
    """
    Moves a point along a heading using the flat-earth approximation used for
    short missile steps: 1 nm is 1/60 degree of latitude, and longitude degrees
    per nm are scaled by 1/cos(latitude).
    """
    heading_rad = math.radians(heading_deg)
    lat_deg_per_nm = 1.0 / GeoConstants.NM_PER_DEGREE_LAT
    lon_deg_per_nm = 1.0 / (GeoConstants.NM_PER_DEGREE_LAT * math.cos(math.radians(lat)))
    new_lat = lat + distance_nm * math.cos(heading_rad) * lat_deg_per_nm
    new_lon = lon + distance_nm * math.sin(heading_rad) * lon_deg_per_nm
    return new_lat, new_lon

def haversine_distance_nm_array(lat: float, lon: float, lats: np.ndarray, lons: np.ndarray) -> np.ndarray:
    """Vectorised haversine from one point to many."""
    lat1_rad, lon1_rad = np.radians(lat), np.radians(lon)
    lat2_rad, lon2_rad = np.radians(np.asarray(lats, dtype=float)), np.radians(np.asarray(lons, dtype=float))
    dlat = lat2_rad - lat1_rad
    dlon = lon2_rad - lon1_rad
    a = np.sin(dlat / 2)**2 + np.cos(lat1_rad) * np.cos(lat2_rad) * np.sin(dlon / 2)**2
    c = 2 * np.arctan2(np.sqrt(a), np.sqrt(1 - a))
    return GeoConstants.EARTH_RADIUS_NM * c
