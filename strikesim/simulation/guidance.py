# strikesim/simulation/guidance.py
"""
Missile flight model using Proportional Navigation (PN).

PN commands a turn rate proportional to the rate of change of the line of
sight (LOS) to the target: turn_rate = N * LOS_rate. Driving the LOS rate to
zero puts the missile on a collision course. Speed is constant; guidance only
changes heading.
"""
import logging
from dataclasses import replace
from typing import Iterable

from .constants import MissileConstants
from .data_models import GuidanceMode, Missile, MissileStatus, PositionFix
from ..geodesy.coordinates import (
    calculate_bearing,
    displace_equirectangular,
    haversine_distance_nm,
    normalize_angle_delta,
    normalize_heading,
)

logger = logging.getLogger(__name__)

def has_active_missile(missiles: Iterable[Missile], target_id: str) -> bool:
    return any(m.target_id == target_id and m.is_flying for m in missiles)

def should_launch(aircraft_pos: PositionFix, target_lat: float, target_lon: float,
                  missiles: Iterable[Missile], target_id: str, target_destroyed: bool = False) -> bool:
    """Launch policy: target alive, inside the launch envelope and not already engaged."""
    if target_destroyed:
        return False
    distance = haversine_distance_nm(aircraft_pos.lat, aircraft_pos.lon, target_lat, target_lon)
    if not MissileConstants.MIN_LAUNCH_RANGE_NM < distance <= MissileConstants.MAX_LAUNCH_RANGE_NM:
        return False
    return not has_active_missile(missiles, target_id)

def create_missile(missile_id: str, launcher_id: str, target_id: str, launcher_pos: PositionFix, launch_time_min: float) -> Missile:
    """A missile leaves the rail at the launcher's position, altitude and heading."""
    return Missile(
        missile_id=missile_id,
        launcher_id=launcher_id,
        target_id=target_id,
        lat=launcher_pos.lat,
        lon=launcher_pos.lon,
        alt_ft=launcher_pos.alt_ft,
        heading_deg=launcher_pos.heading_deg,
        speed_kts=MissileConstants.SPEED_KTS,
        launch_time_min=launch_time_min,
    )

def update_missile(missile: Missile, target_lat: float, target_lon: float, dt_min: float) -> Missile:
    """
    Advances a flying missile by one tick of `dt_min` simulated minutes and
    resolves hit or miss. Terminal missiles and non-positive steps are
    returned unchanged.
    """
    if not missile.is_flying or dt_min <= 0:
        return missile

    los_angle = calculate_bearing(missile.lat, missile.lon, target_lat, target_lon)
    los_rate = 0.0
    if missile.prev_los_angle is not None:
        los_rate = normalize_angle_delta(los_angle - missile.prev_los_angle) / dt_min  # deg/min

    range_before = haversine_distance_nm(missile.lat, missile.lon, target_lat, target_lon)

    commanded_turn_rate = MissileConstants.NAV_CONSTANT * los_rate
    new_heading = normalize_heading(missile.heading_deg + commanded_turn_rate * dt_min)

    distance_nm = missile.speed_kts * (dt_min / 60.0)
    new_lat, new_lon = displace_equirectangular(missile.lat, missile.lon, new_heading, distance_nm)

    trail = missile.trail + ((missile.lat, missile.lon),)
    if len(trail) > MissileConstants.TRAIL_LENGTH:
        trail = trail[-MissileConstants.TRAIL_LENGTH:]

    range_after = haversine_distance_nm(new_lat, new_lon, target_lat, target_lon)
    mode = GuidanceMode.TERMINAL if range_after < MissileConstants.TERMINAL_RANGE_NM else GuidanceMode.MIDCOURSE

    if range_after < MissileConstants.HIT_RADIUS_NM:
        status = MissileStatus.HIT
    elif range_after > range_before and range_before < MissileConstants.MISS_ARM_RANGE_NM:
        # Range opening inside the arming range: flew past without entering the hit radius
        status = MissileStatus.MISS
    else:
        status = MissileStatus.FLYING

    if status is not MissileStatus.FLYING:
        logger.debug(f"{missile.missile_id} resolved {status.value} at {range_after:.2f} nm.")

    return replace(
        missile,
        lat=new_lat,
        lon=new_lon,
        heading_deg=new_heading,
        prev_los_angle=los_angle,
        trail=trail,
        guidance_mode=mode,
        status=status,
    )
