# strikesim/simulation/constants.py

class MissileConstants:
    SPEED_KTS: float = 2000.0           # Roughly Mach 3, constant for the whole flight
    MAX_LAUNCH_RANGE_NM: float = 30.0
    MIN_LAUNCH_RANGE_NM: float = 2.0    # Closer shots are rejected
    HIT_RADIUS_NM: float = 0.5
    NAV_CONSTANT: float = 4.0           # Proportional navigation gain N
    TERMINAL_RANGE_NM: float = 5.0
    # Pre-update range below which an opening range counts as a fly-by miss
    MISS_ARM_RANGE_NM: float = 2.0
    TRAIL_LENGTH: int = 20

class EngagementConstants:
    # An aircraft passing this close to one of its targets destroys it
    OVERFLIGHT_KILL_RADIUS_NM: float = 2.0

class ProximityConstants:
    CRITICAL_DISTANCE_NM: float = 5.0
    CRITICAL_ALTITUDE_FT: float = 1000.0
    WARNING_DISTANCE_NM: float = 10.0
    WARNING_ALTITUDE_FT: float = 2000.0

class PlaybackConstants:
    TICK_PERIOD_S: float = 0.1
    SIM_SECONDS_PER_TICK: float = 1.0   # Simulated seconds per tick at 1x
    SPEED_OPTIONS = (1, 10, 30, 60)
    DEFAULT_SPEED: float = 10
    MIN_DURATION_MIN: float = 60.0
    END_PADDING_MIN: float = 10.0
    MAX_TRAFFIC: int = 10
    TRAFFIC_COLOR = '#64748b'
