# strikesim/mission/config.py
from dataclasses import dataclass

@dataclass
class SynthesisConfig:
    """Parameters for building flight paths when no detailed route is supplied."""
    speed_kts: float = 500.0            # Assumed fighter speed for timing a bare centerline
    cruise_alt_ft: float = 30000.0
    climb_complete_min: float = 5.0     # Climb-out finished overhead the base
    first_target_min: float = 10.0
    target_interval_min: float = 15.0   # Dwell between consecutive target waypoints
    landing_interval_min: float = 5.0   # Descent from overhead the base to touchdown

    def __post_init__(self):
        if self.speed_kts <= 0:
            raise ValueError(f"speed_kts must be positive, got {self.speed_kts}")
