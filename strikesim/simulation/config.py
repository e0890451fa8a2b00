# strikesim/simulation/config.py
from dataclasses import dataclass
from typing import Tuple

from .constants import PlaybackConstants

@dataclass
class SimulationConfig:
    """Playback and scenario parameters."""
    tick_period_s: float = PlaybackConstants.TICK_PERIOD_S
    sim_seconds_per_tick: float = PlaybackConstants.SIM_SECONDS_PER_TICK
    default_speed: float = PlaybackConstants.DEFAULT_SPEED
    speed_options: Tuple[float, ...] = PlaybackConstants.SPEED_OPTIONS
    max_traffic: int = PlaybackConstants.MAX_TRAFFIC
    min_duration_min: float = PlaybackConstants.MIN_DURATION_MIN
    end_padding_min: float = PlaybackConstants.END_PADDING_MIN

    def tick_step_min(self, speed: float) -> float:
        """Simulated minutes covered by one tick at the given speed multiplier."""
        return self.sim_seconds_per_tick * speed / 60.0
