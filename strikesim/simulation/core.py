# strikesim/simulation/core.py
"""
Core coordinator for the engagement simulation.

`advance_state` is the per-tick transition: it takes the previous snapshot and
returns a new one, never modifying its input. `PlaybackController` owns the
authoritative snapshot and the simulation clock, and is the only place where
state is replaced.

Tick order:
  1. interpolate every mission aircraft to the new time
  2. fly and resolve the missiles already in the air
  3. evaluate launches (missiles created earlier in the same tick count)
  4. apply the overflight kill rule
  5. scan for proximity conflicts
"""
import logging
import math
import time
from dataclasses import replace
from typing import Dict, Iterable, Optional

from .config import SimulationConfig
from .data_models import (
    MissileStatus,
    MissionScenario,
    MissionStatus,
    PositionFix,
    SimulatedFlight,
    SimulationState,
)
from .engagement import (
    apply_overflight_kills,
    derive_flight_status,
    launch_event,
    mission_status,
    record_resolutions,
)
from .exceptions import PlaybackError
from .guidance import create_missile, should_launch, update_missile
from .interpolation import interpolate_position
from .proximity import detect_proximity_conflicts
from ..mission.data_models import resolve_target
from ..mission.exceptions import MissingTargetReference

logger = logging.getLogger(__name__)

def compute_positions(flights: Iterable[SimulatedFlight], time_min: float) -> Dict[str, PositionFix]:
    return {f.flight_id: interpolate_position(f.path, time_min) for f in flights if f.path}

def _statuses(scenario: MissionScenario, time_min: float, destroyed, missiles):
    return {f.flight_id: derive_flight_status(f, time_min, destroyed, missiles) for f in scenario.flights}

def seek_state(state: SimulationState, scenario: MissionScenario, time_min: float) -> SimulationState:
    """
    Moves the snapshot to `time_min` without flying or launching missiles.
    Positions and warnings follow the new time; destruction only accumulates,
    so seeking backwards does not restore targets or remove missiles.
    """
    positions = compute_positions(scenario.flights, time_min)
    destroyed = apply_overflight_kills(scenario.flights, positions, scenario.targets_by_id,
                                       state.destroyed_target_ids, time_min)
    return replace(
        state,
        time_min=time_min,
        positions=positions,
        destroyed_target_ids=destroyed,
        warnings=tuple(detect_proximity_conflicts(scenario.flights, positions)),
        flight_statuses=_statuses(scenario, time_min, destroyed, state.missiles),
    )

def initial_state(scenario: MissionScenario, time_min: float = 0.0) -> SimulationState:
    return seek_state(SimulationState(time_min=time_min), scenario, time_min)

def advance_state(state: SimulationState, scenario: MissionScenario, new_time_min: float) -> SimulationState:
    """Runs one full tick from `state.time_min` to `new_time_min`."""
    dt_min = new_time_min - state.time_min
    positions = compute_positions(scenario.flights, new_time_min)
    callsigns = {f.flight_id: f.callsign for f in scenario.flights}
    targets_by_id = scenario.targets_by_id

    missiles = []
    for missile in state.missiles:
        if not missile.is_flying:
            missiles.append(missile)
            continue
        target = targets_by_id.get(missile.target_id)
        if target is None:
            logger.warning(f"{missile.missile_id} lost its target '{missile.target_id}'; counted as a miss.")
            missiles.append(replace(missile, status=MissileStatus.MISS))
            continue
        missiles.append(update_missile(missile, target.lat, target.lon, dt_min))

    destroyed, events = record_resolutions(state.missiles, missiles, state.destroyed_target_ids,
                                           new_time_min, targets_by_id, callsigns)

    sequence = state.launch_sequence
    for flight in scenario.mission_flights:
        pos = positions.get(flight.flight_id)
        if pos is None:
            continue
        for target_id in flight.assigned_target_ids:
            try:
                target = resolve_target(targets_by_id, target_id, context=f"launch check for {flight.callsign}")
            except MissingTargetReference as e:
                logger.warning(str(e))
                continue
            if not should_launch(pos, target.lat, target.lon, missiles, target_id, target_id in destroyed):
                continue
            sequence += 1
            missile = create_missile(f"missile_{flight.flight_id}_{target_id}_{sequence}",
                                     flight.flight_id, target_id, pos, new_time_min)
            missiles.append(missile)
            events.append(launch_event(new_time_min, missile, targets_by_id, callsigns))
            logger.info(f"T+{new_time_min:.1f}: {flight.callsign} launched on {target.name}.")

    destroyed = apply_overflight_kills(scenario.flights, positions, targets_by_id, destroyed, new_time_min)
    warnings = detect_proximity_conflicts(scenario.flights, positions)

    return SimulationState(
        time_min=new_time_min,
        positions=positions,
        flight_statuses=_statuses(scenario, new_time_min, destroyed, missiles),
        missiles=tuple(missiles),
        destroyed_target_ids=destroyed,
        events=state.events + tuple(events),
        warnings=tuple(warnings),
        launch_sequence=sequence,
    )

class PlaybackController:
    """Owns simulation time and drives one tick at a time."""
    def __init__(self, scenario: MissionScenario, config: Optional[SimulationConfig] = None):
        self.scenario = scenario
        self.config = config or SimulationConfig()
        self.playback_speed = self.config.default_speed
        self.is_playing = False
        self.state = initial_state(scenario)

        if not logging.getLogger().hasHandlers():
            logging.basicConfig(level=logging.INFO, format='%(asctime)s - %(levelname)s - %(message)s')
        logger.info(f"PlaybackController ready: {len(scenario.flights)} flights, "
                    f"T+{scenario.max_time_min:.0f} min timeline, {self.playback_speed}x.")

    @property
    def time_min(self) -> float:
        return self.state.time_min

    @property
    def max_time_min(self) -> float:
        return self.scenario.max_time_min

    @property
    def at_end(self) -> bool:
        return self.state.time_min >= self.max_time_min

    def set_playback_speed(self, speed: float):
        if not (isinstance(speed, (int, float)) and math.isfinite(speed) and speed > 0):
            raise PlaybackError(f"Playback speed must be a positive number, got {speed!r}")
        self.playback_speed = speed

    def play(self):
        self.is_playing = True

    def pause(self):
        self.is_playing = False

    def toggle(self):
        self.is_playing = not self.is_playing

    def tick(self) -> SimulationState:
        """Advances one tick at the current speed; stops playback at the end of the timeline."""
        if self.at_end:
            self.pause()
            return self.state
        step = self.config.tick_step_min(self.playback_speed)
        next_time = min(self.state.time_min + step, self.max_time_min)
        self.state = advance_state(self.state, self.scenario, next_time)
        if next_time >= self.max_time_min:
            logger.info(f"End of timeline reached at T+{next_time:.1f}.")
            self.pause()
        return self.state

    def seek(self, time_min: float) -> SimulationState:
        if not (isinstance(time_min, (int, float)) and math.isfinite(time_min)):
            raise PlaybackError(f"Seek time must be a finite number, got {time_min!r}")
        target_time = max(0.0, min(float(time_min), self.max_time_min))
        self.state = seek_state(self.state, self.scenario, target_time)
        return self.state

    def skip_to_start(self) -> SimulationState:
        return self.seek(0.0)

    def skip_to_end(self) -> SimulationState:
        return self.seek(self.max_time_min)

    def run(self, max_ticks: Optional[int] = None, realtime: bool = False) -> SimulationState:
        """
        Plays until paused, the end of the timeline, or `max_ticks` ticks.
        With `realtime`, sleeps one tick period between ticks.
        """
        self.play()
        ticks = 0
        while self.is_playing and (max_ticks is None or ticks < max_ticks):
            self.tick()
            ticks += 1
            if realtime and self.is_playing:
                time.sleep(self.config.tick_period_s)
        return self.state

    def snapshot(self) -> SimulationState:
        return self.state

    def mission_status(self) -> MissionStatus:
        return mission_status(self.scenario, self.state)
