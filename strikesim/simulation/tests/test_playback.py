#!/usr/bin/env python3
# strikesim/simulation/tests/test_playback.py
import math
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

import unittest
from dataclasses import replace
from strikesim.mission import AttackTarget, GeoPoint, MissionAircraft, MissionPlanner, Priority
from strikesim.simulation.config import SimulationConfig
from strikesim.simulation.core import PlaybackController, advance_state, initial_state
from strikesim.mission.data_models import TimedWaypoint
from strikesim.simulation.data_models import EventType, MissileStatus, MissionScenario, Severity, SimulatedFlight
from strikesim.simulation.exceptions import PlaybackError
from strikesim.simulation.guidance import create_missile
from strikesim.simulation.scenario import build_scenario

BASE = GeoPoint(0.0, 0.0)

def plan_scenario(n_aircraft=1):
    """One high-priority target 60 nm east of the base; direct paths reach it at T+10."""
    targets = [AttackTarget(id='t1', lat=0.0, lon=1.0, name='Radar', priority=Priority.HIGH)]
    if n_aircraft > 1:
        targets.append(AttackTarget(id='t2', lat=1.0, lon=0.0, name='Depot', priority=Priority.MEDIUM))
    aircraft = [MissionAircraft(id=f'a{i + 1}', callsign=f'VIPER{i + 1}', ammo_capacity=4, color='#22c55e')
                for i in range(n_aircraft)]
    mission = MissionPlanner().plan(targets, aircraft, BASE, name='Test Strike')
    return build_scenario(mission)

class TestPlaybackController(unittest.TestCase):
    def setUp(self):
        self.scenario = plan_scenario()
        self.controller = PlaybackController(self.scenario, SimulationConfig(default_speed=1))

    def test_initial_state(self):
        ctrl = PlaybackController(self.scenario)
        self.assertEqual(ctrl.playback_speed, 10)
        self.assertFalse(ctrl.is_playing)
        self.assertEqual(ctrl.time_min, 0.0)
        self.assertEqual(ctrl.max_time_min, 60.0)
        self.assertIn('a1', ctrl.state.positions)

    def test_tick_step_scales_with_speed(self):
        ctrl = PlaybackController(self.scenario)
        ctrl.tick()
        self.assertAlmostEqual(ctrl.time_min, 10 / 60)
        ctrl.set_playback_speed(60)
        ctrl.tick()
        self.assertAlmostEqual(ctrl.time_min, 10 / 60 + 1.0)

    def test_invalid_speed(self):
        for bad in (0, -1, math.nan, math.inf):
            with self.assertRaises(PlaybackError):
                self.controller.set_playback_speed(bad)
        self.assertEqual(self.controller.playback_speed, 1)

    def test_play_pause_toggle(self):
        self.controller.play()
        self.assertTrue(self.controller.is_playing)
        self.controller.toggle()
        self.assertFalse(self.controller.is_playing)
        self.controller.toggle()
        self.controller.pause()
        self.assertFalse(self.controller.is_playing)

    def test_strike_sequence(self):
        """Launch at 30 nm around T+7.5, hit well before the overflight"""
        state = self.controller.run(max_ticks=660)

        self.assertIn('t1', state.destroyed_target_ids)
        self.assertEqual([e.event_type for e in state.events], [EventType.LAUNCH, EventType.HIT])
        launch, hit = state.events
        self.assertAlmostEqual(launch.time_min, 7.5, delta=0.05)
        self.assertLess(hit.time_min - launch.time_min, 1.0)
        self.assertEqual(launch.aircraft_callsign, 'VIPER1')
        self.assertEqual(hit.target_name, 'Radar')
        self.assertEqual(launch.missile_id, 'missile_a1_t1_1')
        self.assertEqual(state.missiles[0].status, MissileStatus.HIT)

        status = self.controller.mission_status()
        self.assertEqual((status.destroyed_targets, status.targets_remaining, status.active_missiles), (1, 0, 0))
        self.assertEqual(status.destroyed_by_aircraft, {'VIPER1': 1})

    def test_invariants_hold_every_tick(self):
        previous = self.controller.state.destroyed_target_ids
        for _ in range(900):
            state = self.controller.tick()
            flying = [m.target_id for m in state.missiles if m.is_flying]
            self.assertEqual(len(flying), len(set(flying)))
            self.assertTrue(previous <= state.destroyed_target_ids)
            previous = state.destroyed_target_ids

    def test_seek_backwards_keeps_destruction(self):
        self.controller.run(max_ticks=660)
        missiles = self.controller.state.missiles

        state = self.controller.seek(0.0)

        self.assertEqual(state.time_min, 0.0)
        self.assertIn('t1', state.destroyed_target_ids)
        self.assertEqual(state.missiles, missiles)
        self.assertEqual((state.positions['a1'].lat, state.positions['a1'].lon), (0.0, 0.0))

    def test_seek_clamps_and_validates(self):
        self.assertEqual(self.controller.seek(-5).time_min, 0.0)
        self.assertEqual(self.controller.seek(1e6).time_min, 60.0)
        with self.assertRaises(PlaybackError):
            self.controller.seek(math.nan)

    def test_seek_then_tick_uses_normal_step(self):
        self.controller.seek(20.0)
        self.controller.tick()
        self.assertAlmostEqual(self.controller.time_min, 20.0 + 1 / 60)

    def test_seek_past_target_applies_overflight(self):
        state = self.controller.seek(10.0)
        self.assertIn('t1', state.destroyed_target_ids)
        self.assertEqual(state.missiles, ())

    def test_skip_controls(self):
        self.assertEqual(self.controller.skip_to_end().time_min, 60.0)
        self.assertTrue(self.controller.at_end)
        self.assertEqual(self.controller.skip_to_start().time_min, 0.0)
        self.assertIs(self.controller.snapshot(), self.controller.state)

    def test_run_stops_at_end_of_timeline(self):
        self.controller.set_playback_speed(60)
        state = self.controller.run()

        self.assertEqual(state.time_min, 60.0)
        self.assertFalse(self.controller.is_playing)
        self.assertIn('t1', state.destroyed_target_ids)
        self.assertIs(self.controller.tick(), state)

    def test_fast_playback_overshoots_and_keeps_flying(self):
        """At 30x and 60x one tick outruns the hit radius; the overshoot starts at >= 2 nm so no miss is scored"""
        for speed in (30, 60):
            ctrl = PlaybackController(plan_scenario(), SimulationConfig(default_speed=speed))
            state = ctrl.run()

            self.assertEqual([e.event_type for e in state.events], [EventType.LAUNCH])
            self.assertEqual([m.status for m in state.missiles], [MissileStatus.FLYING])
            self.assertEqual(ctrl.mission_status().active_missiles, 1)
            # The target still falls to the overflight rule
            self.assertIn('t1', state.destroyed_target_ids)

    def test_speed_options(self):
        options = self.controller.config.speed_options
        self.assertEqual(tuple(options), (1, 10, 30, 60))
        self.assertIn(PlaybackController(self.scenario).playback_speed, options)

class TestAdvanceState(unittest.TestCase):
    def setUp(self):
        self.scenario = plan_scenario()

    def test_transition_does_not_modify_input(self):
        s0 = initial_state(self.scenario)
        s1 = advance_state(s0, self.scenario, 1.0)
        self.assertEqual(s0.time_min, 0.0)
        self.assertEqual(s1.time_min, 1.0)
        self.assertIsNot(s0.positions, s1.positions)

    def test_missile_with_unknown_target_misses(self):
        missile = create_missile('m1', 'a1', 'ghost', initial_state(self.scenario).positions['a1'], 0.0)
        state = replace(initial_state(self.scenario), missiles=(missile,))

        with self.assertLogs('strikesim.simulation.core', level='WARNING'):
            after = advance_state(state, self.scenario, 1 / 60)

        self.assertEqual(after.missiles[0].status, MissileStatus.MISS)
        self.assertEqual([e.event_type for e in after.events], [EventType.MISS])

    def test_mission_aircraft_conflict_at_shared_base(self):
        scenario = plan_scenario(n_aircraft=2)
        state = initial_state(scenario)
        self.assertEqual(len(state.warnings), 2)
        self.assertTrue(all(w.severity is Severity.CRITICAL for w in state.warnings))

    def test_same_tick_launch_blocks_second_shooter(self):
        """Two aircraft in range of one target: only the first launches within the tick"""
        target = AttackTarget(id='t1', lat=0.0, lon=0.0, name='Radar', priority=Priority.HIGH)
        ten_nm = 10 / 60.0405

        def shooter(flight_id, lat, lon):
            return SimulatedFlight(flight_id=flight_id, callsign=flight_id.upper(), color='#22c55e',
                                   is_mission_aircraft=True, path=(TimedWaypoint(lat, lon, 30000.0, 0.0),),
                                   eta_min=60.0, assigned_target_ids=('t1',))

        scenario = MissionScenario(flights=(shooter('a1', -ten_nm, 0.0), shooter('a2', 0.0, -ten_nm)),
                                   targets=(target,), max_time_min=60.0, targets_by_id={'t1': target})

        state = advance_state(initial_state(scenario), scenario, 1 / 60)

        self.assertEqual([m.missile_id for m in state.missiles if m.is_flying], ['missile_a1_t1_1'])
        self.assertEqual([e.event_type for e in state.events], [EventType.LAUNCH])
        self.assertEqual(state.launch_sequence, 1)

if __name__ == '__main__':
    unittest.main()
