#!/usr/bin/env python3
# examples/E001_strike_mission.py
"""
[STRIKE MISSION DEMO]

Plans a three-target strike out of Keflavik (BIKF) with two aircraft, feeds
the plan and a handful of ambient traffic reports into the simulation and
plays the whole timeline, printing the event log and the final status.
"""
import sys
from pathlib import Path

sys.path.append(str(Path(__file__).resolve().parent.parent))

# --- MODULAR IMPORTS ---
from strikesim.mission import AttackTarget, GeoPoint, MissionAircraft, MissionPlanner, PlannedRoute
from strikesim.mission.exceptions import InsufficientCapacity
from strikesim.simulation import PlaybackController, Severity, SimulationConfig, TrafficAircraft, build_scenario

# --- [1. MISSION PARAMETERS] ---
BASE = GeoPoint(63.985, -22.605)  # BIKF

TARGETS = [
    ("Radar Site", 64.32, -21.95, 'high'),
    ("Fuel Depot", 64.05, -21.40, 'medium'),
    ("Bridge", 63.80, -21.75, 'low'),
]

FLIGHT = [("VIPER1", 4), ("VIPER2", 2)]

# Missile guidance only resolves hits reliably at the slower settings
PLAYBACK_SPEED = 1

TRAFFIC = [
    TrafficAircraft("ICE204", 64.05, -22.10, 31000, heading_deg=90, speed_kts=450, callsign="ICE204"),
    TrafficAircraft("N501CS", 63.90, -21.60, 9000, heading_deg=270, speed_kts=180),
    TrafficAircraft("SIM1", 64.00, -22.00, 30000, is_simulated=True),
]

def orbit_route(aircraft, points, origin):
    """Stand-in route planner: a bare centerline with a dogleg on the way home."""
    if aircraft.callsign != "VIPER2":
        return None
    last = points[-1]
    dogleg = GeoPoint((last.lat + origin.lat) / 2 - 0.1, (last.lon + origin.lon) / 2)
    return PlannedRoute(path_id=f"route_{aircraft.id}", centerline=[origin, *points, dogleg, origin])

def main():
    targets = [AttackTarget.create(lat, lon, priority=p, name=name) for name, lat, lon, p in TARGETS]
    aircraft = [MissionAircraft.create(cs, ammo_capacity=ammo, index=i) for i, (cs, ammo) in enumerate(FLIGHT)]

    print("\n--- [ PLANNING ] ---")
    try:
        mission = MissionPlanner().plan(targets, aircraft, BASE, route_provider=orbit_route)
    except InsufficientCapacity as e:
        print(f"❌ {e}")
        return

    names = {t.id: t.name for t in targets}
    for ac in mission.aircraft:
        assigned = ", ".join(names[t] for t in ac.assigned_target_ids)
        print(f"  {ac.callsign:<8} [{ac.path.source:>9}] {len(ac.path)} wpts, {ac.path.total_distance_nm:6.1f} nm, ETA T+{ac.path.eta_min:5.1f}  -> {assigned}")

    scenario = build_scenario(mission, TRAFFIC)
    config = SimulationConfig(default_speed=PLAYBACK_SPEED)
    if PLAYBACK_SPEED not in config.speed_options:
        print(f"⚠️  {PLAYBACK_SPEED}x is not one of the standard speeds {config.speed_options}")
    controller = PlaybackController(scenario, config)

    print("\n--- [ SIMULATION ] ---")
    critical_seen = set()
    controller.play()
    while controller.is_playing:
        state = controller.tick()
        for w in state.warnings:
            key = (w.flight_id, w.other_flight_id)
            if w.severity is Severity.CRITICAL and key not in critical_seen:
                critical_seen.add(key)
                print(f"  ⚠️  T+{state.time_min:5.1f} {w.callsign} / {w.other_callsign}: "
                      f"{w.distance_nm:.1f} nm, {w.altitude_diff_ft:.0f} ft")

    for event in controller.state.events:
        print(f"  T+{event.time_min:5.1f}  {event.event_type.value.upper():<6} {event.aircraft_callsign:<8} -> {event.target_name}")

    status = controller.mission_status()
    print("\n--- [ STATUS ] ---")
    print(f"  Targets destroyed: {status.destroyed_targets}/{status.total_targets}")
    for callsign, assigned in status.assigned_by_aircraft.items():
        print(f"  {callsign:<8} {status.destroyed_by_aircraft[callsign]}/{assigned}")

if __name__ == "__main__":
    main()
