#!/usr/bin/env python3
# strikesim/mission/tests/test_assignment.py
import sys
from pathlib import Path

# Add project root to Python path
project_root = Path(__file__).resolve().parent.parent.parent.parent
sys.path.append(str(project_root))

import unittest
from strikesim.mission.data_models import AttackTarget, MissionAircraft, Priority, TargetType
from strikesim.mission.exceptions import InsufficientCapacity
from strikesim.mission.planner import TargetAssignmentPlanner

def make_target(target_id, priority, lat=0.0, lon=0.0):
    return AttackTarget(id=target_id, lat=lat, lon=lon, name=target_id.upper(), priority=Priority(priority))

def make_aircraft(aircraft_id, ammo):
    return MissionAircraft(id=aircraft_id, callsign=aircraft_id.upper(), ammo_capacity=ammo, color='#22c55e')

class TestTargetProperties(unittest.TestCase):
    def test_ammo_and_type_follow_priority(self):
        self.assertEqual(make_target('t1', 'high').ammo_required, 2)
        self.assertEqual(make_target('t2', 'medium').ammo_required, 1)
        self.assertEqual(make_target('t3', 'low').ammo_required, 1)
        self.assertEqual(make_target('t1', 'high').target_type, TargetType.PRIMARY)
        self.assertEqual(make_target('t2', 'medium').target_type, TargetType.SECONDARY)
        self.assertEqual(make_target('t3', 'low').target_type, TargetType.OPPORTUNITY)

    def test_factories(self):
        target = AttackTarget.create(64.1, -21.9, priority='medium')
        self.assertTrue(target.id.startswith('target_'))
        self.assertEqual(target.priority, Priority.MEDIUM)
        self.assertTrue(target.name)

        first = MissionAircraft.create('  VIPER1 ')
        second = MissionAircraft.create('VIPER2', ammo_capacity=2, index=1)
        self.assertEqual(first.callsign, 'VIPER1')
        self.assertEqual(first.ammo_capacity, 4)
        self.assertEqual(second.ammo_capacity, 2)
        self.assertNotEqual(first.color, second.color)
        self.assertNotEqual(first.id, second.id)

class TestTargetAssignment(unittest.TestCase):
    def setUp(self):
        self.planner = TargetAssignmentPlanner()

    def test_two_aircraft_three_targets(self):
        """High goes to A, medium to the still-empty B, low back to A on the tie"""
        targets = [make_target('low', 'low'), make_target('med', 'medium'), make_target('high', 'high')]
        aircraft = [make_aircraft('a', 4), make_aircraft('b', 2)]

        plan = self.planner.assign(targets, aircraft)

        self.assertEqual(plan.aircraft[0].assigned_target_ids, ['high', 'low'])
        self.assertEqual(plan.aircraft[1].assigned_target_ids, ['med'])
        self.assertTrue(plan.is_complete)
        self.assertEqual(plan.remaining_ammo, {'a': 1, 'b': 1})

    def test_capacity_is_never_exceeded(self):
        targets = [make_target(f't{i}', p) for i, p in enumerate(['high', 'medium', 'high', 'low', 'low', 'medium', 'high'])]
        aircraft = [make_aircraft('a', 5), make_aircraft('b', 3), make_aircraft('c', 4)]
        by_id = {t.id: t for t in targets}

        plan = self.planner.assign(targets, aircraft)

        for ac in plan.aircraft:
            used = sum(by_id[t].ammo_required for t in ac.assigned_target_ids)
            self.assertLessEqual(used, ac.ammo_capacity)
            self.assertEqual(plan.remaining_ammo[ac.id], ac.ammo_capacity - used)

        assigned = [t for ac in plan.aircraft for t in ac.assigned_target_ids]
        self.assertEqual(len(assigned), len(set(assigned)))
        self.assertEqual(set(assigned) | set(plan.unassigned_target_ids), set(by_id))

    def test_insufficient_capacity_raises_before_assigning(self):
        targets = [make_target('t1', 'high'), make_target('t2', 'high'), make_target('t3', 'low')]
        aircraft = [make_aircraft('a', 2), make_aircraft('b', 2)]

        with self.assertRaises(InsufficientCapacity) as ctx:
            self.planner.assign(targets, aircraft)

        self.assertEqual(ctx.exception.required, 5)
        self.assertEqual(ctx.exception.available, 4)
        self.assertEqual(str(ctx.exception), "Not enough ammo! Need 5, have 4")
        self.assertEqual(aircraft[0].assigned_target_ids, [])

    def test_fragmented_capacity_leaves_target_unassigned(self):
        targets = [make_target('t1', 'high'), make_target('t2', 'high')]
        aircraft = [make_aircraft('a', 3), make_aircraft('b', 1)]

        with self.assertLogs('strikesim.mission.planner', level='WARNING'):
            plan = self.planner.assign(targets, aircraft)

        self.assertEqual(plan.aircraft[0].assigned_target_ids, ['t1'])
        self.assertEqual(plan.aircraft[1].assigned_target_ids, [])
        self.assertEqual(plan.unassigned_target_ids, ['t2'])
        self.assertFalse(plan.is_complete)

    def test_input_order_breaks_ties_within_priority(self):
        targets = [make_target('m1', 'medium'), make_target('h1', 'high'), make_target('m2', 'medium')]
        aircraft = [make_aircraft('a', 2), make_aircraft('b', 2)]

        plan = self.planner.assign(targets, aircraft)

        self.assertEqual(plan.aircraft[0].assigned_target_ids, ['h1'])
        self.assertEqual(plan.aircraft[1].assigned_target_ids, ['m1', 'm2'])

    def test_inputs_are_not_modified(self):
        aircraft = [make_aircraft('a', 4)]
        aircraft[0].assigned_target_ids.append('stale')

        plan = self.planner.assign([make_target('t1', 'low')], aircraft)

        self.assertEqual(aircraft[0].assigned_target_ids, ['stale'])
        self.assertEqual(plan.aircraft[0].assigned_target_ids, ['t1'])

if __name__ == '__main__':
    unittest.main()
