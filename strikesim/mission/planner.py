# strikesim/mission/planner.py
"""
Greedy bin-packing of strike targets onto aircraft.

Targets are serviced in priority order (high, medium, low; stable within a
priority). Each target goes to the aircraft with the fewest assignments so far
among those that can still carry its ammunition. This balances load across
the flight rather than minimising the number of aircraft or distance flown.
"""
import logging
from dataclasses import replace
from typing import List, Sequence

from .data_models import AttackTarget, MissionAircraft, AssignmentPlan
from .exceptions import InsufficientCapacity

logger = logging.getLogger(__name__)

class TargetAssignmentPlanner:
    """Assigns targets to aircraft under per-aircraft ammunition limits."""

    def assign(self, targets: Sequence[AttackTarget], aircraft: Sequence[MissionAircraft]) -> AssignmentPlan:
        """
        Runs the assignment. The input aircraft are not modified; the plan
        carries copies with `assigned_target_ids` populated.

        Raises:
            InsufficientCapacity: total ammo required exceeds total capacity.
                Raised before anything is assigned.
        """
        total_required = sum(t.ammo_required for t in targets)
        total_available = sum(a.ammo_capacity for a in aircraft)
        if total_required > total_available:
            raise InsufficientCapacity(total_required, total_available)

        planned: List[MissionAircraft] = [replace(a, assigned_target_ids=[]) for a in aircraft]
        remaining = [a.ammo_capacity for a in planned]
        unassigned: List[str] = []

        # sorted() is stable, so input order breaks ties within a priority
        for target in sorted(targets, key=lambda t: t.priority.rank):
            best_index = None
            for i, candidate in enumerate(planned):
                if remaining[i] < target.ammo_required:
                    continue
                # Strict comparison keeps the earliest aircraft on ties
                if best_index is None or len(candidate.assigned_target_ids) < len(planned[best_index].assigned_target_ids):
                    best_index = i

            if best_index is None:
                logger.warning(f"No aircraft can carry {target.ammo_required} ammo for '{target.name}'; target left unassigned.")
                unassigned.append(target.id)
                continue

            planned[best_index].assigned_target_ids.append(target.id)
            remaining[best_index] -= target.ammo_required

        logger.info(f"Assigned {len(targets) - len(unassigned)}/{len(targets)} targets "
                    f"using {total_required}/{total_available} ammo.")
        return AssignmentPlan(
            aircraft=planned,
            unassigned_target_ids=unassigned,
            remaining_ammo={a.id: r for a, r in zip(planned, remaining)},
            total_required=total_required,
            total_available=total_available,
        )
