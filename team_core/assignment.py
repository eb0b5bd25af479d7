# FILE: team_core/assignment.py
from __future__ import annotations
import logging
from typing import Dict, Iterable, List, Mapping, Optional, Sequence, Set

from .constants import (
    ROLE_LEAD, ROLE_DEPUTY_LEAD, ROLE_CONSTRAINED, ROLE_MEMBER, normalize_name,
)
from .models import Constraint, MemberAssignment, RoleLayer, TeamSetup
from .shuffle import RandInt, shuffle
from .validation import validate_team_count

logger = logging.getLogger(__name__)

Groups = Dict[int, List[MemberAssignment]]


def _as_constraint(c) -> Constraint:
    if isinstance(c, Constraint):
        return c
    if isinstance(c, Mapping):
        return Constraint(**c)
    name, team = c
    return Constraint(name=name, team=team)


def group_sizes(groups: Groups) -> Dict[int, int]:
    return {t: len(members) for t, members in groups.items()}


def exclusion_set(fixed_names: Iterable[str], placed_constraints: Iterable[Constraint]) -> Set[str]:
    """Names already placed by a fixed role or a constraint."""
    out: Set[str] = {n for n in fixed_names if n}
    out.update(c.name for c in placed_constraints if c.name)
    return out


def _least_loaded(groups: Groups) -> int:
    # first minimum in index order wins ties
    best = None
    for t in sorted(groups):
        if best is None or len(groups[t]) < len(groups[best]):
            best = t
    return best


def assign_layers(
    layers: Sequence[RoleLayer],
    participants: Sequence[str],
    constraints: Sequence,
    team_count: int,
    randint: Optional[RandInt] = None,
) -> Groups:
    """
    Place fixed-role layers, then constraints, then spread everyone else.

    Pass 1: each layer in order puts its holder (if any) into that group.
    Pass 2: in-range constraints; a name already holding a fixed role or
            already constrained is skipped.
    Pass 3: the remaining pool is shuffled and each person goes to the
            currently smallest group (lowest index on ties).
    """
    team_count = validate_team_count(team_count)
    groups: Groups = {t: [] for t in range(1, team_count + 1)}

    # Pass 1: fixed roles
    fixed: Set[str] = set()
    for t in groups:
        for layer in layers:
            name = normalize_name(layer.holders.get(t))
            if not name:
                continue
            if name in fixed:
                logger.warning("%r already holds a fixed role; %s in group %d skipped", name, layer.role, t)
                continue
            groups[t].append(MemberAssignment(name=name, role=layer.role))
            fixed.add(name)

    # Pass 2: constraints
    placed: List[Constraint] = []
    constrained: Set[str] = set()
    for c in (_as_constraint(c) for c in constraints):
        if not c.name:
            continue
        if not 1 <= c.team <= team_count:
            logger.warning("constraint for %r targets group %d outside 1..%d, skipped", c.name, c.team, team_count)
            continue
        if c.name in fixed:
            logger.warning("%r holds a fixed role; constraint to group %d skipped", c.name, c.team)
            continue
        if c.name in constrained:
            logger.warning("%r constrained more than once; keeping the first", c.name)
            continue
        groups[c.team].append(MemberAssignment(name=c.name, role=ROLE_CONSTRAINED))
        constrained.add(c.name)
        placed.append(c)

    # Pass 3: random remainder, least-loaded first
    excluded = exclusion_set(fixed, placed)
    pool = [n for n in (normalize_name(p) for p in participants) if n and n not in excluded]
    for name in shuffle(pool, randint):
        t = _least_loaded(groups)
        groups[t].append(MemberAssignment(name=name, role=ROLE_MEMBER))
        logger.debug("placed %r in group %d", name, t)

    logger.info(
        "assigned %d fixed, %d constrained, %d random across %d groups",
        len(fixed), len(placed), len(pool), team_count,
    )
    return groups


def assign(
    leads: Mapping[int, str],
    deputy_leads: Mapping[int, str],
    participants: Sequence[str],
    constraints: Sequence,
    team_count: int,
    randint: Optional[RandInt] = None,
) -> Groups:
    layers = [
        RoleLayer(role=ROLE_LEAD, holders=dict(leads or {})),
        RoleLayer(role=ROLE_DEPUTY_LEAD, holders=dict(deputy_leads or {})),
    ]
    return assign_layers(layers, participants, constraints, team_count, randint)


def assign_setup(setup: TeamSetup, randint: Optional[RandInt] = None) -> Groups:
    return assign_layers(
        setup.role_layers(), setup.participants, setup.constraints, setup.team_count, randint,
    )


def distribute_to_teams(
    participants: Sequence[str],
    team_count: int,
    randint: Optional[RandInt] = None,
) -> List[List[str]]:
    """Shuffle then deal round-robin: shuffled index k goes to team k % team_count."""
    team_count = validate_team_count(team_count)
    teams: List[List[str]] = [[] for _ in range(team_count)]
    for k, name in enumerate(shuffle(participants, randint)):
        teams[k % team_count].append(name)
    return teams
