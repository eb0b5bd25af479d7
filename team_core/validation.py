# FILE: team_core/validation.py
from __future__ import annotations
import logging
import numbers
from collections import Counter
from typing import List

from .models import TeamSetup

logger = logging.getLogger(__name__)


class ConfigurationError(ValueError):
    """Malformed run configuration (group or iteration count)."""


def _require_positive_int(value, what: str) -> int:
    # numpy and pandas integer scalars count as integers, bools do not
    if isinstance(value, bool) or not isinstance(value, numbers.Integral) or value <= 0:
        raise ConfigurationError(f"{what} must be a positive integer, got {value!r}")
    return int(value)


def validate_team_count(team_count) -> int:
    return _require_positive_int(team_count, "team_count")


def validate_iterations(iterations) -> int:
    return _require_positive_int(iterations, "iterations")


def validate_setup(setup: TeamSetup) -> List[str]:
    """
    Non-fatal problems in a setup, as human readable warnings.
    The assignment engine tolerates all of these; the UI shows them.
    """
    warns: List[str] = []
    n = setup.team_count

    for role, holders in (("Lead", setup.leads), ("Deputy lead", setup.deputy_leads)):
        bad = sorted(k for k, name in holders.items() if name and not 1 <= k <= n)
        if bad:
            warns.append(f"{role} set for non-existent group(s): {bad}")

    fixed = set()
    for layer in setup.role_layers():
        fixed.update(layer.names())

    seen_constraints = set()
    for c in setup.constraints:
        if not c.name:
            continue
        if not 1 <= c.team <= n:
            warns.append(f"Constraint for {c.name} targets group {c.team}, outside 1..{n}; it will be ignored.")
        elif c.name in fixed:
            warns.append(f"{c.name} holds a fixed role; their group constraint will be ignored.")
        elif c.name in seen_constraints:
            warns.append(f"{c.name} is constrained more than once; only the first constraint applies.")
        seen_constraints.add(c.name)

    fixed_counts = Counter()
    for layer in setup.role_layers():
        fixed_counts.update(layer.names())
    dupes = sorted(name for name, k in fixed_counts.items() if k > 1)
    if dupes:
        warns.append(f"Same name holds more than one fixed role: {', '.join(dupes)}")

    pool_counts = Counter(p.strip() for p in setup.participants if p and p.strip())
    dupes = sorted(name for name, k in pool_counts.items() if k > 1)
    if dupes:
        warns.append(f"Duplicate participant names: {', '.join(dupes)}")

    if warns:
        logger.info("setup has %d warning(s)", len(warns))
    return warns


def run_self_test():
    """
    Run a basic suite of self-tests.
    """
    results = {"tests": []}
    from team_core.shuffle import shuffle, make_randint
    from team_core.assignment import assign, group_sizes
    from team_core.fairness import simulate, check_uniformity

    rnd = make_randint(7)
    arr = [1, 2, 3, 4, 5]
    original = list(arr)
    out = shuffle(arr, rnd)
    results["tests"].append(("Shuffle keeps the original list", arr == original))
    results["tests"].append(("Shuffle keeps all elements", sorted(out) == original))

    groups = assign(
        {1: "A", 2: "B", 3: "C"}, {1: "D", 2: "E", 3: "F"},
        ["G", "H", "I", "J", "K", "L"], [], 3, randint=rnd,
    )
    results["tests"].append(("Everyone placed once", sum(group_sizes(groups).values()) == 12))
    results["tests"].append(("Groups balanced", set(group_sizes(groups).values()) == {4}))

    stats = simulate(["P", "Q", "R"], 4, 100, randint=rnd)
    results["tests"].append(("Simulation totals match iterations",
                             all(sum(c.values()) == 100 for c in stats.values())))
    exact = {"P": {1: 50, 2: 50}}
    results["tests"].append(("Exact split is uniform",
                             check_uniformity(exact, 100, 2).max_deviation == 0.0))
    return results
