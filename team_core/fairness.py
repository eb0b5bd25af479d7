# FILE: team_core/fairness.py
from __future__ import annotations
import logging
import math
from typing import Dict, List, Optional, Sequence

from .assignment import distribute_to_teams
from .constants import UNIFORMITY_THRESHOLD_PCT, normalize_name
from .models import TeamSetup, UniformityVerdict
from .shuffle import RandInt, make_randint
from .validation import validate_iterations, validate_team_count

logger = logging.getLogger(__name__)

Stats = Dict[str, Dict[int, int]]


def check_evenness(counts: List[int]) -> bool:
    return not counts or (max(counts) - min(counts) <= 1)


def simulation_pool(setup: TeamSetup, exclude_constrained: bool = True) -> List[str]:
    """
    Participants subject to the fairness check: fixed-role holders are
    always left out, constrained names only when ``exclude_constrained``.
    Holders and constraints aimed at a missing group stay in the pool.
    """
    team_count = setup.team_count
    excluded = set()
    for layer in setup.role_layers():
        excluded.update(name for t, name in layer.holders.items() if name and 1 <= t <= team_count)
    if exclude_constrained:
        excluded.update(c.name for c in setup.constraints if c.name and 1 <= c.team <= team_count)
    return [n for n in (normalize_name(p) for p in setup.participants) if n and n not in excluded]


def simulate(
    participants: Sequence[str],
    team_count: int,
    iterations: int,
    randint: Optional[RandInt] = None,
) -> Stats:
    """
    Monte Carlo check of the shuffle: each trial deals the shuffled pool
    round-robin and counts, per person, which group they landed in.
    """
    team_count = validate_team_count(team_count)
    iterations = validate_iterations(iterations)
    pool = list(dict.fromkeys(participants))
    randint = randint or make_randint()

    stats: Stats = {name: {t: 0 for t in range(1, team_count + 1)} for name in pool}
    for _ in range(iterations):
        for idx, team in enumerate(distribute_to_teams(pool, team_count, randint), start=1):
            for name in team:
                stats[name][idx] += 1

    logger.info("simulated %d trials for %d participants over %d groups", iterations, len(pool), team_count)
    return stats


def _round_half_up(x: float, places: int = 2) -> float:
    scale = 10 ** places
    return math.floor(x * scale + 0.5) / scale


def check_uniformity(
    stats: Stats,
    iterations: int,
    team_count: int,
    threshold: float = UNIFORMITY_THRESHOLD_PCT,
) -> UniformityVerdict:
    """Largest |count - expected| / expected, in percent, over every (person, group) cell."""
    team_count = validate_team_count(team_count)
    iterations = validate_iterations(iterations)
    expected = iterations / team_count
    max_dev = 0.0
    for person in stats.values():
        for t in range(1, team_count + 1):
            dev = abs(person.get(t, 0) - expected) * 100 / expected
            if dev > max_dev:
                max_dev = dev

    verdict = UniformityVerdict(is_uniform=max_dev < threshold, max_deviation=_round_half_up(max_dev))
    logger.info("uniformity: max deviation %.2f%% (uniform=%s)", verdict.max_deviation, verdict.is_uniform)
    return verdict
