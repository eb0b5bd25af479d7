# team_core/reports.py
from __future__ import annotations
import io
from typing import Dict, List

import pandas as pd

from .constants import ROLE_LABELS, group_label
from .models import MemberAssignment, UniformityVerdict


def assignment_grid_df(groups: Dict[int, List[MemberAssignment]]) -> pd.DataFrame:
    rows = []
    for team in sorted(groups):
        for m in groups[team]:
            rows.append({
                "group": team,
                "name": m.name,
                "role": ROLE_LABELS.get(m.role, m.role),
            })
    return pd.DataFrame(rows, columns=["group", "name", "role"])


def assignment_table_df(groups: Dict[int, List[MemberAssignment]]) -> pd.DataFrame:
    """One column per group, members top to bottom (for printing)."""
    depth = max((len(v) for v in groups.values()), default=0)
    data = {}
    for team in sorted(groups):
        names = [m.name for m in groups[team]]
        data[group_label(team)] = names + [""] * (depth - len(names))
    return pd.DataFrame(data, index=[str(i) for i in range(1, depth + 1)])


def assignment_csv_bytes(groups: Dict[int, List[MemberAssignment]]) -> bytes:
    buf = io.StringIO()
    assignment_grid_df(groups).to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")


def distribution_dashboard_df(stats: Dict[str, Dict[int, int]], iterations: int) -> pd.DataFrame:
    rows = []
    for name, per_team in stats.items():
        for team in sorted(per_team):
            count = per_team[team]
            rows.append({
                "name": name,
                "group": team,
                "count": count,
                "percent": round(count / iterations * 100, 1) if iterations else 0.0,
            })
    return pd.DataFrame(rows, columns=["name", "group", "count", "percent"])


def verdict_message(verdict: UniformityVerdict) -> str:
    if verdict.is_uniform:
        return f"Uniform distribution confirmed (max deviation: {verdict.max_deviation}%)"
    return f"Distribution deviates (max deviation: {verdict.max_deviation}%)"
