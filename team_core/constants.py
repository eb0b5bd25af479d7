# FILE: team_core/constants.py
from __future__ import annotations

# --- Role tags ---
ROLE_LEAD = "lead"
ROLE_DEPUTY_LEAD = "deputy_lead"
ROLE_CONSTRAINED = "constrained"
ROLE_MEMBER = "member"

ROLE_LABELS = {
    ROLE_LEAD: "Lead",
    ROLE_DEPUTY_LEAD: "Deputy lead",
    ROLE_CONSTRAINED: "Fixed group",
    ROLE_MEMBER: "Member",
}

# --- Simulation ---
DEFAULT_ITERATIONS = 2000
UNIFORMITY_THRESHOLD_PCT = 5.0


def normalize_name(s) -> str:
    """Strip surrounding whitespace; None and blanks become ''."""
    if s is None:
        return ""
    return str(s).strip()


def group_label(team: int) -> str:
    return f"Group {team}"
