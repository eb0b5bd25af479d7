# team_core/config.py
from __future__ import annotations
import os
import textwrap

from .constants import DEFAULT_ITERATIONS, UNIFORMITY_THRESHOLD_PCT

# ===== App defaults =====
DEFAULT_CONFIG = {
    "iterations": DEFAULT_ITERATIONS,
    "uniformity_threshold": UNIFORMITY_THRESHOLD_PCT,
    "exclude_constrained_from_simulation": True,
    "random_seed": None,             # None = fresh randomness every run
    "log_level": "INFO",
}

SETUPS_PATH = "assets/setups.yaml"
SAMPLE_ROSTER_PATH = "assets/sample_roster.csv"


def ensure_assets_exist():
    os.makedirs("assets", exist_ok=True)
    if not os.path.exists(SETUPS_PATH):
        with open(SETUPS_PATH, "w", encoding="utf-8") as f:
            f.write(DEFAULT_SETUPS_YAML)
    if not os.path.exists(SAMPLE_ROSTER_PATH):
        with open(SAMPLE_ROSTER_PATH, "w", encoding="utf-8") as f:
            f.write(DEFAULT_SAMPLE_ROSTER_CSV)


# ===== Presets (workshop: leads + deputies + constraints, classic: leads only) =====
DEFAULT_SETUPS_YAML = textwrap.dedent("""\
workshop:
  team_count: 3
  leads:
    1: Alex Carter
    2: Blake Diaz
    3: Casey Ellis
  deputy_leads:
    1: Drew Fox
    2: Emery Gray
    3: Fin Hayes
  participants:
    - Gabe Irwin
    - Harper Jones
    - Izzy Kim
    - Jordan Lee
    - Kai Miller
    - Lane Novak
    - Morgan Ortiz
    - Nico Park
    - Owen Quinn
  constraints:
    - name: Morgan Ortiz
      team: 2

classic:
  team_count: 4
  leads:
    1: Kim Jojang
    2: Lee Jojang
    3: Park Jojang
    4: Choi Jojang
  participants:
    - Hong Gildong
    - Kim Cheolsu
    - Lee Younghee
    - Park Minsu
    - Jung Sujin
    - Kang Dongwon
    - Han Jimin
    - Song Hyekyo
    - Yoo Jaesuk
    - Kang Hodong
    - Lee Kwangsoo
    - Jeon Somin
""")

DEFAULT_SAMPLE_ROSTER_CSV = textwrap.dedent("""\
name,notes
Gabe Irwin,
Harper Jones,
Izzy Kim,
Jordan Lee,
Kai Miller,
Lane Novak,
Morgan Ortiz,prefers group 2
Nico Park,
Owen Quinn,
""")


def ui_css() -> str:
    return """
<style>
:root{
  --surface: rgba(18, 22, 31, 0.78);
  --line:#2a3142;
  --text:#eaf1fb;
  --sub:#B7C2D3;
  --good:#25d790; --warn:#ffb547;
  --radius:16px;
}
.team-card{
  background: var(--surface);
  border:1px solid var(--line);
  border-radius:var(--radius);
  padding:14px 16px; margin-bottom:12px;
}
.team-card h3{ margin:0 0 8px 0; }
.team-card ul{ margin:0; padding-left:18px; }
.team-card li.lead{ font-weight:700; color: var(--good); }
.team-card li.deputy_lead{ font-weight:600; color: var(--warn); }
.team-card li.constrained{ font-style: italic; }
.small{color:var(--sub);font-size:12px}
</style>
"""
