# app.py
import logging
from typing import Dict, List

import pandas as pd
import streamlit as st

from team_core.config import (
    DEFAULT_CONFIG,
    SETUPS_PATH,
    ensure_assets_exist,
    ui_css,
)
from team_core.constants import group_label
from team_core.io import load_setups_yaml
from team_core.models import AppConfig, Constraint, TeamSetup
from team_core.assignment import assign_setup, group_sizes
from team_core.fairness import simulate, check_uniformity, simulation_pool, check_evenness
from team_core.reports import distribution_dashboard_df, verdict_message
from team_core.shuffle import make_randint
from team_core.validation import ConfigurationError, validate_setup


# ---------- Page & Theme ----------
st.set_page_config(page_title="Team Assignment", layout="wide")
st.markdown(ui_css(), unsafe_allow_html=True)

ensure_assets_exist()

# ---------- Session State ----------
def _init_state():
    ss = st.session_state
    ss.setdefault("app_config", AppConfig(**DEFAULT_CONFIG))
    ss.setdefault("presets", load_setups_yaml(SETUPS_PATH))
    ss.setdefault("preset_name", next(iter(ss["presets"]), ""))
    ss.setdefault("setup", ss["presets"].get(ss["preset_name"], TeamSetup()))
    ss.setdefault("groups", None)
    ss.setdefault("stats", None)
    ss.setdefault("verdict", None)

_init_state()
ss = st.session_state
logging.basicConfig(
    level=getattr(logging, ss["app_config"].log_level.upper(), logging.INFO),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger("team_app")


def _roles_df(setup: TeamSetup) -> pd.DataFrame:
    teams = list(range(1, setup.team_count + 1))
    return pd.DataFrame({
        "group": teams,
        "lead": [setup.leads.get(t, "") for t in teams],
        "deputy_lead": [setup.deputy_leads.get(t, "") for t in teams],
    })


def _constraints_df(setup: TeamSetup) -> pd.DataFrame:
    return pd.DataFrame(
        [{"name": c.name, "team": c.team} for c in setup.constraints],
        columns=["name", "team"],
    )


def _cell(v) -> str:
    return "" if v is None or pd.isna(v) else str(v).strip()


def _setup_from_editors(team_count: int, roles: pd.DataFrame, people: pd.DataFrame, cons: pd.DataFrame) -> TeamSetup:
    leads: Dict[int, str] = {}
    deputies: Dict[int, str] = {}
    for _, r in roles.iterrows():
        t = int(r["group"])
        leads[t] = _cell(r.get("lead"))
        deputies[t] = _cell(r.get("deputy_lead"))
    participants: List[str] = [_cell(n) for n in people["name"].tolist()]
    constraints: List[Constraint] = []
    for _, r in cons.iterrows():
        name, team = _cell(r.get("name")), r.get("team")
        if name and team is not None and not pd.isna(team):
            constraints.append(Constraint(name=name, team=int(team)))
    return TeamSetup(
        team_count=team_count,
        leads=leads,
        deputy_leads=deputies,
        participants=[p for p in participants if p],
        constraints=constraints,
    )


# ---------- Sidebar ----------
with st.sidebar:
    st.header("Setup")
    names = list(ss["presets"].keys())
    if names:
        picked = st.selectbox("Preset", names, index=names.index(ss["preset_name"]) if ss["preset_name"] in names else 0)
        if st.button("Load preset"):
            ss["preset_name"] = picked
            ss["setup"] = ss["presets"][picked]
            ss["groups"] = ss["stats"] = ss["verdict"] = None
            st.rerun()

    cfg: AppConfig = ss["app_config"]
    team_count = st.number_input("Groups", min_value=1, max_value=50, value=int(ss["setup"].team_count), step=1)
    iterations = st.number_input("Fairness test trials", min_value=100, max_value=50000, value=int(cfg.iterations), step=100)
    exclude_constrained = st.checkbox(
        "Leave constrained people out of the fairness test",
        value=cfg.exclude_constrained_from_simulation,
    )
    seed_txt = st.text_input("Random seed (blank = fresh)", value="" if cfg.random_seed is None else str(cfg.random_seed))
    try:
        seed = int(seed_txt) if seed_txt.strip() else None
    except ValueError:
        st.error("Seed must be an integer.")
        seed = None
    ss["app_config"] = cfg.model_copy(update={
        "iterations": int(iterations),
        "exclude_constrained_from_simulation": exclude_constrained,
        "random_seed": seed,
    })

# ---------- Main ----------
st.title("Team Assignment")
setup: TeamSetup = ss["setup"]
if setup.team_count != int(team_count):
    setup = setup.model_copy(update={"team_count": int(team_count)})

c1, c2 = st.columns([1, 1])
with c1:
    st.subheader("Participants")
    people_df = st.data_editor(
        pd.DataFrame({"name": setup.participants}, columns=["name"]),
        num_rows="dynamic", use_container_width=True, key=f"people_editor_{ss['preset_name']}",
    )
with c2:
    st.subheader("Fixed roles")
    roles_df = st.data_editor(
        _roles_df(setup), disabled=["group"], hide_index=True,
        use_container_width=True, key=f"roles_editor_{ss['preset_name']}_{setup.team_count}",
    )
    st.subheader("Group constraints")
    cons_df = st.data_editor(
        _constraints_df(setup), num_rows="dynamic", use_container_width=True,
        column_config={"team": st.column_config.NumberColumn("group", min_value=1, step=1)},
        key=f"constraints_editor_{ss['preset_name']}",
    )

setup = _setup_from_editors(int(team_count), roles_df, people_df, cons_df)
ss["setup"] = setup

for w in validate_setup(setup):
    st.warning(w)

b1, b2 = st.columns(2)
assign_clicked = b1.button("Assign groups", type="primary", use_container_width=True)
test_clicked = b2.button("Run fairness test", use_container_width=True)

cfg = ss["app_config"]
if assign_clicked:
    try:
        ss["groups"] = assign_setup(setup, make_randint(cfg.random_seed))
    except ConfigurationError as e:
        logger.error("assignment failed: %s", e)
        st.error(str(e))

if test_clicked:
    pool = simulation_pool(setup, exclude_constrained=cfg.exclude_constrained_from_simulation)
    try:
        stats = simulate(pool, setup.team_count, cfg.iterations, make_randint(cfg.random_seed))
        ss["stats"] = stats
        ss["stats_iterations"] = cfg.iterations
        ss["verdict"] = check_uniformity(stats, cfg.iterations, setup.team_count, cfg.uniformity_threshold)
    except ConfigurationError as e:
        logger.error("simulation failed: %s", e)
        st.error(str(e))

# ---------- Results ----------
groups = ss.get("groups")
if groups:
    st.subheader("Groups")
    sizes = group_sizes(groups)
    if not check_evenness(list(sizes.values())):
        st.caption("Group sizes differ by more than one because of fixed roles and constraints.")
    cols = st.columns(min(len(groups), 4))
    for i, team in enumerate(sorted(groups)):
        items = "".join(f'<li class="{m.role}">{m.name}</li>' for m in groups[team])
        cols[i % len(cols)].markdown(
            f'<div class="team-card"><h3>{group_label(team)}</h3><ul>{items}</ul>'
            f'<div class="small">{sizes[team]} people</div></div>',
            unsafe_allow_html=True,
        )

stats = ss.get("stats")
verdict = ss.get("verdict")
if stats is not None and verdict is not None:
    st.subheader("Fairness test")
    if verdict.is_uniform:
        st.success(verdict_message(verdict))
    else:
        st.warning(verdict_message(verdict))
    dash = distribution_dashboard_df(stats, ss["stats_iterations"])
    if dash.empty:
        st.write("No participants in the random pool.")
    else:
        pivot = dash.pivot(index="name", columns="group", values="percent")
        pivot.columns = [group_label(t) for t in pivot.columns]
        st.dataframe(pivot.style.format("{:.1f}%"), use_container_width=True)
