# FILE: tests/test_assignment.py
import numpy as np
import pandas as pd
import pytest
from team_core.assignment import (
    assign, assign_layers, assign_setup, distribute_to_teams, exclusion_set, group_sizes,
)
from team_core.constants import ROLE_LEAD, ROLE_DEPUTY_LEAD, ROLE_CONSTRAINED, ROLE_MEMBER
from team_core.models import Constraint, RoleLayer, TeamSetup
from team_core.shuffle import make_randint
from team_core.validation import ConfigurationError

def identity(low, high):
    return high

def _where(groups, name):
    return [(t, m.role) for t, ms in groups.items() for m in ms if m.name == name]

def test_leads_deputies_and_participants_balanced():
    groups = assign(
        {1: "A", 2: "B", 3: "C"}, {1: "D", 2: "E", 3: "F"},
        ["G", "H", "I", "J", "K", "L"], [], 3, randint=make_randint(5),
    )
    assert sum(group_sizes(groups).values()) == 12
    assert group_sizes(groups) == {1: 4, 2: 4, 3: 4}
    for t, lead, dep in [(1, "A", "D"), (2, "B", "E"), (3, "C", "F")]:
        assert groups[t][0].name == lead and groups[t][0].role == ROLE_LEAD
        assert groups[t][1].name == dep and groups[t][1].role == ROLE_DEPUTY_LEAD
    for name in "GHIJKL":
        placed = _where(groups, name)
        assert len(placed) == 1 and placed[0][1] == ROLE_MEMBER

def test_constraint_wins_over_random_pool():
    groups = assign({}, {}, ["X", "Y", "Z"], [Constraint(name="X", team=2)], 3, randint=make_randint(1))
    assert _where(groups, "X") == [(2, ROLE_CONSTRAINED)]
    assert sum(group_sizes(groups).values()) == 3

def test_constraints_accept_tuples_and_dicts():
    groups = assign({}, {}, [], [("X", 1), {"name": "Y", "team": 3}], 3)
    assert _where(groups, "X") == [(1, ROLE_CONSTRAINED)]
    assert _where(groups, "Y") == [(3, ROLE_CONSTRAINED)]

def test_out_of_range_constraint_is_skipped_but_person_still_placed():
    groups = assign({}, {}, ["X", "Y"], [("X", 0), ("Y", 4)], 3, randint=identity)
    assert _where(groups, "X") == [(1, ROLE_MEMBER)]
    assert _where(groups, "Y") == [(2, ROLE_MEMBER)]

def test_fixed_role_wins_over_constraint():
    groups = assign({1: "A"}, {}, ["A", "B"], [("A", 3)], 3, randint=identity)
    assert _where(groups, "A") == [(1, ROLE_LEAD)]
    assert _where(groups, "B") == [(2, ROLE_MEMBER)]

def test_first_constraint_for_a_name_applies():
    groups = assign({}, {}, [], [("X", 2), ("X", 3)], 3)
    assert _where(groups, "X") == [(2, ROLE_CONSTRAINED)]

def test_fixed_role_holder_in_pool_is_placed_once():
    groups = assign({2: "A"}, {2: "B"}, ["A", "B", "C"], [], 2, randint=identity)
    assert _where(groups, "A") == [(2, ROLE_LEAD)]
    assert _where(groups, "B") == [(2, ROLE_DEPUTY_LEAD)]
    assert _where(groups, "C") == [(1, ROLE_MEMBER)]

def test_least_loaded_with_lowest_index_on_ties():
    groups = assign({}, {}, ["A", "B", "C", "D"], [], 3, randint=identity)
    assert [m.name for m in groups[1]] == ["A", "D"]
    assert [m.name for m in groups[2]] == ["B"]
    assert [m.name for m in groups[3]] == ["C"]

def test_random_fill_evens_out_prior_imbalance():
    groups = assign(
        {1: "L"}, {1: "D"}, ["P1", "P2", "P3", "P4", "P5", "P6"],
        [("C1", 1), ("C2", 1)], 3, randint=make_randint(9),
    )
    assert group_sizes(groups) == {1: 4, 2: 3, 3: 3}

def test_balance_within_one_for_equal_start():
    people = [f"P{i}" for i in range(17)]
    for seed in range(5):
        sizes = group_sizes(assign({}, {}, people, [], 4, randint=make_randint(seed))).values()
        assert max(sizes) - min(sizes) <= 1

def test_empty_inputs_give_fixed_roles_only():
    groups = assign({1: "A", 2: " "}, {}, [], [], 2)
    assert group_sizes(groups) == {1: 1, 2: 0}

def test_blank_participants_ignored():
    groups = assign({}, {}, ["", "  ", "A"], [], 2, randint=identity)
    assert sum(group_sizes(groups).values()) == 1

@pytest.mark.parametrize("bad", [0, -2, 2.5, True, "3"])
def test_invalid_team_count_fails(bad):
    with pytest.raises(ConfigurationError):
        assign({}, {}, ["A"], [], bad)

def test_layers_generalize_to_any_role_set():
    layers = [RoleLayer(role="captain", holders={1: "Cap"})]
    groups = assign_layers(layers, ["Cap", "A"], [], 2, randint=identity)
    assert _where(groups, "Cap") == [(1, "captain")]
    assert _where(groups, "A") == [(2, ROLE_MEMBER)]
    assert exclusion_set(["Cap", ""], [Constraint(name="Z", team=1)]) == {"Cap", "Z"}

def test_assign_setup_leads_only_variant():
    setup = TeamSetup(
        team_count=4,
        leads={1: "K1", 2: "K2", 3: "K3", 4: "K4"},
        participants=[f"P{i}" for i in range(12)],
    )
    groups = assign_setup(setup, make_randint(3))
    assert group_sizes(groups) == {1: 4, 2: 4, 3: 4, 4: 4}
    assert all(groups[t][0].role == ROLE_LEAD for t in groups)

def test_distribute_to_teams_round_robin():
    teams = distribute_to_teams(["A", "B", "C", "D", "E"], 2, randint=identity)
    assert teams == [["A", "C", "E"], ["B", "D"]]
    assert len(distribute_to_teams(["A"], 4)) == 4

def test_name_with_two_fixed_roles_placed_once():
    groups = assign({1: "A"}, {2: "A"}, [], [], 2)
    assert _where(groups, "A") == [(1, ROLE_LEAD)]
    assert group_sizes(groups) == {1: 1, 2: 0}

def test_lead_for_missing_group_still_placed_from_pool():
    groups = assign({5: "A"}, {}, ["A"], [], 2, randint=identity)
    assert _where(groups, "A") == [(1, ROLE_MEMBER)]

def test_numpy_and_pandas_integer_team_counts():
    groups = assign({}, {}, ["A", "B", "C"], [], pd.Series([1, 2, 3]).max(), randint=identity)
    assert group_sizes(groups) == {1: 1, 2: 1, 3: 1}
    assert all(type(t) is int for t in groups)
    assert len(distribute_to_teams(["A", "B"], np.int64(2))) == 2
