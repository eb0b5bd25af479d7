# FILE: tests/test_validation.py
from team_core.models import Constraint, TeamSetup
from team_core.validation import validate_setup, validate_team_count, run_self_test

def test_clean_setup_has_no_warnings():
    setup = TeamSetup(team_count=2, leads={1: "A", 2: "B"}, participants=["C", "D"])
    assert validate_setup(setup) == []

def test_setup_warnings():
    setup = TeamSetup(
        team_count=2,
        leads={1: "A", 5: "Ghost"},
        deputy_leads={2: "A"},
        participants=["C", "C", "D"],
        constraints=[
            Constraint(name="D", team=9),
            Constraint(name="A", team=2),
            Constraint(name="C", team=1),
            Constraint(name="C", team=2),
        ],
    )
    warns = " | ".join(validate_setup(setup))
    assert "non-existent group(s): [5]" in warns
    assert "outside 1..2" in warns
    assert "A holds a fixed role" in warns
    assert "C is constrained more than once" in warns
    assert "more than one fixed role: A" in warns
    assert "Duplicate participant names: C" in warns

def test_validate_team_count_passthrough():
    assert validate_team_count(3) == 3

def test_self_test_all_pass():
    results = run_self_test()
    assert results["tests"]
    assert all(ok for _, ok in results["tests"])
