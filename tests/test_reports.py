# FILE: tests/test_reports.py
from team_core.assignment import assign
from team_core.models import UniformityVerdict
from team_core.reports import (
    assignment_csv_bytes, assignment_grid_df, assignment_table_df,
    distribution_dashboard_df, verdict_message,
)
from team_core.export_pdf import render_pdf

def identity(low, high):
    return high

def test_grid_and_table():
    groups = assign({1: "A"}, {}, ["B", "C"], [], 2, randint=identity)
    grid = assignment_grid_df(groups)
    assert grid.to_dict("records") == [
        {"group": 1, "name": "A", "role": "Lead"},
        {"group": 1, "name": "C", "role": "Member"},
        {"group": 2, "name": "B", "role": "Member"},
    ]
    table = assignment_table_df(groups)
    assert list(table.columns) == ["Group 1", "Group 2"]
    assert table["Group 2"].tolist() == ["B", ""]

def test_dashboard_percentages():
    dash = distribution_dashboard_df({"P": {1: 30, 2: 70}}, 100)
    assert dash["percent"].tolist() == [30.0, 70.0]

def test_verdict_message():
    assert "confirmed" in verdict_message(UniformityVerdict(is_uniform=True, max_deviation=1.2))
    assert "deviates" in verdict_message(UniformityVerdict(is_uniform=False, max_deviation=7.5))

def test_render_pdf():
    groups = assign({1: "A"}, {}, ["B"], [], 2, randint=identity)
    pdf = render_pdf("Groups", assignment_table_df(groups))
    assert pdf.startswith(b"%PDF")

def test_assignment_csv_bytes():
    groups = assign({1: "A"}, {}, ["B"], [], 2, randint=identity)
    lines = assignment_csv_bytes(groups).decode("utf-8").splitlines()
    assert lines == ["group,name,role", "1,A,Lead", "2,B,Member"]
