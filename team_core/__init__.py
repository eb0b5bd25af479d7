# FILE: team_core/__init__.py
"""
team_core package: group assignment with fixed roles and constraints,
unbiased shuffling, and Monte Carlo fairness checks.
"""
__all__ = [
    "constants",
    "models",
    "shuffle",
    "assignment",
    "fairness",
    "validation",
    "config",
    "aliases",
    "io",
    "reports",
    "export_pdf",
]
