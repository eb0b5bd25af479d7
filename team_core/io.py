# team_core/io.py
from __future__ import annotations
import io
import logging
from typing import Dict, List

import pandas as pd
import yaml

from .aliases import map_headers
from .constants import normalize_name
from .models import TeamSetup

logger = logging.getLogger(__name__)

REQUIRED_COLUMNS = ["name"]
TEMPLATE_COLUMNS = ["name", "notes"]


def load_roster_csv(file_like) -> List[str]:
    """Participant names from a CSV; headers go through the alias map, blank rows are dropped."""
    if isinstance(file_like, (bytes, bytearray)):
        file_like = io.BytesIO(file_like)
    df = pd.read_csv(file_like, dtype=str)
    df, _ = map_headers(df)
    missing = [c for c in REQUIRED_COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"Missing required columns: {missing}")

    names = [normalize_name(n) for n in df["name"].fillna("").tolist()]
    names = [n for n in names if n]
    logger.info("loaded %d participant(s) from roster CSV", len(names))
    return names


def save_roster_csv_bytes(names: List[str]) -> bytes:
    df = pd.DataFrame({"name": [n for n in names if normalize_name(n)]})
    buf = io.StringIO()
    df.to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")


def generate_template_csv_bytes() -> bytes:
    empty = pd.DataFrame(columns=TEMPLATE_COLUMNS)
    buf = io.StringIO()
    empty.to_csv(buf, index=False)
    return buf.getvalue().encode("utf-8")


def parse_setups_yaml(text: str) -> Dict[str, TeamSetup]:
    obj = yaml.safe_load(text) or {}
    if not isinstance(obj, dict):
        raise ValueError("Setups file must map preset names to setups.")
    return {str(k): TeamSetup(**(v or {})) for k, v in obj.items()}


def load_setups_yaml(path: str) -> Dict[str, TeamSetup]:
    with open(path, "r", encoding="utf-8") as f:
        return parse_setups_yaml(f.read())


def save_setups_yaml(path: str, text: str):
    parse_setups_yaml(text)
    with open(path, "w", encoding="utf-8") as f:
        f.write(text)


def setup_to_yaml(setup: TeamSetup, name: str = "current") -> str:
    data = setup.model_dump()
    data["leads"] = {k: v for k, v in data["leads"].items() if v}
    data["deputy_leads"] = {k: v for k, v in data["deputy_leads"].items() if v}
    return yaml.safe_dump({name: data}, sort_keys=False, allow_unicode=True)
