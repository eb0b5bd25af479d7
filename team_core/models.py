# FILE: team_core/models.py
from __future__ import annotations
from typing import Dict, List, Optional
from pydantic import BaseModel, Field, field_validator

from .constants import (
    DEFAULT_ITERATIONS, UNIFORMITY_THRESHOLD_PCT,
    ROLE_LEAD, ROLE_DEPUTY_LEAD, normalize_name,
)


class MemberAssignment(BaseModel):
    name: str
    role: str


class Constraint(BaseModel):
    """Pin a participant to a group (1-based)."""
    name: str
    team: int

    @field_validator("name", mode="before")
    @classmethod
    def _strip(cls, v):
        return normalize_name(v)


class RoleLayer(BaseModel):
    """One fixed-role layer: group index -> holder name (at most one per group)."""
    role: str
    holders: Dict[int, str] = Field(default_factory=dict)

    @field_validator("holders", mode="before")
    @classmethod
    def _drop_none(cls, v):
        if v is None:
            return {}
        return {k: normalize_name(n) for k, n in dict(v).items()}

    def names(self) -> List[str]:
        return [n for n in (normalize_name(v) for v in self.holders.values()) if n]


class UniformityVerdict(BaseModel):
    is_uniform: bool
    max_deviation: float


class TeamSetup(BaseModel):
    """Caller-owned roster configuration passed into each core call."""
    team_count: int = 3
    leads: Dict[int, str] = Field(default_factory=dict)
    deputy_leads: Dict[int, str] = Field(default_factory=dict)
    participants: List[str] = Field(default_factory=list)
    constraints: List[Constraint] = Field(default_factory=list)

    @field_validator("team_count")
    @classmethod
    def _positive(cls, v):
        if v <= 0:
            raise ValueError("team_count must be a positive integer")
        return v

    @field_validator("leads", "deputy_leads", mode="before")
    @classmethod
    def _drop_none(cls, v):
        if v is None:
            return {}
        return {k: normalize_name(n) for k, n in dict(v).items()}

    def role_layers(self) -> List[RoleLayer]:
        """Non-empty fixed-role layers in placement order."""
        layers = []
        for role, holders in ((ROLE_LEAD, self.leads), (ROLE_DEPUTY_LEAD, self.deputy_leads)):
            layer = RoleLayer(role=role, holders=holders)
            if layer.names():
                layers.append(layer)
        return layers


class AppConfig(BaseModel):
    iterations: int = DEFAULT_ITERATIONS
    uniformity_threshold: float = UNIFORMITY_THRESHOLD_PCT
    exclude_constrained_from_simulation: bool = True
    random_seed: Optional[int] = None
    log_level: str = "INFO"

    @field_validator("iterations")
    @classmethod
    def _positive(cls, v):
        if v <= 0:
            raise ValueError("iterations must be a positive integer")
        return v

    @field_validator("uniformity_threshold")
    @classmethod
    def _threshold(cls, v):
        if v <= 0:
            raise ValueError("uniformity_threshold must be > 0")
        return v
