# src/core/model_state.py
"""
Model state containers - hazard inputs, building geometry and level records.
All containers are created once per analysis run and never shared.
"""
from dataclasses import dataclass, field
from typing import List, Tuple
import numpy as np


@dataclass(frozen=True)
class HazardParameters:
    """Site hazard and structural system factors."""

    Ss: float
    S1: float
    site_class: str
    Ie: float
    R: float

    @property
    def R_over_Ie(self) -> float:
        """Effective response reduction R/Ie."""
        return self.R / self.Ie


@dataclass(frozen=True)
class StructureGeometry:
    """Building geometry and gravity loads, ordered base-to-roof.

    Attributes:
        story_heights: Height of each story (m), first story first
        level_loads: Distributed load per level (index 0 = base/ground)
        spans_x: Span lengths along the loaded direction (m)
        spans_y: Span lengths in plan depth (m), carried for renderers only
    """

    story_heights: Tuple[float, ...]
    level_loads: Tuple[float, ...]
    spans_x: Tuple[float, ...]
    spans_y: Tuple[float, ...] = ()

    @property
    def n_stories(self) -> int:
        """Number of stories above the base."""
        return len(self.story_heights)

    @property
    def total_span_length(self) -> float:
        """Sum of spans used to turn distributed load into level weight."""
        return float(np.sum(self.spans_x))

    @property
    def total_height(self) -> float:
        """Height of the roof above the base."""
        return float(np.sum(self.story_heights))

    @property
    def level_elevations(self) -> np.ndarray:
        """Cumulative elevation of every level, base (0.0) first."""
        return np.concatenate(([0.0], np.cumsum(self.story_heights)))


@dataclass
class Level:
    """One floor level of the ELF distribution.

    Force and shear fields are filled in by the distribution pass.
    """

    name: str
    hx: float
    wx: float
    wx_hx_k: float = 0.0
    cvx: float = 0.0
    Fx: float = 0.0
    Vx: float = 0.0

    @property
    def is_base(self) -> bool:
        """Base level carries no lateral force."""
        return self.hx <= 0


@dataclass
class ModelState:
    """Inputs and level records for a single ELF analysis."""

    hazard: HazardParameters
    geometry: StructureGeometry

    # Computed properties
    levels: List[Level] = field(default_factory=list)

    @property
    def n_stories(self) -> int:
        """Number of stories above the base."""
        return self.geometry.n_stories

    @property
    def roof(self) -> Level:
        """Topmost level record."""
        return self.levels[-1]

    @property
    def base(self) -> Level:
        """Ground level record."""
        return self.levels[0]
