# src/core/structural_utils.py
"""
Structural utilities - level construction, tributary weights and
overturning moment.
"""
import logging
import numpy as np
from typing import List

from core.model_state import ModelState, Level
from core.constants import BASE_LEVEL_NAME, ROOF_LEVEL_NAME


class StructuralUtils:
    """Builds level records and derived gravity quantities."""

    def __init__(self, state: ModelState):
        """Initialize with model state.

        Args:
            state: ModelState instance containing hazard and geometry
        """
        self.state = state
        self.logger = logging.getLogger(__name__)
        self._geometry = state.geometry

    # =========================================================================
    # Level Construction
    # =========================================================================

    @staticmethod
    def level_name(index: int, n_stories: int) -> str:
        """Label for level `index` (0 = base) of a building with n_stories."""
        if index == 0:
            return BASE_LEVEL_NAME
        if index == n_stories:
            return ROOF_LEVEL_NAME
        return f"FL {index + 1}"

    def level_weights(self) -> np.ndarray:
        """Tributary weight of every level, base first.

        Weight = distributed load x total span length.
        """
        loads = np.asarray(self._geometry.level_loads, dtype=float)
        return loads * self._geometry.total_span_length

    def build_levels(self) -> List[Level]:
        """Create level records base-to-roof and store them on the state.

        Returns:
            List of Level with hx and wx set; force fields zeroed
        """
        n_stories = self.state.n_stories
        elevations = self._geometry.level_elevations
        weights = self.level_weights()

        levels = [
            Level(name=self.level_name(i, n_stories), hx=float(elevations[i]), wx=float(weights[i]))
            for i in range(n_stories + 1)
        ]

        for level in levels:
            self.logger.debug(f"{level.name}: hx = {level.hx:.2f}, wx = {level.wx:.2f}")

        self.state.levels = levels
        self.logger.info(f"Built {len(levels)} levels "
                         f"(span length = {self._geometry.total_span_length:.2f})")
        return levels

    # =========================================================================
    # Derived Quantities
    # =========================================================================

    def overturning_moment(self) -> float:
        """Overturning moment at the base from level forces.

        Returns:
            Sum of Fx * hx over all levels
        """
        forces = np.array([level.Fx for level in self.state.levels])
        heights = np.array([level.hx for level in self.state.levels])

        moment = float(np.sum(forces * heights))
        self.logger.debug(f"Overturning moment = {moment:.2f}")
        return moment
