# seismic_functions.py
"""
Seismic force calculations by the Equivalent Lateral Force procedure
(DPT 1301/1302).
"""
import logging
import numpy as np
from typing import Dict, List, Optional

from core.model_state import ModelState, Level
from core.errors import DegenerateGeometryError
from core.structural_utils import StructuralUtils
from core.constants import (
    PERIOD_COEFFICIENT, PERIOD_EXPONENT, CS_MIN,
    K_PERIOD_BREAKPOINTS, K_VALUES, DESIGN_SPECTRUM_RATIO,
)
from Seismic_Design.site_coefficients import get_fa, get_fv, resolve_site_class
from Seismic_Design.elf_results import (
    SiteCoefficients, DesignSpectrum, AnalysisResult, assemble_result,
)


class SeismicFunctions:
    """Seismic analysis functions following DPT 1301/1302."""

    def __init__(self, state: ModelState):
        """Initialize seismic functions.

        Args:
            state: ModelState instance with hazard parameters and geometry
        """
        self.state = state
        self.hazard = state.hazard
        self.logger = logging.getLogger(__name__)
        self.utils = StructuralUtils(state)

        self.site = self.compute_site_coefficients()
        self.spectrum = self.compute_design_spectrum(self.site)

        self.logger.info(f"Seismic parameters: SS={self.hazard.Ss:.3f}, S1={self.hazard.S1:.3f}, "
                         f"SDS={self.SDS:.3f}, SD1={self.SD1:.3f}, "
                         f"Site Class={self.hazard.site_class}")

    @property
    def SDS(self) -> float:
        return self.spectrum.SDS

    @property
    def SD1(self) -> float:
        return self.spectrum.SD1

    # =========================================================================
    # Site Coefficients and Design Spectrum
    # =========================================================================

    def compute_site_coefficients(self) -> SiteCoefficients:
        """Interpolate Fa and Fv for the site class."""
        site_class = resolve_site_class(self.hazard.site_class)
        return SiteCoefficients(
            Fa=get_fa(site_class, self.hazard.Ss),
            Fv=get_fv(site_class, self.hazard.S1),
        )

    def compute_design_spectrum(self, site: SiteCoefficients) -> DesignSpectrum:
        """Calculate adjusted and design spectral accelerations.

        Args:
            site: Site coefficients

        Returns:
            DesignSpectrum with SMS, SM1, SDS, SD1
        """
        SMS = site.Fa * self.hazard.Ss
        SM1 = site.Fv * self.hazard.S1

        return DesignSpectrum(
            SMS=SMS,
            SM1=SM1,
            SDS=DESIGN_SPECTRUM_RATIO * SMS,
            SD1=DESIGN_SPECTRUM_RATIO * SM1,
        )

    # =========================================================================
    # Period, Distribution Exponent and Response Coefficient
    # =========================================================================

    def calculate_approximate_period(self) -> float:
        """Calculate approximate fundamental period Ta = 0.0466 hn^0.9.

        Returns:
            Approximate fundamental period (seconds)

        Raises:
            DegenerateGeometryError: If the building has no height
        """
        building_height = self.state.geometry.total_height

        if building_height <= 0:
            raise DegenerateGeometryError(
                f"Total building height must be positive to estimate the period, "
                f"got {building_height} over {self.state.n_stories} stories"
            )

        Ta = PERIOD_COEFFICIENT * (building_height ** PERIOD_EXPONENT)

        self.logger.debug(f"Approximate period Ta = {Ta:.3f} sec (height = {building_height:.2f} m)")
        return Ta

    def get_k_coefficient(self, period: float) -> float:
        """Get vertical distribution exponent k.

        k = 1 for T <= 0.5 s, 2 for T >= 2.5 s, linear in between.

        Args:
            period: Fundamental period

        Returns:
            Distribution exponent k
        """
        k = float(np.interp(period, K_PERIOD_BREAKPOINTS, K_VALUES))

        self.logger.debug(f"Distribution exponent k = {k:.3f} for T = {period:.3f} sec")
        return k

    def calculate_cs_coefficient(self, period: float) -> Dict[str, float]:
        """Calculate seismic response coefficient Cs.

        The upper bound SD1 / (T R/Ie) is applied first, then the lower
        bound 0.01 regardless of whether the upper bound governed.

        Args:
            period: Fundamental period

        Returns:
            Dict with 'Cs', 'Cs_max' and 'Cs_min'

        Raises:
            DegenerateGeometryError: If the period is not positive
        """
        if period <= 0:
            raise DegenerateGeometryError(f"Period must be positive to bound Cs, got {period}")

        R_over_Ie = self.hazard.R_over_Ie

        # Initial value
        Cs = self.SDS / R_over_Ie

        # Upper limit
        Cs_max = self.SD1 / (period * R_over_Ie)
        Cs = min(Cs, Cs_max)

        # Lower limit
        Cs = max(Cs, CS_MIN)

        self.logger.debug(f"Cs = {Cs:.4f} for T = {period:.3f} sec "
                          f"(max={Cs_max:.4f}, min={CS_MIN:.4f})")
        return {'Cs': Cs, 'Cs_max': Cs_max, 'Cs_min': CS_MIN}

    # =========================================================================
    # Vertical Distribution
    # =========================================================================

    def effective_seismic_weight(self, levels: List[Level]) -> float:
        """Sum of level weights above the base."""
        return float(sum(level.wx for level in levels if not level.is_base))

    def compute_base_shear(self, Cs: float, levels: List[Level]) -> float:
        """Calculate seismic base shear V = Cs W.

        Args:
            Cs: Seismic response coefficient
            levels: Level records, base first

        Returns:
            Seismic base shear
        """
        W = self.effective_seismic_weight(levels)
        V = Cs * W

        self.logger.info(f"Base shear V = {V:.2f} (Cs={Cs:.4f}, W={W:.2f})")
        return V

    def distribute_elf_forces(self, V: float, k: float, levels: List[Level]) -> float:
        """Distribute base shear over levels and accumulate story shear.

        Fills wx_hx_k, cvx, Fx and Vx of each level in place.

        Args:
            V: Base shear
            k: Distribution exponent
            levels: Level records ordered base-to-roof

        Returns:
            Sum of wx hx^k over levels above the base
        """
        sum_w_h_k = 0.0
        for level in levels:
            if level.is_base:
                level.wx_hx_k = 0.0
            else:
                level.wx_hx_k = level.wx * level.hx ** k
                sum_w_h_k += level.wx_hx_k

        for level in levels:
            if not level.is_base and sum_w_h_k != 0:
                level.cvx = level.wx_hx_k / sum_w_h_k
            else:
                level.cvx = 0.0
            level.Fx = level.cvx * V

        # Story shear accumulates from the roof down
        cumulative_shear = 0.0
        for level in reversed(levels):
            cumulative_shear += level.Fx
            level.Vx = cumulative_shear

        for level in levels:
            self.logger.debug(f"{level.name}: Cvx = {level.cvx:.4f}, "
                              f"Fx = {level.Fx:.3f}, Vx = {level.Vx:.3f}")

        total = sum(level.Fx for level in levels)
        self.logger.info(f"Distributed ELF forces: k={k:.2f}, total={total:.2f}")
        return sum_w_h_k

    # =========================================================================
    # Full Procedure
    # =========================================================================

    def run_elf(self, period: Optional[float] = None) -> AnalysisResult:
        """Run the complete ELF procedure.

        Args:
            period: Fundamental period (if None, calculates Ta from height)

        Returns:
            AnalysisResult with populated levels

        Raises:
            DegenerateGeometryError: If the building has no height
        """
        if period is None:
            period = self.calculate_approximate_period()

        k = self.get_k_coefficient(period)
        response = self.calculate_cs_coefficient(period)

        levels = self.utils.build_levels()
        W = self.effective_seismic_weight(levels)
        V = self.compute_base_shear(response['Cs'], levels)
        sum_w_h_k = self.distribute_elf_forces(V, k, levels)
        moment = self.utils.overturning_moment()

        return assemble_result(
            hazard=self.hazard,
            site=self.site,
            spectrum=self.spectrum,
            period=period,
            k=k,
            response=response,
            distribution={
                'W_effective': W,
                'V': V,
                'sum_w_h_k': sum_w_h_k,
                'overturning_moment': moment,
            },
            levels=levels,
        )
