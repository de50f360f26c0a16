# elf_results.py
"""
Result containers for the ELF procedure and the assembler that packages
them for renderers and report writers.
"""
from dataclasses import dataclass, field, asdict
from typing import Any, Dict, List
import pandas as pd

from core.constants import POINT_LOAD_DECIMALS
from core.model_state import HazardParameters, Level


@dataclass(frozen=True)
class SiteCoefficients:
    """Soil amplification factors."""
    Fa: float
    Fv: float


@dataclass(frozen=True)
class DesignSpectrum:
    """Adjusted (MCE) and design spectral accelerations."""
    SMS: float
    SM1: float
    SDS: float
    SD1: float


@dataclass
class AnalysisResult:
    """Scalar ELF parameters and per-level distribution of one analysis.

    Levels are ordered base-to-roof.
    """

    # Echoed inputs
    Ss: float
    S1: float
    site_class: str
    R: float
    Ie: float

    # Site and spectrum
    Fa: float
    Fv: float
    SMS: float
    SM1: float
    SDS: float
    SD1: float

    # Period and response coefficient
    T: float
    k: float
    Cs: float
    Cs_max: float
    Cs_min: float

    # Distribution
    W_effective: float
    V: float
    sum_w_h_k: float
    overturning_moment: float
    levels: List[Level] = field(default_factory=list)

    @property
    def point_loads(self) -> List[float]:
        """Lateral force at every level, base first."""
        return [level.Fx for level in self.levels]

    @property
    def point_loads_str(self) -> str:
        """Comma-joined lateral forces, base-to-roof, for renderers."""
        return ",".join(f"{fx:.{POINT_LOAD_DECIMALS}f}" for fx in self.point_loads)

    @property
    def story_shears(self) -> List[float]:
        """Cumulative story shear at every level, base first."""
        return [level.Vx for level in self.levels]

    def parameters_frame(self) -> pd.DataFrame:
        """Global parameters as (Parameter, Value, Description) rows."""
        rows = [
            ("Ss", self.Ss, "Spectral Acceleration (Short Period)"),
            ("S1", self.S1, "Spectral Acceleration (1.0s)"),
            ("Site Class", self.site_class, "Soil Type"),
            ("Fa", round(self.Fa, 2), "Site Coefficient (Short)"),
            ("Fv", round(self.Fv, 2), "Site Coefficient (Long)"),
            ("SMS", round(self.SMS, 3), "Adjusted Spectral Acc. (Short)"),
            ("SM1", round(self.SM1, 3), "Adjusted Spectral Acc. (1.0s)"),
            ("SDS", round(self.SDS, 3), "Design Spectral Acc. (Short)"),
            ("SD1", round(self.SD1, 3), "Design Spectral Acc. (1.0s)"),
            ("R", self.R, "Response Modification Coefficient"),
            ("Ie", self.Ie, "Importance Factor"),
            ("T (Period)", round(self.T, 3), "Approximate Fundamental Period (s)"),
            ("k", round(self.k, 2), "Distribution Exponent"),
            ("W (Weight)", round(self.W_effective, 2), "Total Seismic Weight"),
            ("Cs", round(self.Cs, 4), "Seismic Response Coefficient"),
            ("V (Base Shear)", round(self.V, 2), "Design Base Shear (V = Cs * W)"),
        ]
        return pd.DataFrame(rows, columns=["Parameter", "Value", "Description"])

    def distribution_frame(self) -> pd.DataFrame:
        """Vertical distribution table, roof first as printed in reports."""
        records = [
            {
                "Level": level.name,
                "hx": level.hx,
                "wx": level.wx,
                "wx_hx_k": level.wx_hx_k,
                "Cvx": level.cvx,
                "Fx": level.Fx,
                "Vx": level.Vx,
            }
            for level in reversed(self.levels)
        ]
        return pd.DataFrame(records, columns=["Level", "hx", "wx", "wx_hx_k", "Cvx", "Fx", "Vx"])

    def to_dict(self) -> Dict[str, Any]:
        """Plain nested dictionary of all fields plus the force string."""
        data = asdict(self)
        data["point_loads_str"] = self.point_loads_str
        return data


def assemble_result(hazard: HazardParameters,
                    site: SiteCoefficients,
                    spectrum: DesignSpectrum,
                    period: float,
                    k: float,
                    response: Dict[str, float],
                    distribution: Dict[str, float],
                    levels: List[Level]) -> AnalysisResult:
    """Package ELF intermediate values into an AnalysisResult.

    Args:
        hazard: Input hazard parameters (echoed)
        site: Interpolated site coefficients
        spectrum: Design spectrum values
        period: Approximate fundamental period
        k: Distribution exponent
        response: Dict with 'Cs', 'Cs_max', 'Cs_min'
        distribution: Dict with 'W_effective', 'V', 'sum_w_h_k', 'overturning_moment'
        levels: Populated level records, base first

    Returns:
        AnalysisResult
    """
    return AnalysisResult(
        Ss=hazard.Ss,
        S1=hazard.S1,
        site_class=hazard.site_class,
        R=hazard.R,
        Ie=hazard.Ie,
        Fa=site.Fa,
        Fv=site.Fv,
        SMS=spectrum.SMS,
        SM1=spectrum.SM1,
        SDS=spectrum.SDS,
        SD1=spectrum.SD1,
        T=period,
        k=k,
        Cs=response['Cs'],
        Cs_max=response['Cs_max'],
        Cs_min=response['Cs_min'],
        W_effective=distribution['W_effective'],
        V=distribution['V'],
        sum_w_h_k=distribution['sum_w_h_k'],
        overturning_moment=distribution['overturning_moment'],
        levels=list(levels),
    )
