# src/core/analysis_runner.py
"""
Handles ELF analysis execution from raw or configured inputs.
"""
import logging
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Optional, Union

from core.errors import InvalidInputError
from core.model_config import ConfigLoader
from core.model_state import ModelState, HazardParameters, StructureGeometry
from Seismic_Design.seismic_functions import SeismicFunctions
from Seismic_Design.elf_results import AnalysisResult


@dataclass
class AnalysisOutcome:
    """Tagged outcome of an analysis request.

    Attributes:
        status: 'success' or 'invalid_input'
        result: AnalysisResult when successful
        error: Error message when the input was rejected
    """
    status: str
    result: Optional[AnalysisResult] = None
    error: Optional[str] = None

    @property
    def ok(self) -> bool:
        return self.status == 'success'


class AnalysisRunner:
    """Executes ELF analyses on validated inputs."""

    SUCCESS = 'success'
    INVALID_INPUT = 'invalid_input'

    def __init__(self):
        self.logger = logging.getLogger(__name__)

    def analyze(self, hazard: HazardParameters, geometry: StructureGeometry) -> AnalysisResult:
        """Run the ELF procedure on typed inputs.

        Args:
            hazard: Hazard parameters
            geometry: Building geometry ordered base-to-roof

        Returns:
            AnalysisResult

        Raises:
            DegenerateGeometryError: If the building has no height
        """
        state = ModelState(hazard=hazard, geometry=geometry)
        self.logger.info(f"Starting ELF analysis ({state.n_stories} stories, "
                         f"H = {geometry.total_height:.2f} m)")

        seismic = SeismicFunctions(state)
        result = seismic.run_elf()

        self.logger.info(f"ELF analysis complete: T = {result.T:.3f} s, "
                         f"Cs = {result.Cs:.4f}, V = {result.V:.2f}")
        return result

    def run(self, config_input: Union[Dict[str, Any], str, Path]) -> AnalysisOutcome:
        """Load configuration and run the ELF procedure.

        Invalid input is reported through the returned outcome rather than
        raised. A building with no height still raises
        DegenerateGeometryError.

        Args:
            config_input: Configuration dict or path to YAML file

        Returns:
            AnalysisOutcome tagged 'success' or 'invalid_input'
        """
        try:
            config = ConfigLoader.load(config_input)
        except InvalidInputError as e:
            self.logger.error(f"Invalid analysis input: {e}")
            return AnalysisOutcome(status=self.INVALID_INPUT, error=str(e))

        result = self.analyze(config['hazard'], config['geometry'])
        return AnalysisOutcome(status=self.SUCCESS, result=result)

    def save_results(self, result: AnalysisResult, result_path: Union[str, Path]) -> Path:
        """Write parameter and distribution tables for report writers.

        Args:
            result: Completed analysis result
            result_path: Output directory (created if missing)

        Returns:
            Output directory path
        """
        result_path = Path(result_path)
        result_path.mkdir(parents=True, exist_ok=True)

        result.parameters_frame().to_csv(result_path / 'parameters.csv', index=False)
        result.distribution_frame().to_csv(result_path / 'distribution.csv', index=False)

        with open(result_path / 'point_loads.txt', 'w', encoding='utf-8') as f:
            f.write(result.point_loads_str + "\n")

        self.logger.info(f"Saved ELF results to {result_path}")
        return result_path
