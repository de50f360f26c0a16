# src/core/model_config.py
"""
Configuration loading and validation.
Turns raw form values, dictionaries or YAML files into typed ELF inputs.
"""
import os
import logging
import yaml
import numpy as np
from typing import Dict, Any, Iterable, Sequence, Tuple, Union
from pathlib import Path

from core.errors import InvalidInputError
from core.model_state import HazardParameters, StructureGeometry

logger = logging.getLogger(__name__)


def parse_number_list(raw: Union[str, Iterable[float], float], name: str) -> Tuple[float, ...]:
    """Parse a comma-separated string (or a sequence) into floats.

    Args:
        raw: Text such as "4,4,4", a list of numbers, or a single number
        name: Field name for error messages

    Returns:
        Tuple of floats in input order

    Raises:
        InvalidInputError: If the field is empty or any token is not numeric
    """
    if raw is None:
        raise InvalidInputError(f"{name} is required")

    if isinstance(raw, bool):
        raise InvalidInputError(f"{name} must be a number, got boolean {raw}")

    if isinstance(raw, (int, float)):
        tokens = [raw]
    elif isinstance(raw, str):
        tokens = [t.strip() for t in raw.split(',')]
    else:
        try:
            tokens = list(raw)
        except TypeError:
            raise InvalidInputError(
                f"{name} must be a number or comma-separated numbers, "
                f"got {type(raw).__name__}"
            ) from None

    if not tokens or tokens == ['']:
        raise InvalidInputError(f"{name} must contain at least one value")

    values = []
    for i, token in enumerate(tokens):
        if isinstance(token, bool):
            raise InvalidInputError(f"{name}: token {i + 1} ({token!r}) is not a number")
        try:
            value = float(token)
        except (TypeError, ValueError):
            raise InvalidInputError(
                f"{name}: token {i + 1} ({token!r}) is not a number"
            ) from None
        if not np.isfinite(value):
            raise InvalidInputError(f"{name}: token {i + 1} ({token!r}) is not finite")
        values.append(value)

    return tuple(values)


def parse_number(raw: Any, name: str) -> float:
    """Parse a single finite float."""
    values = parse_number_list(raw, name)
    if len(values) != 1:
        raise InvalidInputError(f"{name} must be a single number, got {len(values)} values")
    return values[0]


def build_geometry(spans_x: Sequence[float],
                   story_heights: Sequence[float],
                   level_loads: Sequence[float],
                   spans_y: Sequence[float] = ()) -> StructureGeometry:
    """Validate parsed arrays and build a StructureGeometry.

    Args:
        spans_x: Spans along the loaded direction (m)
        story_heights: Story heights, first story first (m)
        level_loads: Distributed loads per level, base first
        spans_y: Plan depth spans (m), optional

    Returns:
        StructureGeometry ordered base-to-roof

    Raises:
        InvalidInputError: If lengths disagree or dimensions are not positive
    """
    n_stories = len(story_heights)

    if len(level_loads) != n_stories + 1:
        raise InvalidInputError(
            f"Level Loads length ({len(level_loads)}) must equal number of "
            f"stories + 1 ({n_stories + 1}), base level first"
        )

    if any(h < 0 for h in story_heights):
        raise InvalidInputError(f"Stories Heights must not be negative, got {list(story_heights)}")

    for label, values in (("Span X", spans_x), ("Span Y", spans_y)):
        if any(v <= 0 for v in values):
            raise InvalidInputError(f"{label} values must be positive, got {list(values)}")

    negative = [w for w in level_loads if w < 0]
    if negative:
        logger.warning(f"Negative level loads {negative} will produce signed lateral forces")

    return StructureGeometry(
        story_heights=tuple(story_heights),
        level_loads=tuple(level_loads),
        spans_x=tuple(spans_x),
        spans_y=tuple(spans_y),
    )


def build_hazard(Ss: Any, S1: Any, site_class: Any, Ie: Any, R: Any) -> HazardParameters:
    """Validate raw hazard values and build HazardParameters.

    The site class label is echoed as given (whitespace stripped); the
    site coefficient lookup matches it case-insensitively and resolves
    unknown labels to class D.

    Raises:
        InvalidInputError: If a value is not numeric or Ie/R is not positive
    """
    hazard = HazardParameters(
        Ss=parse_number(Ss, "Ss"),
        S1=parse_number(S1, "S1"),
        site_class=str(site_class).strip() if site_class is not None else "",
        Ie=parse_number(Ie, "Ie"),
        R=parse_number(R, "R"),
    )

    if hazard.Ie <= 0:
        raise InvalidInputError(f"Ie must be positive, got {hazard.Ie}")
    if hazard.R <= 0:
        raise InvalidInputError(f"R must be positive, got {hazard.R}")

    return hazard


class ConfigLoader:
    """Loads and validates ELF analysis configuration."""

    REQUIRED_BUILDING_KEYS = ["Span X", "Stories Heights", "Level Loads"]
    REQUIRED_SEISMIC_KEYS = ["Ss", "S1", "Site Class", "Ie", "R"]

    @staticmethod
    def load(config_input: Union[Dict, str, Path]) -> Dict[str, Any]:
        """Load configuration from dict or YAML file.

        Args:
            config_input: Dictionary or path to YAML file

        Returns:
            Validated configuration dictionary with 'geometry' and 'hazard'
            entries holding the typed inputs

        Raises:
            FileNotFoundError: If YAML file missing
            InvalidInputError: If configuration invalid
        """
        if isinstance(config_input, dict):
            config = config_input
        elif isinstance(config_input, (str, os.PathLike)):
            config = ConfigLoader._load_yaml(config_input)
        else:
            raise TypeError("config_input must be dict or file path")

        return ConfigLoader._validate(config)

    @staticmethod
    def _load_yaml(path: Union[str, Path]) -> Dict[str, Any]:
        """Load YAML configuration file."""
        if not os.path.exists(path):
            raise FileNotFoundError(f"Configuration file not found: {path}")

        with open(path, 'r', encoding='utf-8') as f:
            try:
                config = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise InvalidInputError(f"Malformed YAML in {path}: {e}") from e
            except UnicodeDecodeError as e:
                raise InvalidInputError(f"Configuration file {path} is not UTF-8 text: {e}") from e

        if not isinstance(config, dict):
            raise InvalidInputError(f"Configuration file {path} must contain a mapping")
        return config

    @staticmethod
    def _validate(config: Dict[str, Any]) -> Dict[str, Any]:
        """Validate and enrich configuration.

        Args:
            config: Raw configuration dictionary

        Returns:
            Copy of the configuration with typed 'geometry', 'hazard' and
            'n_stories' entries added

        Raises:
            InvalidInputError: If a section or key is missing or malformed
        """
        building = config.get('building')
        seismic = config.get('seismic')

        if not isinstance(building, dict):
            raise InvalidInputError("config['building'] is required")
        if not isinstance(seismic, dict):
            raise InvalidInputError("config['seismic'] is required")

        missing = [k for k in ConfigLoader.REQUIRED_BUILDING_KEYS if k not in building]
        if missing:
            raise InvalidInputError(f"config['building'] missing required keys: {missing}")

        missing = [k for k in ConfigLoader.REQUIRED_SEISMIC_KEYS if k not in seismic]
        if missing:
            raise InvalidInputError(f"config['seismic'] missing required keys: {missing}")

        spans_x = parse_number_list(building['Span X'], "Span X")
        # Plan depth defaults to the loaded direction spans
        spans_y = parse_number_list(building.get('Span Y', building['Span X']), "Span Y")
        story_heights = parse_number_list(building['Stories Heights'], "Stories Heights")
        level_loads = parse_number_list(building['Level Loads'], "Level Loads")

        geometry = build_geometry(spans_x, story_heights, level_loads, spans_y)
        hazard = build_hazard(
            seismic['Ss'], seismic['S1'], seismic['Site Class'],
            seismic['Ie'], seismic['R'],
        )

        validated = dict(config)
        validated['n_stories'] = geometry.n_stories
        validated['geometry'] = geometry
        validated['hazard'] = hazard

        logger.debug(f"Validated configuration: {geometry.n_stories} stories, "
                     f"site class {hazard.site_class}")
        return validated
