# site_coefficients.py
"""
Site coefficient tables and piecewise-linear interpolation (DPT 1301/1302).
"""
import logging
import numpy as np
from typing import Dict, List, Sequence

from core.errors import InvalidInputError

logger = logging.getLogger(__name__)


# Short-period site coefficient Fa, keyed by site class, at SS breakpoints
FA_COEFFICIENTS = {
    'SS': [0.25, 0.50, 0.75, 1.00, 1.25],
    'A': [0.8, 0.8, 0.8, 0.8, 0.8],
    'B': [1.0, 1.0, 1.0, 1.0, 1.0],
    'C': [1.2, 1.2, 1.1, 1.0, 1.0],
    'D': [1.6, 1.4, 1.2, 1.1, 1.0],
    'E': [2.5, 1.7, 1.2, 0.9, 0.9],
    'F': [1.0, 1.0, 1.0, 1.0, 1.0],
}

# 1-second site coefficient Fv, keyed by site class, at S1 breakpoints
FV_COEFFICIENTS = {
    'S1': [0.1, 0.2, 0.3, 0.4, 0.5],
    'A': [0.8, 0.8, 0.8, 0.8, 0.8],
    'B': [1.0, 1.0, 1.0, 1.0, 1.0],
    'C': [1.7, 1.6, 1.5, 1.4, 1.3],
    'D': [2.4, 2.0, 1.8, 1.6, 1.5],
    'E': [3.5, 3.2, 2.8, 2.4, 2.4],
    'F': [1.0, 1.0, 1.0, 1.0, 1.0],
}

SITE_CLASSES = ['A', 'B', 'C', 'D', 'E', 'F']
DEFAULT_SITE_CLASS = 'D'


def interpolate(x: float, xs: Sequence[float], ys: Sequence[float]) -> float:
    """Piecewise-linear interpolation clamped at the table ends.

    Args:
        x: Value to look up
        xs: Strictly increasing breakpoints
        ys: Values at each breakpoint

    Returns:
        ys[0] below the first breakpoint, ys[-1] above the last,
        otherwise the linear interpolation on the bracketing interval

    Raises:
        InvalidInputError: If the table has fewer than 2 points, is not
            strictly increasing, or xs and ys differ in length
    """
    xs = np.asarray(xs, dtype=float)
    ys = np.asarray(ys, dtype=float)

    if xs.ndim != 1 or xs.size < 2:
        raise InvalidInputError(f"Interpolation table needs at least 2 breakpoints, got {xs.size}")
    if ys.shape != xs.shape:
        raise InvalidInputError(
            f"Interpolation table lengths differ: {xs.size} breakpoints, {ys.size} values"
        )
    if np.any(np.diff(xs) <= 0):
        raise InvalidInputError(f"Interpolation breakpoints must be strictly increasing: {xs.tolist()}")

    return float(np.interp(x, xs, ys))


def resolve_site_class(site_class: str) -> str:
    """Map a site class label onto a table row.

    Unrecognised labels fall back to class D.
    """
    key = str(site_class).strip().upper() if site_class is not None else ''
    if key not in SITE_CLASSES:
        logger.warning(f"Unrecognised site class {site_class!r}, using class {DEFAULT_SITE_CLASS}")
        return DEFAULT_SITE_CLASS
    return key


def _table_row(coeff_table: Dict[str, List[float]], site_class: str) -> List[float]:
    return coeff_table[resolve_site_class(site_class)]


def get_fa(site_class: str, Ss: float) -> float:
    """Short-period site coefficient Fa for a site class at SS."""
    Fa = interpolate(Ss, FA_COEFFICIENTS['SS'], _table_row(FA_COEFFICIENTS, site_class))
    logger.debug(f"Fa = {Fa:.3f} for SS = {Ss:.3f}, site class {site_class}")
    return Fa


def get_fv(site_class: str, S1: float) -> float:
    """1-second site coefficient Fv for a site class at S1."""
    Fv = interpolate(S1, FV_COEFFICIENTS['S1'], _table_row(FV_COEFFICIENTS, site_class))
    logger.debug(f"Fv = {Fv:.3f} for S1 = {S1:.3f}, site class {site_class}")
    return Fv
