# src/core/constants.py
"""Shared constants for the ELF seismic analysis framework."""

# Approximate fundamental period Ta = Ct * hn^x (DPT 1301/1302, moment frames)
PERIOD_COEFFICIENT = 0.0466
PERIOD_EXPONENT = 0.9

# Lower bound on the seismic response coefficient
CS_MIN = 0.01

# Distribution exponent k ramps linearly between these periods
K_PERIOD_BREAKPOINTS = [0.5, 2.5]
K_VALUES = [1.0, 2.0]

# Design spectrum reduction (SDS = 2/3 SMS)
DESIGN_SPECTRUM_RATIO = 2.0 / 3.0

# Decimal places of the force string handed to renderers
POINT_LOAD_DECIMALS = 3

# Level labels
BASE_LEVEL_NAME = "Base/FL1"
ROOF_LEVEL_NAME = "Roof"
