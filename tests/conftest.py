import sys
from pathlib import Path

import pytest

PROJECT_ROOT = Path(__file__).resolve().parents[1]
if str(PROJECT_ROOT) not in sys.path:
    sys.path.insert(0, str(PROJECT_ROOT))

from core.model_state import HazardParameters, ModelState, StructureGeometry


@pytest.fixture
def two_story_geometry() -> StructureGeometry:
    """Two 3.5 m stories, unit loads on every level, 12 m of span."""
    return StructureGeometry(
        story_heights=(3.5, 3.5),
        level_loads=(1.0, 1.0, 1.0),
        spans_x=(4.0, 4.0, 4.0),
        spans_y=(4.0, 3.0),
    )


@pytest.fixture
def site_d_hazard() -> HazardParameters:
    return HazardParameters(Ss=0.5, S1=0.2, site_class="D", Ie=1.0, R=8.0)


@pytest.fixture
def make_state():
    def _make(hazard: HazardParameters, geometry: StructureGeometry) -> ModelState:
        return ModelState(hazard=hazard, geometry=geometry)

    return _make


@pytest.fixture
def sample_config():
    return {
        "building": {
            "Span X": "4,4,4",
            "Span Y": "4,3",
            "Stories Heights": "3.5,3.5",
            "Level Loads": "1.0,1.0,1.0",
        },
        "seismic": {
            "Ss": 0.5,
            "S1": 0.2,
            "Site Class": "D",
            "Ie": 1.0,
            "R": 8.0,
        },
    }
