import math

import pytest

from core.model_state import HazardParameters, ModelState, StructureGeometry
from core.structural_utils import StructuralUtils
from Seismic_Design.seismic_functions import SeismicFunctions


LOAD_CASES = [
    ((3.5, 3.5), (1.0, 1.0, 1.0)),
    ((4.0, 3.2, 3.2, 3.2), (2.5, 1.8, 1.8, 1.6, 0.9)),
    ((5.0,) + (3.5,) * 11, (3.0,) + (1.2,) * 11 + (0.8,)),
    ((6.0,), (10.0, 1.5)),
    ((3.0, 3.0, 3.0), (0.0, 1.0, 0.0, 2.0)),
]


def _run(hazard, heights, loads, spans=(4.0, 4.0, 4.0)):
    geometry = StructureGeometry(story_heights=heights, level_loads=loads, spans_x=spans)
    return SeismicFunctions(ModelState(hazard=hazard, geometry=geometry)).run_elf()


@pytest.mark.parametrize("heights, loads", LOAD_CASES)
def test_base_shear_is_largest_and_equals_force_sum(site_d_hazard, heights, loads) -> None:
    result = _run(site_d_hazard, heights, loads)
    base_shear = result.levels[0].Vx

    assert all(base_shear >= level.Vx for level in result.levels[1:])
    assert base_shear == pytest.approx(sum(level.Fx for level in result.levels))
    assert base_shear == pytest.approx(result.V)


@pytest.mark.parametrize("heights, loads", LOAD_CASES)
def test_story_shear_non_decreasing_downward(site_d_hazard, heights, loads) -> None:
    result = _run(site_d_hazard, heights, loads)
    shears = result.story_shears

    for lower, upper in zip(shears, shears[1:]):
        assert lower >= upper - 1e-12


@pytest.mark.parametrize("heights, loads", LOAD_CASES)
def test_distribution_factors_sum_to_one(site_d_hazard, heights, loads) -> None:
    result = _run(site_d_hazard, heights, loads)

    assert result.sum_w_h_k > 0
    assert sum(level.cvx for level in result.levels) == pytest.approx(1.0)
    assert result.levels[0].cvx == 0.0
    assert result.levels[0].Fx == 0.0


def test_base_weight_excluded_from_effective_weight(site_d_hazard) -> None:
    light_base = _run(site_d_hazard, (3.5, 3.5), (0.0, 1.0, 1.0))
    heavy_base = _run(site_d_hazard, (3.5, 3.5), (50.0, 1.0, 1.0))

    assert heavy_base.levels[0].wx == pytest.approx(600.0)
    assert heavy_base.W_effective == pytest.approx(24.0)
    assert heavy_base.W_effective == light_base.W_effective
    assert heavy_base.V == light_base.V
    assert heavy_base.point_loads_str == light_base.point_loads_str


def test_zero_loads_produce_zero_forces_without_nan(site_d_hazard) -> None:
    result = _run(site_d_hazard, (3.5, 3.5), (0.0, 0.0, 0.0))

    assert result.W_effective == 0.0
    assert result.V == 0.0
    assert result.sum_w_h_k == 0.0
    for level in result.levels:
        assert level.Fx == 0.0
        assert level.Vx == 0.0
        assert not math.isnan(level.cvx)
    assert result.point_loads_str == "0.000,0.000,0.000"


def test_negative_loads_propagate_as_signed_forces(site_d_hazard) -> None:
    result = _run(site_d_hazard, (3.5, 3.5), (1.0, -1.0, 2.0))

    assert result.levels[1].wx < 0
    assert result.levels[1].Fx < 0
    assert result.levels[0].Vx == pytest.approx(result.V)


def test_k_greater_than_one_weights_upper_levels(site_d_hazard) -> None:
    # 12 stories put T in the linear k range
    result = _run(site_d_hazard, (3.5,) * 12, (1.0,) * 13)

    assert 1.0 < result.k < 2.0
    level = result.levels[6]
    assert level.wx_hx_k == pytest.approx(level.wx * level.hx ** result.k)
    forces = result.point_loads[1:]
    assert forces == sorted(forces)


def test_tributary_weight_uses_total_span_length(make_state, site_d_hazard) -> None:
    geometry = StructureGeometry(
        story_heights=(3.0, 3.0),
        level_loads=(1.5, 2.0, 1.0),
        spans_x=(4.0, 5.0),
    )
    utils = StructuralUtils(make_state(site_d_hazard, geometry))

    levels = utils.build_levels()

    assert [level.wx for level in levels] == pytest.approx([13.5, 18.0, 9.0])
    assert [level.hx for level in levels] == pytest.approx([0.0, 3.0, 6.0])


@pytest.mark.parametrize(
    "n_stories, expected",
    [
        (1, ["Base/FL1", "Roof"]),
        (3, ["Base/FL1", "FL 2", "FL 3", "Roof"]),
    ],
)
def test_level_names(make_state, site_d_hazard, n_stories, expected) -> None:
    geometry = StructureGeometry(
        story_heights=(3.0,) * n_stories,
        level_loads=(1.0,) * (n_stories + 1),
        spans_x=(4.0,),
    )

    levels = StructuralUtils(make_state(site_d_hazard, geometry)).build_levels()

    assert [level.name for level in levels] == expected


def test_levels_are_rebuilt_for_each_run(make_state, site_d_hazard, two_story_geometry) -> None:
    seismic = SeismicFunctions(make_state(site_d_hazard, two_story_geometry))

    first = seismic.run_elf()
    second = seismic.run_elf()

    assert first.levels[0] is not second.levels[0]
    assert first.point_loads_str == second.point_loads_str


def test_unknown_site_class_matches_site_d() -> None:
    site_d = HazardParameters(Ss=0.6, S1=0.25, site_class="D", Ie=1.0, R=8.0)
    site_z = HazardParameters(Ss=0.6, S1=0.25, site_class="Z", Ie=1.0, R=8.0)

    result_d = _run(site_d, (3.5, 3.5), (1.0, 1.0, 1.0))
    result_z = _run(site_z, (3.5, 3.5), (1.0, 1.0, 1.0))

    assert result_z.Fa == result_d.Fa
    assert result_z.Fv == result_d.Fv
    assert result_z.V == result_d.V
    assert result_z.site_class == "Z"
