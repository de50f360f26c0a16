import datetime

import pandas as pd
import pytest
import yaml

from core.analysis_runner import AnalysisOutcome, AnalysisRunner
from core.errors import DegenerateGeometryError


def test_run_returns_success_outcome(sample_config) -> None:
    outcome = AnalysisRunner().run(sample_config)

    assert isinstance(outcome, AnalysisOutcome)
    assert outcome.ok
    assert outcome.status == AnalysisRunner.SUCCESS
    assert outcome.error is None
    assert outcome.result.W_effective == pytest.approx(24.0)
    assert outcome.result.point_loads_str == "0.000,0.467,0.933"


def test_run_from_yaml_path(tmp_path, sample_config) -> None:
    path = tmp_path / "elf.yaml"
    path.write_text(yaml.safe_dump(sample_config))

    outcome = AnalysisRunner().run(path)

    assert outcome.ok
    assert outcome.result.V == pytest.approx(1.4)


@pytest.mark.parametrize(
    "section, key, value",
    [
        ("building", "Stories Heights", "3.5,abc"),
        ("building", "Level Loads", "1.0,1.0"),
        ("seismic", "R", 0),
        ("seismic", "Ss", "high"),
        ("seismic", "Ss", True),
        ("seismic", "R", datetime.date(2020, 1, 1)),
        ("building", "Span X", object()),
    ],
)
def test_run_tags_invalid_input(sample_config, section, key, value) -> None:
    sample_config[section][key] = value

    outcome = AnalysisRunner().run(sample_config)

    assert not outcome.ok
    assert outcome.status == AnalysisRunner.INVALID_INPUT
    assert outcome.result is None
    assert outcome.error


def test_run_tags_yaml_boolean_as_invalid_input(tmp_path, sample_config) -> None:
    path = tmp_path / "elf.yaml"
    path.write_text(yaml.safe_dump(sample_config).replace("Ss: 0.5", "Ss: yes"))

    outcome = AnalysisRunner().run(path)

    assert outcome.status == AnalysisRunner.INVALID_INPUT
    assert "Ss" in outcome.error


def test_run_unknown_site_class_is_not_an_error(sample_config) -> None:
    sample_config['seismic']['Site Class'] = "Z"

    outcome = AnalysisRunner().run(sample_config)

    assert outcome.ok
    assert outcome.result.Fa == pytest.approx(1.4)
    assert outcome.result.Fv == pytest.approx(2.0)


def test_run_zero_height_raises(sample_config) -> None:
    sample_config['building']['Stories Heights'] = "0,0"

    with pytest.raises(DegenerateGeometryError):
        AnalysisRunner().run(sample_config)


def test_save_results_writes_tables(tmp_path, sample_config) -> None:
    runner = AnalysisRunner()
    result = runner.run(sample_config).result

    out_dir = runner.save_results(result, tmp_path / "ELF_Results" / "Site_D")

    parameters = pd.read_csv(out_dir / "parameters.csv")
    distribution = pd.read_csv(out_dir / "distribution.csv")

    assert list(parameters.columns) == ["Parameter", "Value", "Description"]
    assert "V (Base Shear)" in set(parameters["Parameter"])
    assert list(distribution["Level"]) == ["Roof", "FL 2", "Base/FL1"]
    assert distribution["Vx"].iloc[-1] == pytest.approx(1.4)
    assert (out_dir / "point_loads.txt").read_text().strip() == "0.000,0.467,0.933"
