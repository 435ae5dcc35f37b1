import os
from functools import partial

import pytest

from comparators import compare_result_files, import_comparator, load_comparator
from conftest import write_results
from run_config import RunConfig
from scene import SceneStats


def test_matching_results(tmp_path):
    write_results(tmp_path, {"cost": 10.0, "movement": 5}, {"cost": 10.0, "movement": 5})
    stats = SceneStats()

    compare_result_files(str(tmp_path) + os.sep, stats)

    assert stats == SceneStats(cost=10.0, d_cost=0.0, movement=5, d_movement=0)


def test_drift_is_reported_and_kept(tmp_path):
    write_results(tmp_path, {"cost": 12.0, "movement": 3}, {"cost": 10.0, "movement": 5})
    stats = SceneStats()

    with pytest.raises(AssertionError) as e:
        compare_result_files(str(tmp_path) + os.sep, stats)

    assert "cost" in str(e.value) and "movement" in str(e.value)
    assert stats.d_cost == 2.0
    assert stats.d_movement == -2


def test_drift_within_tolerance(tmp_path):
    write_results(tmp_path, {"cost": 10.01, "movement": 6}, {"cost": 10.0, "movement": 5})
    stats = SceneStats()
    compare_result_files(str(tmp_path), stats, cost_tolerance=0.1, movement_tolerance=1)
    assert stats.d_movement == 1


def test_parameters_are_compared(tmp_path):
    write_results(tmp_path,
                  {"cost": 1.0, "movement": 0, "parameters": [[1.0, 0.0], [0.0, 1.5]]},
                  {"cost": 1.0, "movement": 0, "parameters": [[1.0, 0.0], [0.0, 1.0]]})
    with pytest.raises(AssertionError, match="parameters differ"):
        compare_result_files(str(tmp_path), SceneStats())


def test_parameters_shape_mismatch(tmp_path):
    write_results(tmp_path,
                  {"cost": 1.0, "movement": 0, "parameters": [1.0, 2.0, 3.0]},
                  {"cost": 1.0, "movement": 0, "parameters": [1.0, 2.0]})
    with pytest.raises(AssertionError, match="shape"):
        compare_result_files(str(tmp_path), SceneStats())


def test_missing_result_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        compare_result_files(str(tmp_path), SceneStats())


def test_import_comparator():
    assert import_comparator("conftest:passing_comparator").__name__ == "passing_comparator"


@pytest.mark.parametrize("name", ["conftest", "conftest:", ":passing_comparator"])
def test_import_comparator_needs_module_and_function(name):
    with pytest.raises(ValueError):
        import_comparator(name)


def test_load_comparator_defaults_to_result_files():
    assert load_comparator(RunConfig()) is compare_result_files


def test_load_comparator_binds_options():
    comparator = load_comparator(RunConfig(comparator_options={"cost_tolerance": 0.5}))
    assert isinstance(comparator, partial)
    assert comparator.func is compare_result_files
    assert comparator.keywords == {"cost_tolerance": 0.5}
