import os

import pytest
import yaml

from scene_folder_structure import MARKER_FILE
from utils import configure_logging


def write_scene(root, name, tags=("binFiles", "ac2"), marker=MARKER_FILE):
    """Create <root>/<name>/<tags...>/<marker> and return the scene folder."""
    scene_dir = os.path.join(str(root), name)
    marker_dir = os.path.join(scene_dir, *tags)
    os.makedirs(marker_dir, exist_ok=True)
    with open(os.path.join(marker_dir, marker), "w") as f:
        f.write("")
    return scene_dir


def write_results(scene_dir, result, reference):
    with open(os.path.join(scene_dir, "calibration_result.yml"), "w") as f:
        yaml.safe_dump(result, f)
    with open(os.path.join(scene_dir, "reference_result.yml"), "w") as f:
        yaml.safe_dump(reference, f)


def passing_comparator(scene_dir, stats):
    stats.cost = 10.0
    stats.d_cost = 0.0
    stats.movement = 5
    stats.d_movement = 0


def throwing_comparator(scene_dir, stats):
    raise RuntimeError("calibration blew up")


@pytest.fixture
def sink(tmp_path):
    """A real file to redirect instead of the test process' own stdout/stderr."""
    with open(tmp_path / "sink.txt", "w") as f:
        yield f


@pytest.fixture(autouse=True)
def quiet_logging():
    configure_logging(verbose=False)
    yield
    configure_logging(verbose=False)
