"""
Scene comparators.

A comparator is called with the scene folder (trailing separator included) and the
SceneStats to fill. It raises, usually an AssertionError, when the scene does not
match its reference. Whatever it wrote into the stats before raising is still reported.
"""
import importlib
import os
from functools import partial
from typing import Callable, List

import numpy as np
from loguru import logger

from scene import SceneStats
from utils import load_parameters

Comparator = Callable[[str, SceneStats], None]

RESULT_FILE = "calibration_result.yml"
REFERENCE_FILE = "reference_result.yml"


def compare_result_files(scene_dir: str, stats: SceneStats,
                         result_file: str = RESULT_FILE, reference_file: str = REFERENCE_FILE,
                         cost_tolerance: float = 0.0, movement_tolerance: float = 0,
                         parameters_tolerance: float = 1e-6):
    """
    Compare the calibration result the pipeline wrote into the scene folder with the reference result.

    Both files hold at least `cost` and `movement`. When both also hold `parameters`
    (the calibration parameters as a flat or nested list) they are compared element-wise.
    """
    result = load_parameters(os.path.join(scene_dir, result_file))
    reference = load_parameters(os.path.join(scene_dir, reference_file))

    stats.cost = float(result["cost"])
    stats.d_cost = stats.cost - float(reference["cost"])
    stats.movement = result["movement"]
    stats.d_movement = stats.movement - reference["movement"]
    logger.debug(f"cost {stats.cost:.2f} ({stats.d_cost:+.4f}), movement {stats.movement} ({stats.d_movement:+})")

    mismatches: List[str] = []
    if abs(stats.d_cost) > cost_tolerance:
        mismatches.append(f"cost {stats.cost} differs from reference {reference['cost']} by {stats.d_cost}")
    if abs(stats.d_movement) > movement_tolerance:
        mismatches.append(f"movement {stats.movement} differs from reference {reference['movement']} by {stats.d_movement}")
    if "parameters" in result and "parameters" in reference:
        parameters = np.asarray(result["parameters"], dtype=float)
        reference_parameters = np.asarray(reference["parameters"], dtype=float)
        if parameters.shape != reference_parameters.shape:
            mismatches.append(f"parameters shape {parameters.shape} differs from reference {reference_parameters.shape}")
        elif not np.allclose(parameters, reference_parameters, rtol=0, atol=parameters_tolerance):
            worst = float(np.max(np.abs(parameters - reference_parameters)))
            mismatches.append(f"parameters differ from reference by up to {worst}")

    if mismatches:
        raise AssertionError("; ".join(mismatches))


def import_comparator(name: str) -> Comparator:
    """Import a comparator given as "package.module:function"."""
    module_name, sep, function_name = name.partition(":")
    if not sep or not module_name or not function_name:
        raise ValueError(f"Comparator must be given as 'module:function', got '{name}'")
    module = importlib.import_module(module_name)
    comparator = getattr(module, function_name)
    if not callable(comparator):
        raise TypeError(f"Comparator {name} is not callable")
    return comparator


def load_comparator(config) -> Comparator:
    comparator = compare_result_files if config.comparator is None else import_comparator(config.comparator)
    if config.comparator_options:
        comparator = partial(comparator, **config.comparator_options)
    return comparator
