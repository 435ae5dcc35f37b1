import os
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple
from loguru import logger

from scene_folder_structure import MARKER_FILE, SCENE_TAGS
from utils import load_parameters

CONFIG_ENV_VAR = "D2RGB_TEST_SCENES_CONFIG"
DEFAULT_CONFIG_FILES = ["config.json", "config.yml", "config.yaml"]

VERBOSE_FLAG = "-v"
STATS_FLAG = "--stats"

# verbose and stats only come from the command line flags
FILE_KEYS = ["marker", "scene_tags", "comparator", "comparator_options"]


@dataclass(frozen=True)
class RunConfig:
    """
    verbose: trace to stdout instead of discarding it
    stats: print the per-scene table instead of one summary line per root
    marker, scene_tags: how scenes are recognised on disk
    comparator: "package.module:function", None for the result file comparator
    comparator_options: keyword arguments bound to the comparator
    """
    verbose: bool = False
    stats: bool = False
    marker: str = MARKER_FILE
    scene_tags: Tuple[str, str] = SCENE_TAGS
    comparator: Optional[str] = None
    comparator_options: Dict[str, Any] = field(default_factory=dict)

    @classmethod
    def from_parameters(cls, parameters: Dict[str, Any]) -> "RunConfig":
        known = set(FILE_KEYS)
        unknown = sorted(set(parameters) - known)
        if unknown:
            raise TypeError(f"Unknown configuration keys: {unknown}")
        parameters = dict(parameters)
        if "scene_tags" in parameters:
            scene_tags = tuple(parameters["scene_tags"])
            if len(scene_tags) != 2:
                raise ValueError(f"scene_tags needs exactly two folder names, got {list(scene_tags)}")
            parameters["scene_tags"] = scene_tags
        return cls(**parameters)


def find_config_file(folder: str = ".") -> Optional[str]:
    path = os.environ.get(CONFIG_ENV_VAR)
    if path:
        return path
    for name in DEFAULT_CONFIG_FILES:
        path = os.path.join(folder, name)
        if os.path.isfile(path):
            return path
    return None


def load_run_config(config_path: Optional[str] = None) -> RunConfig:
    """
    Load the run configuration from config_path, or from the config file found in the working directory.
    No file means the defaults.
    """
    if config_path is None:
        config_path = find_config_file()
    if config_path is None:
        return RunConfig()
    logger.debug(f"Loading run configuration from {config_path}")
    return RunConfig.from_parameters(load_parameters(config_path))
