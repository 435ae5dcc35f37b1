from pathlib import Path
import json
import sys
import yaml
from typing import Dict
from loguru import logger

LOG_FORMAT = "<green>{time:HH:mm:ss.SSS}</green> | <level>{level: <8}</level> | {message}"


def load_parameters(parameters_file: str) -> Dict:
    """Load a parameters mapping (run configuration, scene results) from a JSON or YAML file."""
    parameters_path = Path(parameters_file)
    if parameters_path.suffix.lower() in ['.json']:
        with open(parameters_path, 'r') as f:
            parameters = json.load(f)
    elif parameters_path.suffix.lower() in ['.yml', '.yaml']:
        with open(parameters_path, 'r') as f:
            parameters = yaml.safe_load(f)
    else:
        raise ValueError(f"Unsupported file format: {parameters_path.suffix}")
    return parameters or {}


def configure_logging(verbose: bool = False):
    """
    Replace loguru's default sink.
    Verbose runs trace everything to stdout, quiet runs only keep warnings and errors on stderr.
    """
    logger.remove()
    if verbose:
        logger.add(sys.stdout, level="DEBUG", format=LOG_FORMAT)
    else:
        logger.add(sys.stderr, level="WARNING", format=LOG_FORMAT)
