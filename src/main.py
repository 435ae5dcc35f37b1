import sys
from loguru import logger

from batch import BatchController
from run_config import load_run_config
from utils import configure_logging


def main(argv=None) -> int:
    """
    d2rgb-test-scenes [-v] [--stats] <root-dir>...

    No roots is fine (nothing to do), that's how it runs as part of the unit tests.
    """
    args = sys.argv[1:] if argv is None else argv
    configure_logging(verbose=False)
    try:
        config = load_run_config()
        batch = BatchController(config)
    except (OSError, ValueError, TypeError, ImportError, AttributeError) as e:
        logger.error(f"Invalid run configuration: {e}")
        return 1
    return 0 if batch.run(args) else 1


if __name__ == "__main__":
    sys.exit(main())
