import dataclasses
import sys
from functools import partial
from typing import Callable, List, Sequence
from loguru import logger

from comparators import Comparator, load_comparator
from report import get_headers, get_quiet_summary, get_scene_row, get_totals_row
from run_config import STATS_FLAG, VERBOSE_FLAG, RunConfig
from scene import BatchTotals
from scene_folder_structure import SceneFolderStructure
from scene_runner import SceneRunner
from utils import configure_logging


class BatchController:
    """
    Run every scene found under each root directory given on the command line.

    Flags switch modes for the roots that follow them. Each root gets its own totals;
    an exception while processing a root marks the batch as failed and moves on to the next root.
    """

    def __init__(self, config: RunConfig = None, comparator: Comparator = None,
                 runner_factory: Callable[[RunConfig], SceneRunner] = None, out=None):
        self.config = config if config is not None else RunConfig()
        if runner_factory is None:
            # resolved once so a bad comparator fails before any root is processed
            comparator = comparator if comparator is not None else load_comparator(self.config)
            runner_factory = partial(self._make_runner, comparator=comparator)
        self.runner_factory = runner_factory
        self.out = out
        self.totals: List[BatchTotals] = []

    @staticmethod
    def _make_runner(config: RunConfig, comparator: Comparator) -> SceneRunner:
        return SceneRunner(config, comparator=comparator)

    def _print(self, line: str):
        print(line, file=self.out if self.out is not None else sys.stdout)

    def process_root(self, root: str) -> BatchTotals:
        logger.debug(f"Processing: {root} ...")
        runner = self.runner_factory(self.config)
        scene_folder_structure = SceneFolderStructure(root, marker=self.config.marker, scene_tags=self.config.scene_tags)
        totals = BatchTotals(root=root)

        if self.config.stats:
            self._print(get_headers())

        for scene in scene_folder_structure.get_scenes():
            result = runner.run(scene)
            totals.add(result)
            if self.config.stats:
                self._print(get_scene_row(scene.test_name, result.n_failed, result.stats))

        if self.config.stats:
            self._print(get_totals_row(totals))
        else:
            self._print(get_quiet_summary(totals))
        logger.debug("done!")
        return totals

    def run(self, args: Sequence[str]) -> bool:
        ok = True
        for arg in args:
            if arg == VERBOSE_FLAG:
                self.config = dataclasses.replace(self.config, verbose=True)
                configure_logging(verbose=True)
                continue
            if arg == STATS_FLAG:
                self.config = dataclasses.replace(self.config, stats=True)
                continue
            try:
                totals = self.process_root(arg)
                self.totals.append(totals)
                ok &= totals.ok
            except Exception as e:
                if str(e):
                    logger.error(f"caught exception: {e}")
                else:
                    logger.error(f"caught unknown exception! ({type(e).__name__})")
                ok = False
        return ok
