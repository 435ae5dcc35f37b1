import contextlib
import io
import sys
import unittest
from loguru import logger

from comparators import Comparator, load_comparator
from redirect import RedirectFile
from run_config import RunConfig
from scene import Scene, SceneResult, SceneStats


class SceneRunner:
    """
    Run the comparator on one scene at a time, each inside its own test case.

    Whatever the comparator raises is recorded in the SceneResult, never propagated,
    so that one broken scene cannot stop the rest of the batch.
    """

    def __init__(self, config: RunConfig, comparator: Comparator = None, stream=None):
        self.config = config
        self.comparator = comparator if comparator is not None else load_comparator(config)
        self.stream = stream

    def get_redirected_stream(self):
        # stdout carries the table in stats mode
        if self.stream is not None:
            return self.stream
        return sys.stdout if self.config.stats else sys.stderr

    def _capture_output(self, output: io.StringIO) -> contextlib.ExitStack:
        """Quiet runs keep what the scene prints and only show it with the failure."""
        stack = contextlib.ExitStack()
        if not self.config.verbose:
            stack.enter_context(contextlib.redirect_stdout(output))
            stack.enter_context(contextlib.redirect_stderr(output))
        return stack

    def _make_test_case(self, scene: Scene, stats: SceneStats) -> unittest.TestCase:
        def compare_scene():
            self.comparator(scene.scene_dir, stats)
        return unittest.FunctionTestCase(compare_scene, description=scene.test_name)

    def run(self, scene: Scene) -> SceneResult:
        logger.debug(f"Running scene {scene.test_name}")
        stats = SceneStats()
        test_case = self._make_test_case(scene, stats)
        result = unittest.TestResult()
        output = io.StringIO()
        with RedirectFile(self.get_redirected_stream()):
            with self._capture_output(output):
                test_case.run(result)

        problems = result.failures + result.errors
        if not problems:
            return SceneResult(scene=scene, stats=stats)

        diagnostic = "\n".join(traceback for _, traceback in problems)
        if output.getvalue():
            diagnostic += f"\nOutput:\n{output.getvalue()}"
        logger.error(f"{scene.test_name} failed:\n{diagnostic}")
        return SceneResult(scene=scene, stats=stats, n_failed=len(problems), diagnostic=diagnostic)
