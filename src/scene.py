import math
from dataclasses import dataclass
from typing import Optional


@dataclass(frozen=True)
class Scene:
    """
    One recorded calibration session found under a batch root.

    test_name: path of the scene relative to the batch root, used as the test case name
    scene_dir: absolute path with a trailing separator, as the comparators expect it
    """
    test_name: str
    scene_dir: str


@dataclass
class SceneStats:
    """Computed calibration numbers of a scene and their signed drift from the reference."""
    cost: float = 0.0
    d_cost: float = 0.0
    movement: float = 0
    d_movement: float = 0

    @property
    def reference_cost(self) -> float:
        return self.cost - self.d_cost

    @property
    def d_cost_percent(self) -> float:
        """
        |d_cost| relative to the reference cost, in percent.
        A zero reference cost gives 0 when nothing drifted and inf otherwise.
        """
        reference_cost = self.reference_cost
        if reference_cost == 0:
            return 0.0 if self.d_cost == 0 else math.inf
        return abs(self.d_cost) * 100. / reference_cost


@dataclass
class SceneResult:
    scene: Scene
    stats: SceneStats
    n_failed: int = 0
    diagnostic: Optional[str] = None

    @property
    def failed(self) -> bool:
        return self.n_failed > 0


@dataclass
class BatchTotals:
    """Running totals for all the scenes of one root directory. Drifts are summed as absolute values."""
    root: str
    n_scenes: int = 0
    n_failed: int = 0
    cost: float = 0.0
    d_cost: float = 0.0
    movement: float = 0
    d_movement: float = 0

    def add(self, result: SceneResult):
        if result.failed:
            self.n_failed += 1
        self.n_scenes += 1
        self.cost += result.stats.cost
        self.d_cost += abs(result.stats.d_cost)
        self.movement += result.stats.movement
        self.d_movement += abs(result.stats.d_movement)

    @property
    def stats(self) -> SceneStats:
        return SceneStats(cost=self.cost, d_cost=self.d_cost, movement=self.movement, d_movement=self.d_movement)

    @property
    def ok(self) -> bool:
        return self.n_failed == 0
