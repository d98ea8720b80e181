import pytest

from mdp_grid.grid_world import GridWorld
from mdp_grid.algorithms.vp_planner import VPPlanner, PlannerConfig
from mdp_grid.utils.reward_ops import MAZE_6X6_REWARDS


@pytest.fixture
def make_planner(tmp_path):
    def _make(env, **cfg):
        return VPPlanner(env, PlannerConfig(**cfg), log_dir=str(tmp_path), use_tb=False)
    return _make

@pytest.fixture
def maze():
    return GridWorld.square(6, MAZE_6X6_REWARDS)

@pytest.fixture
def corridor():
    # 1x2: 左边 +1，右边 -0.04
    return GridWorld(1, 2, [1.0, -0.04])
