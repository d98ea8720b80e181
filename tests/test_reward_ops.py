import numpy as np

from mdp_grid.grid_world import GridWorld
from mdp_grid.utils.reward_ops import MAZE_6X6_REWARDS, random_reward_array


def test_maze_layout():
    env = GridWorld.square(6, MAZE_6X6_REWARDS)
    walls = [s.coord for line in env.grid for s in line if s.is_wall]
    assert walls == [(0, 1), (1, 4), (4, 1), (4, 2), (4, 3)]


def test_random_rewards_reproducible():
    a = random_reward_array(3, 4, seed=7)
    b = random_reward_array(3, 4, seed=7)
    assert a.shape == (12,)
    np.testing.assert_array_equal(a, b)
    finite = a[~np.isnan(a)]
    assert set(finite.tolist()) <= {1.0, -1.0, -0.04}


def test_random_rewards_build_a_grid():
    rng = np.random.default_rng(0)
    env = GridWorld(10, 12, random_reward_array(10, 12, rng=rng))
    assert len(env.utilities) == len(env.open_states())
