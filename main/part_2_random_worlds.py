# -*- coding: utf-8 -*-
"""
在 10..20 x 10..20 的随机世界上分别跑 PI 与 VI，统计两者策略一致的比例。
"""
import numpy as np

from mdp_grid.grid_world import GridWorld
from mdp_grid.algorithms.vp_planner import VPPlanner, PlannerConfig, ConvergenceError
from mdp_grid.utils.mdp_ops import policy_equal
from mdp_grid.utils.reward_ops import random_reward_array
from mdp_grid.utils.timing import out_profile

# (策略评估阈值, 价值迭代阈值)
EPSILON_PAIRS = [
    (0.1, 0.2),
    (0.01, 0.01),
    (0.001, 0.001),
    (1e-5, 1e-5),
    (1e-6, 1e-6),
    (1e-7, 1e-7),
    (1e-12, 1e-12),
]
SIZES = range(10, 21, 2)


if __name__ == "__main__":
    rng = np.random.default_rng(42)

    for eval_eps, vi_eps in EPSILON_PAIRS:
        solved, unsolved = [], []
        for h in SIZES:
            for w in SIZES:
                env = GridWorld(h, w, random_reward_array(h, w, rng=rng))
                planner = VPPlanner(env, PlannerConfig(eval_theta=eval_eps, theta=vi_eps),
                                    log_dir=None, use_tb=False)
                try:
                    n_pi = planner.policy_iteration()
                    n_vi = planner.value_iteration()
                except ConvergenceError as e:
                    planner.logger.warning(f"({h}x{w}) skipped: {e}")
                    unsolved.append(f"({h}x{w})")
                    continue

                if policy_equal(env.pi_policy, env.vi_policy):
                    solved.append(f"({h}x{w}) = {h * w} Policy Iteration = {n_pi} Value Iteration = {n_vi}")
                else:
                    unsolved.append(f"({h}x{w}) = {h * w}")

        planner.logger.log(
            f"Precision values: ({eval_eps}, {vi_eps}) Solved = {len(solved)} Unsolved = {len(unsolved)}"
        )
        if solved:
            planner.logger.log("Solved MDPs\n" + "\n".join(solved))
        if unsolved:
            planner.logger.log("Unsolved MDPs\n" + " ".join(unsolved))

    out_profile("logs/random_worlds")
