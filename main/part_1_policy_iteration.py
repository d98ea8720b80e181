# -*- coding: utf-8 -*-
from mdp_grid.grid_world import GridWorld
from mdp_grid.algorithms.vp_planner import VPPlanner, PlannerConfig
from mdp_grid.utils.render import render_value_grid, render_policy_grid
from mdp_grid.utils.reward_ops import MAZE_6X6_REWARDS


if __name__ == "__main__":
    env = GridWorld.square(6, MAZE_6X6_REWARDS)

    cfg = PlannerConfig(eval_theta=0.1)
    planner = VPPlanner(env, cfg, log_dir="logs/policy_iteration")

    n_sweeps = planner.policy_iteration()
    planner.logger.log("\n=== Policy Iteration ===")
    render_value_grid(env)
    render_policy_grid(env, env.pi_policy)
    planner.logger.log(f"Evaluation sweeps: {n_sweeps}")
    planner.logger.log(f"Residual: {planner.optimality_residual():.3e}")
    planner.logger.close()
