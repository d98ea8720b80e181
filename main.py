from mdp_grid.grid_world import GridWorld
from mdp_grid.algorithms.vp_planner import VPPlanner, PlannerConfig
from mdp_grid.utils.mdp_ops import policy_diff
from mdp_grid.utils.render import render_value_grid, render_policy_grid
from mdp_grid.utils.reward_ops import MAZE_6X6_REWARDS

# -----------------------------
# 用法示例
# -----------------------------
if __name__ == "__main__":
    # 6x6 迷宫，NaN 为墙
    env = GridWorld.square(6, MAZE_6X6_REWARDS)
    planner = VPPlanner(env, PlannerConfig(eval_theta=0.1, theta=0.2), log_dir="logs/maze")

    n_pi = planner.policy_iteration()
    render_policy_grid(env, env.pi_policy, title="Final State (Policy Iteration)")

    n_vi = planner.value_iteration()
    render_value_grid(env, title="Utilities (Value Iteration)")
    render_policy_grid(env, env.vi_policy, title="Final State (Value Iteration)")

    diff = policy_diff(env.pi_policy, env.vi_policy)
    planner.logger.log(f"PI sweeps = {n_pi}, VI sweeps = {n_vi}, differing states = {diff}")
    planner.logger.close()
