# -*- coding: utf-8 -*-
from __future__ import annotations
from dataclasses import dataclass
from typing import Callable, Dict, Optional, Tuple

from mdp_grid.grid_world import GridWorld
from mdp_grid.domain_object import Action, State, Coord
from mdp_grid.utils.mdp_ops import (
    expected_utility,
    best_action,
    bellman_residual,
    policy_equal,
    policy_diff,
)
from mdp_grid.utils.logger_manager import LoggerManager
from mdp_grid.utils.timing import record_time_decorator

DISCOUNT_FACTOR = 0.99


class ConvergenceError(RuntimeError):
    """迭代次数达到上限仍未收敛。"""

    def __init__(self, algorithm: str, iterations: int, delta: float):
        self.algorithm = algorithm
        self.iterations = iterations
        self.delta = delta
        super().__init__(f"{algorithm} did not converge after {iterations} iterations (last delta={delta:.3e})")


@dataclass
class PlannerConfig:
    gamma: float = DISCOUNT_FACTOR
    theta: float = 1e-3            # VI 收敛阈值（一轮 sweep 的最大变化量）
    eval_theta: float = 1e-3       # 策略评估的收敛阈值
    max_iter: int = 100000         # VI 最大 sweep 数
    eval_max_iter: int = 100000    # 单次策略评估最大 sweep 数
    max_outer_iter: int = 1000     # PI 外层（评估+改进）最大轮数


class VPPlanner:
    """
    在 GridWorld 上运行 Policy Iteration / Value Iteration。

    结果直接写回 env：utilities、pi_policy、vi_policy、pi_trace、vi_trace。
    每轮 sweep 原地更新效用（同一轮中后处理的状态会读到先处理状态的新值）。
    """
    def __init__(self, env: GridWorld, cfg: Optional[PlannerConfig] = None, log_dir="logs/dp", use_tb=True) -> None:
        self.logger = LoggerManager(log_dir, use_tensorboard=use_tb)
        self.logger.log("VPPlanner initialized.")

        self.env = env
        self.cfg = cfg or PlannerConfig()
        self.gamma = float(self.cfg.gamma)

    # ---------------------------------------------------------------------
    # 公共：策略评估（按 env.pi_policy 固定动作）
    # ---------------------------------------------------------------------
    def policy_evaluation(
        self,
        epsilon: Optional[float] = None,
        *,
        max_iter: Optional[int] = None,
        sweeps: Optional[int] = None,  # 若指定，则执行固定轮数（截断评估）
    ) -> int:
        """
        U(s) <- R(s) + γ * E[U(s') | π(s)]，直到一轮的最大变化 < epsilon。
        返回 sweep 次数。
        """
        policy = self.env.pi_policy

        if sweeps is not None:
            for _ in range(int(sweeps)):
                self._bellman_sweep(lambda s: policy[s.coord])
            return int(sweeps)

        epsilon = self._check_epsilon(self.cfg.eval_theta if epsilon is None else epsilon)
        max_iter = self.cfg.eval_max_iter if max_iter is None else max_iter

        delta = float("inf")
        for n in range(1, max_iter + 1):
            delta, _ = self._bellman_sweep(lambda s: policy[s.coord])
            if delta < epsilon:
                self.logger.log(f"Number of iterations for policy evaluation step: {n}")
                return n

        self.logger.error(f"Policy evaluation stopped at {max_iter} sweeps, delta={delta:.3e}")
        raise ConvergenceError("policy evaluation", max_iter, delta)

    # ---------------------------------------------------------------------
    # 公共：策略改进
    # ---------------------------------------------------------------------
    def policy_improvement(self) -> Dict[Coord, Action]:
        return {s.coord: best_action(self.env, s) for s in self.env.open_states()}

    # ---------------------------------------------------------------------
    # 算法 1：Policy Iteration（完整策略评估 + 策略改进）
    # 不重置效用：在 VI 之后运行需先 env.reset_utilities()
    # ---------------------------------------------------------------------
    @record_time_decorator('policy iteration')
    def policy_iteration(self, epsilon: Optional[float] = None) -> int:
        env = self.env
        epsilon = self._check_epsilon(self.cfg.eval_theta if epsilon is None else epsilon)
        env.pi_trace = {s.coord: [(0, env.utilities[s.coord])] for s in env.open_states()}

        total_sweeps = 0
        for outer in range(1, self.cfg.max_outer_iter + 1):
            total_sweeps += self.policy_evaluation(epsilon)
            self._record(env.pi_trace, "policy_iteration", total_sweeps)

            new_policy = self.policy_improvement()
            if policy_equal(new_policy, env.pi_policy):
                env.pi_policy = new_policy
                self.logger.log(
                    f"Policy iteration converged: {outer} rounds, {total_sweeps} evaluation sweeps."
                )
                return total_sweeps

            changed = policy_diff(new_policy, env.pi_policy)
            self.logger.log(f"Round {outer}: policy changed in {len(changed)} states.")
            env.pi_policy = new_policy

        self.logger.error(f"Policy iteration stopped after {self.cfg.max_outer_iter} rounds without a stable policy.")
        raise ConvergenceError("policy iteration", self.cfg.max_outer_iter, float("nan"))

    # ---------------------------------------------------------------------
    # 算法 2：Value Iteration
    # ---------------------------------------------------------------------
    @record_time_decorator('value iteration')
    def value_iteration(self, epsilon: Optional[float] = None) -> int:
        env = self.env
        epsilon = self._check_epsilon(self.cfg.theta if epsilon is None else epsilon)

        env.reset_utilities()
        env.vi_trace = {s.coord: [(0, 0.0)] for s in env.open_states()}

        delta = float("inf")
        for n in range(1, self.cfg.max_iter + 1):
            delta, chosen = self._bellman_sweep(lambda s: best_action(env, s))
            env.vi_policy.update(chosen)
            self._record(env.vi_trace, "value_iteration", n)
            self.logger.add_scalar("value_iteration/delta", delta, n)
            if delta < epsilon:
                self.logger.log(f"Number of iterations for value iteration: {n}")
                return n

        self.logger.error(f"Value iteration stopped at {self.cfg.max_iter} sweeps, delta={delta:.3e}")
        raise ConvergenceError("value iteration", self.cfg.max_iter, delta)

    # ---------------------------------------------------------------------
    # 评估指标：Bellman 最优性残差
    # ---------------------------------------------------------------------
    def optimality_residual(self) -> float:
        return bellman_residual(self.env, self.gamma)

    # ---------------------------------------------------------------------
    # 辅助
    # ---------------------------------------------------------------------
    def _bellman_sweep(self, select: Callable[[State], Action]) -> Tuple[float, Dict[Coord, Action]]:
        """行优先原地更新一轮，返回 (最大变化量, 本轮各状态所用动作)。"""
        env = self.env
        delta = 0.0
        chosen: Dict[Coord, Action] = {}
        for s in env.open_states():
            a = select(s)
            u = s.reward + self.gamma * expected_utility(env, a, s)
            delta = max(delta, abs(u - env.utility(s.coord)))
            env.utilities[s.coord] = u
            chosen[s.coord] = a
        return delta, chosen

    def _record(self, trace, tag: str, step: int) -> None:
        for coord, series in trace.items():
            u = self.env.utilities[coord]
            series.append((step, u))
            self.logger.add_scalar(f"{tag}/utility_{coord[0]}_{coord[1]}", u, step)

    @staticmethod
    def _check_epsilon(epsilon: float) -> float:
        if not epsilon > 0:
            raise ValueError(f"收敛阈值必须为正数，收到 {epsilon}。")
        return float(epsilon)
