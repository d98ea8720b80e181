# -*- coding: utf-8 -*-
from __future__ import annotations
from typing import Dict, List
import numpy as np

from mdp_grid.domain_object import Action, State, Coord
from mdp_grid.grid_world import GridWorld


# ---- E[U(s') | s, a] ---------------------------------------------------------
def expected_utility(env: GridWorld, action: Action, state: State) -> float:
    """
    Σ_d P(d|a) * U(next_state(s, d))，撞墙/出界的方向按原地计。
    """
    eu = 0.0
    for direction, prob in action.prob_map.items():
        eu += prob * env.utility(env.next_state(state, direction).coord)
    return eu


def q_values(env: GridWorld, state: State) -> Dict[Action, float]:
    return {a: expected_utility(env, a, state) for a in Action.all()}


# ---- 贪心动作 -----------------------------------------------------------------
def best_action(env: GridWorld, state: State) -> Action:
    """
    期望效用最大的动作。严格 > 比较：并列时 Action.all() 中靠前的胜出。
    """
    best_a = None
    max_eu = -np.inf
    for a in Action.all():
        eu = expected_utility(env, a, state)
        if eu > max_eu:
            max_eu = eu
            best_a = a
    return best_a


# ---- ||T*U - U||_inf ----------------------------------------------------------
def bellman_residual(env: GridWorld, gamma: float) -> float:
    res = 0.0
    for s in env.open_states():
        target = s.reward + gamma * max(q_values(env, s).values())
        res = max(res, abs(target - env.utility(s.coord)))
    return float(res)


# ---- 策略比较（PI 收敛判据 / PI 与 VI 对比） ------------------------------------
def policy_equal(pi1: Dict[Coord, Action], pi2: Dict[Coord, Action]) -> bool:
    return pi1.keys() == pi2.keys() and all(pi1[s] is pi2[s] for s in pi1)


def policy_diff(pi1: Dict[Coord, Action], pi2: Dict[Coord, Action]) -> List[Coord]:
    """两个策略动作不同（或只在一边出现）的状态，按坐标排序。"""
    keys = set(pi1) | set(pi2)
    return sorted(s for s in keys if pi1.get(s) is not pi2.get(s))
