# -*- coding: utf-8 -*-
from __future__ import annotations

from .domain_object import Action, State, Coord
from typing import Dict, List, Sequence, Tuple
import numpy as np

UtilityTrace = Dict[Coord, List[Tuple[int, float]]]


class GridWorld:
    """
    带墙的矩形网格 MDP 环境。

    持有：
      - 状态网格 grid[row][col]（按行优先从奖励数组构造）
      - U(s): 非墙状态的效用表 utilities
      - 两套互不相干的策略：pi_policy（策略迭代）与 vi_policy（价值迭代）
      - 两套效用轨迹：pi_trace / vi_trace，供外部画图

    约定：
      - 奖励为 NaN 的格子是墙；墙不出现在任何策略、效用或轨迹中。
      - 出界或撞墙时留在原地（bounce-back）。
    """

    def __init__(self, height: int, width: int, rewards: Sequence[float]):
        if height <= 0 or width <= 0:
            raise ValueError(f"网格尺寸必须为正数，收到 {height}x{width}。")
        flat = np.asarray(rewards, dtype=float).ravel()
        if flat.size != height * width:
            raise ValueError(
                f"奖励数组长度 {flat.size} 与网格尺寸 {height}x{width}={height * width} 不匹配。"
            )
        self.h, self.w = height, width

        # 构造状态网格
        self.grid: List[List[State]] = [
            [State(row, col, float(flat[row * width + col])) for col in range(width)]
            for row in range(height)
        ]
        self._open: List[State] = [s for line in self.grid for s in line if not s.is_wall]

        # U(s)
        self.utilities: Dict[Coord, float] = {}

        # π(s)
        self.pi_policy: Dict[Coord, Action] = {}
        self.vi_policy: Dict[Coord, Action] = {}

        # 画图用的 (step, U) 序列
        self.pi_trace: UtilityTrace = {}
        self.vi_trace: UtilityTrace = {}

        self.reset_utilities()
        self._init_default_policy()

    @classmethod
    def square(cls, size: int, rewards: Sequence[float]) -> "GridWorld":
        return cls(size, size, rewards)

    # -----------------------------
    # 公共接口
    # -----------------------------
    def state(self, coord: Coord) -> State:
        r, c = coord
        return self.grid[r][c]

    def open_states(self) -> List[State]:
        """所有非墙状态，行优先；也是每轮 sweep 的遍历顺序。"""
        return list(self._open)

    def reset_utilities(self) -> None:
        self.utilities = {s.coord: 0.0 for s in self._open}

    def utility(self, coord: Coord) -> float:
        try:
            return self.utilities[coord]
        except KeyError:
            # 构造保证每个非墙状态都有效用；走到这里说明内部状态被破坏
            raise RuntimeError(f"状态 {coord} 没有效用值，网格内部状态不一致。") from None

    # ---------- 邻接 ----------
    def in_bounds(self, coord: Coord) -> bool:
        r, c = coord
        return 0 <= r < self.h and 0 <= c < self.w

    def can_move(self, state: State, direction: Action) -> bool:
        dr, dc = direction.delta
        target = (state.row + dr, state.col + dc)
        return self.in_bounds(target) and not self.state(target).is_wall

    def next_state(self, state: State, direction: Action) -> State:
        if not self.can_move(state, direction):
            return state
        dr, dc = direction.delta
        return self.grid[state.row + dr][state.col + dc]

    # -----------------------------
    # 内部
    # -----------------------------
    def _init_default_policy(self) -> None:
        """
        初始策略：按 UP, RIGHT, DOWN 的顺序取第一个能走的方向；
        三个都走不通时一律 LEFT（不检查 LEFT 是否可走）。
        """
        self.pi_policy = {}
        for s in self._open:
            for a in (Action.UP, Action.RIGHT, Action.DOWN):
                if self.can_move(s, a):
                    self.pi_policy[s.coord] = a
                    break
            else:
                self.pi_policy[s.coord] = Action.LEFT
