# -*- coding: utf-8 -*-
from __future__ import annotations
from enum import Enum
from types import MappingProxyType
from typing import List, Mapping, Tuple

INTENDED_PROB = 0.8
PERPENDICULAR_PROB = 0.1


class Action(Enum):
    """
    四个“意图方向”。真实移动方向服从 prob_map：
      - 意图方向 0.8
      - 两个直角方向各 0.1
      - 反方向不出现
    """
    UP = 0
    RIGHT = 1
    DOWN = 2
    LEFT = 3

    @staticmethod
    def all() -> List["Action"]:
        # 固定顺序，同时也是并列时的优先级
        return [Action.UP, Action.RIGHT, Action.DOWN, Action.LEFT]

    @property
    def delta(self) -> Tuple[int, int]:
        return _DELTAS[self]

    @property
    def opposite(self) -> "Action":
        return Action((self.value + 2) % 4)

    @property
    def perpendicular(self) -> Tuple["Action", "Action"]:
        if self in (Action.UP, Action.DOWN):
            return Action.LEFT, Action.RIGHT
        return Action.UP, Action.DOWN

    @property
    def prob_map(self) -> Mapping["Action", float]:
        """实际移动方向 -> 概率（只读）。"""
        return _PROB_TABLE[self]


_DELTAS = {
    Action.UP: (-1, 0),
    Action.RIGHT: (0, 1),
    Action.DOWN: (1, 0),
    Action.LEFT: (0, -1),
}


def _build_prob_map(action: Action) -> Mapping[Action, float]:
    dist = {action: INTENDED_PROB}
    for d in action.perpendicular:
        dist[d] = PERPENDICULAR_PROB
    return MappingProxyType(dist)


# 进程级常量表：只构造一次，之后不再修改
_PROB_TABLE = MappingProxyType({a: _build_prob_map(a) for a in Action.all()})
