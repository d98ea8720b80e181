# -*- coding: utf-8 -*-
from __future__ import annotations
from typing import Optional
import numpy as np

WALL = float("nan")

# Part I 的 6x6 迷宫（行优先，NaN 为墙）
MAZE_6X6_REWARDS = np.array([
    1.0,   WALL,  1.0,   -0.04, -0.04, 1.0,
    -0.04, -1.0,  -0.04, 1.0,   WALL,  -1.0,
    -0.04, -0.04, -1.0,  -0.04, 1.0,   -0.04,
    -0.04, -0.04, -0.04, -1.0,  -0.04, 1.0,
    -0.04, WALL,  WALL,  WALL,  -1.0,  -0.04,
    -0.04, -0.04, -0.04, -0.04, -0.04, -0.04,
], dtype=float)

# 随机世界中每个格子等概率取其一
RANDOM_CELL_CHOICES = np.array([WALL, 1.0, -1.0, -0.04], dtype=float)


def random_reward_array(
    height: int,
    width: int,
    *,
    rng: Optional[np.random.Generator] = None,
    seed: Optional[int] = None,
) -> np.ndarray:
    """行优先的随机奖励数组；rng 优先于 seed。"""
    rng = rng if rng is not None else np.random.default_rng(seed)
    return rng.choice(RANDOM_CELL_CHOICES, size=height * width)
