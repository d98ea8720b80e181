from __future__ import annotations
from dataclasses import dataclass, field
from typing import Tuple
import numpy as np


@dataclass(frozen=True)
class State:
    """
    网格中的一个格子。reward 为 NaN 即为墙。
    相等与哈希只看 (row, col)。
    """
    row: int
    col: int
    reward: float = field(default=0.0, compare=False)

    @property
    def coord(self) -> Tuple[int, int]:
        return self.row, self.col

    @property
    def is_wall(self) -> bool:
        return bool(np.isnan(self.reward))

    def __str__(self) -> str:
        return "Wall" if self.is_wall else str(self.reward)
