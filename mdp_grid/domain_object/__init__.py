from .action import Action
from .state import State
from typing import Tuple

Coord = Tuple[int, int]  # (row, col)
