from ..grid_world import GridWorld
from ..domain_object import Action, Coord
from .logger_manager import LOGGER_NAME
import logging
from typing import Dict

ARROWS = {Action.UP: "↑", Action.RIGHT: "→", Action.DOWN: "↓", Action.LEFT: "←"}


def _get_logger():
    return logging.getLogger(LOGGER_NAME)


def render_value_grid(env: GridWorld, ndigits: int = 3, title: str = "State Utilities"):
    width = ndigits + 5
    _get_logger().info(f"\n[{title}]")
    for line in env.grid:
        row = []
        for s in line:
            if s.is_wall:
                row.append("Wall".center(width))
            else:
                row.append(f"{env.utility(s.coord): .{ndigits}f}".rjust(width))
        _get_logger().info(" | ".join(row))


def render_policy_grid(env: GridWorld, pi: Dict[Coord, Action], title: str = "Policy"):
    _get_logger().info(f"\n[{title}]")
    for line in env.grid:
        row = []
        for s in line:
            if s.is_wall:
                row.append("X")
            else:
                row.append(ARROWS[pi[s.coord]] if s.coord in pi else "·")
        _get_logger().info(" ".join(row))
