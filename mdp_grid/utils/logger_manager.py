# -*- coding: utf-8 -*-
from __future__ import annotations
import logging
import os
from typing import Optional
from torch.utils.tensorboard import SummaryWriter

LOGGER_NAME = "GridMDPLogger"


class LoggerManager:
    """
    统一管理 logging 与 tensorboard writer。
    log_dir 为 None 时只输出到控制台，也不创建 writer。

    所有实例共用同一个命名 logger（LOGGER_NAME）：新实例会摘掉并关闭旧 handler，
    之后所有日志（包括先前创建的实例）都写入最新实例的 log_dir/run.log。
    """
    def __init__(self, log_dir: Optional[str] = "logs/", use_tensorboard: bool = True, level: int = logging.INFO):
        # ---- Python logging ----
        self.logger = logging.getLogger(LOGGER_NAME)
        self.logger.setLevel(level)

        # 多次实例化时先摘掉旧 handler，避免重复输出
        for handler in list(self.logger.handlers):
            self.logger.removeHandler(handler)
            handler.close()

        fmt = logging.Formatter(
            fmt="%(asctime)s %(levelname)s %(module)s - %(funcName)s: %(message)s",
            datefmt="%m/%d/%Y %I:%M:%S %p",
        )

        if log_dir is not None:
            os.makedirs(log_dir, exist_ok=True)
            file_handler = logging.FileHandler(os.path.join(log_dir, "run.log"), mode="w", encoding="utf-8")
            file_handler.setFormatter(fmt)
            self.logger.addHandler(file_handler)

        console_handler = logging.StreamHandler()
        console_handler.setFormatter(fmt)
        self.logger.addHandler(console_handler)

        # ---- Tensorboard Writer ----
        self.writer = SummaryWriter(log_dir) if (use_tensorboard and log_dir is not None) else None

    def log(self, msg: str):
        self.logger.info(msg)

    def info(self, msg: str):
        self.logger.info(msg)

    def warning(self, msg: str):
        self.logger.warning(msg)

    def debug(self, msg: str):
        self.logger.debug(msg)

    def error(self, msg: str):
        self.logger.error(msg)

    def add_scalar(self, tag: str, value: float, step: int):
        if self.writer is not None:
            self.writer.add_scalar(tag, value, step)

    def close(self):
        if self.writer is not None:
            self.writer.flush()
            self.writer.close()
