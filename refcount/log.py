from __future__ import annotations

import logging
import sys
from dataclasses import dataclass
from logging.handlers import RotatingFileHandler
from typing import Dict, Optional


_LEVEL_MAP: Dict[str, int] = {
	"DEBUG": logging.DEBUG,
	"INFO": logging.INFO,
	"WARNING": logging.WARNING,
	"WARN": logging.WARNING,
	"ERROR": logging.ERROR,
	"CRITICAL": logging.CRITICAL,
}

_HANDLER_TAG = "_refcount_handler"


@dataclass(frozen=True)
class LoggingConfig:
	"""Settings for the root logger.

	Diagnostics go to stderr so stdout carries only the report text.
	"""
	level: str = "WARNING"
	console: bool = True
	log_file: Optional[str] = None
	max_bytes: int = 2 * 1024 * 1024
	backup_count: int = 3
	console_fmt: str = "%(levelname)s | %(message)s"
	file_fmt: str = "%(asctime)s | %(levelname)s | %(name)s | %(message)s"
	datefmt: str = "%Y-%m-%d %H:%M:%S"


def parse_level(level: str) -> int:
	return _LEVEL_MAP.get(str(level).strip().upper(), logging.INFO)


def configure_logging(cfg: LoggingConfig, *, force: bool = False) -> logging.Logger:
	"""Attach our handlers to the root logger once; ``force`` replaces them."""
	root = logging.getLogger()
	ours = [h for h in root.handlers if getattr(h, _HANDLER_TAG, False)]
	if ours and not force:
		return root
	for handler in ours:
		root.removeHandler(handler)
		handler.close()

	root.setLevel(parse_level(cfg.level))

	if cfg.console:
		console = logging.StreamHandler(sys.stderr)
		console.setFormatter(logging.Formatter(cfg.console_fmt, datefmt=cfg.datefmt))
		setattr(console, _HANDLER_TAG, True)
		root.addHandler(console)

	if cfg.log_file:
		file_handler = RotatingFileHandler(
			cfg.log_file,
			maxBytes=cfg.max_bytes,
			backupCount=cfg.backup_count,
			encoding="utf-8",
		)
		file_handler.setFormatter(logging.Formatter(cfg.file_fmt, datefmt=cfg.datefmt))
		setattr(file_handler, _HANDLER_TAG, True)
		root.addHandler(file_handler)

	return root
