"""
adaptive_core/config.py
-----------------------
Runtime settings for the adaptive engine, read from the environment
(optionally a .env file) with safe fallbacks to the built-in defaults.
"""

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Optional, Union

from dotenv import load_dotenv

from .difficulty_policy import DifficultyPolicy, LOWER_THRESHOLD, RECENT_WINDOW, UPPER_THRESHOLD
from .adaptive_selector import TOP_K
from .irt_engine import ABILITY_ITERATIONS

LOG_FORMAT = "[%(asctime)s] %(levelname)s - %(message)s"
PASSING_SCORE = 60.0


def _env_int(name: str, default: Optional[int]) -> Optional[int]:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return int(raw.strip())
    except ValueError:
        logging.warning(f"Invalid integer for {name}={raw!r}, using {default}")
        return default


def _env_float(name: str, default: float) -> float:
    raw = os.getenv(name)
    if raw is None or not raw.strip():
        return default
    try:
        return float(raw.strip())
    except ValueError:
        logging.warning(f"Invalid number for {name}={raw!r}, using {default}")
        return default


@dataclass
class AdaptiveSettings:
    upper_threshold: float = UPPER_THRESHOLD
    lower_threshold: float = LOWER_THRESHOLD
    window: int = RECENT_WINDOW
    top_k: int = TOP_K
    iterations: int = ABILITY_ITERATIONS
    passing_score: float = PASSING_SCORE
    seed: Optional[int] = None
    log_level: str = "INFO"

    def policy(self) -> DifficultyPolicy:
        return DifficultyPolicy(
            upper_threshold=self.upper_threshold,
            lower_threshold=self.lower_threshold,
            window=self.window,
        )


def load_settings(env_file: Optional[Union[str, os.PathLike]] = None) -> AdaptiveSettings:
    """
    Build settings from ADAPTIVE_* environment variables.
    If env_file is given (or a .env is found), it is loaded first without
    overriding variables already set in the process.
    """
    if env_file is not None:
        load_dotenv(dotenv_path=env_file)
    else:
        load_dotenv()

    return AdaptiveSettings(
        upper_threshold=_env_float("ADAPTIVE_UPPER_THRESHOLD", UPPER_THRESHOLD),
        lower_threshold=_env_float("ADAPTIVE_LOWER_THRESHOLD", LOWER_THRESHOLD),
        window=_env_int("ADAPTIVE_WINDOW", RECENT_WINDOW),
        top_k=_env_int("ADAPTIVE_TOP_K", TOP_K),
        iterations=_env_int("ADAPTIVE_ITERATIONS", ABILITY_ITERATIONS),
        passing_score=_env_float("ADAPTIVE_PASSING_SCORE", PASSING_SCORE),
        seed=_env_int("ADAPTIVE_SEED", None),
        log_level=(os.getenv("ADAPTIVE_LOG_LEVEL") or "INFO").strip().upper(),
    )


def configure_logging(level: str = "INFO") -> None:
    logging.basicConfig(level=getattr(logging, level.upper(), logging.INFO), format=LOG_FORMAT)
