"""Runtime settings for the calculator app.

Env vars:
  BETTER_PATH_HOST=127.0.0.1        -> interface the Dash server binds to
  BETTER_PATH_PORT=8050             -> port
  BETTER_PATH_DEBUG=1               -> Dash debug mode / hot reload
  BETTER_PATH_DEFAULT_RATE=7        -> initial annual return (%)
  BETTER_PATH_DEFAULT_YEARS=10      -> initial time horizon (years)
  BETTER_PATH_PROMO=<text>          -> banner text shown above the calculator
  BETTER_PATH_LOG_LEVEL=INFO        -> root log level
"""
from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from typing import Mapping

TRUTHY = {"1", "true", "yes", "on"}

DEFAULT_PROMO = "Join the Wealth Building Mastermind - Next Session Dec 15th | Register Now →"


@dataclass
class AppConfig:
    host: str = "127.0.0.1"
    port: int = 8050
    debug: bool = False
    default_rate: float = 7.0
    default_years: int = 10
    rate_min: float = 0.0
    rate_max: float = 15.0
    rate_step: float = 0.5
    years_min: int = 1
    years_max: int = 30
    promo_message: str = DEFAULT_PROMO
    log_level: str = "INFO"

    def clamp_rate(self, rate: float) -> float:
        return min(self.rate_max, max(self.rate_min, rate))

    def clamp_years(self, years: int) -> int:
        return min(self.years_max, max(self.years_min, years))


def _env_number(environ: Mapping[str, str], key: str, cast, default):
    raw = environ.get(key)
    if raw is None or not str(raw).strip():
        return default
    try:
        return cast(str(raw).strip())
    except (TypeError, ValueError) as exc:
        raise ValueError(f"{key} must be a number, got {raw!r}") from exc


def load_config_from_env(environ: Mapping[str, str] | None = None) -> AppConfig:
    env = os.environ if environ is None else environ
    cfg = AppConfig()
    cfg.host = env.get("BETTER_PATH_HOST", cfg.host) or cfg.host
    cfg.port = _env_number(env, "BETTER_PATH_PORT", int, cfg.port)
    cfg.debug = str(env.get("BETTER_PATH_DEBUG", "")).lower() in TRUTHY
    cfg.default_rate = cfg.clamp_rate(_env_number(env, "BETTER_PATH_DEFAULT_RATE", float, cfg.default_rate))
    cfg.default_years = cfg.clamp_years(_env_number(env, "BETTER_PATH_DEFAULT_YEARS", int, cfg.default_years))
    cfg.promo_message = env.get("BETTER_PATH_PROMO", cfg.promo_message)
    cfg.log_level = str(env.get("BETTER_PATH_LOG_LEVEL", cfg.log_level)).upper()
    return cfg


def configure_logging(level: str = "INFO") -> None:
    root_logger = logging.getLogger()
    if root_logger.handlers:
        root_logger.setLevel(level)
        return
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
