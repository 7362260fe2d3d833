# ==============================================
# Configuration Management
# ==============================================
#
# PURPOSE:
#   Load configuration from environment variables / .env file
#   for the command line entry point. The engines themselves take
#   explicit arguments and never read configuration.
#
# CLASSES:
# --------
# - AnalysisConfig (dataclass)
#     max_depth: int             (default 256)
#
# - ChartDefaults (dataclass)
#     palette: tuple[str]        (default: the fixed ten-colour palette)
#
# - LoggingConfig (dataclass)
#     level: str                 (default "INFO")
#     log_file: str | None       (default None → stderr only)
#
# - AppConfig (dataclass)
#     analysis: AnalysisConfig
#     charts: ChartDefaults
#     logging: LoggingConfig
#
# ENVIRONMENT:
# ------------
#   MAX_DOCUMENT_DEPTH, CHART_PALETTE ("#111,#222,..."), LOG_LEVEL, LOG_FILE
#
# FUNCTION:
# ---------
# - get_config() -> AppConfig
#     Load .env using python-dotenv, construct AppConfig.
#     Returns the same singleton on repeated calls.
#
# ==============================================

import os
from dataclasses import dataclass, field
from typing import Optional, Tuple
from pathlib import Path

from dotenv import load_dotenv

from .charts.palette import DEFAULT_PALETTE
from .documents import DEFAULT_MAX_DEPTH


@dataclass
class AnalysisConfig:
    """Limits applied while walking documents."""
    max_depth: int = DEFAULT_MAX_DEPTH


@dataclass
class ChartDefaults:
    """Colours handed to the chart transforms as the caller override."""
    palette: Tuple[str, ...] = DEFAULT_PALETTE


@dataclass
class LoggingConfig:
    level: str = "INFO"
    log_file: Optional[str] = None


@dataclass
class AppConfig:
    """Main application configuration."""
    analysis: AnalysisConfig = field(default_factory=AnalysisConfig)
    charts: ChartDefaults = field(default_factory=ChartDefaults)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


# Singleton instance
_config_instance: Optional[AppConfig] = None


def _parse_palette(raw: Optional[str]) -> Tuple[str, ...]:
    if not raw:
        return DEFAULT_PALETTE
    colors = tuple(color.strip() for color in raw.split(",") if color.strip())
    return colors or DEFAULT_PALETTE


def get_config() -> AppConfig:
    """
    Load configuration from environment variables / .env file.
    Returns the same singleton instance on repeated calls.

    Returns:
        AppConfig: Application configuration

    Raises:
        ValueError: if MAX_DOCUMENT_DEPTH is not a positive integer
    """
    global _config_instance

    if _config_instance is not None:
        return _config_instance

    # Load .env file from project root
    env_path = Path(__file__).parent.parent / ".env"
    load_dotenv(dotenv_path=env_path)

    max_depth = int(os.getenv("MAX_DOCUMENT_DEPTH", str(DEFAULT_MAX_DEPTH)))
    if max_depth < 1:
        raise ValueError(f"MAX_DOCUMENT_DEPTH must be positive, got {max_depth}")

    _config_instance = AppConfig(
        analysis=AnalysisConfig(max_depth=max_depth),
        charts=ChartDefaults(palette=_parse_palette(os.getenv("CHART_PALETTE"))),
        logging=LoggingConfig(
            level=os.getenv("LOG_LEVEL", "INFO").upper(),
            log_file=os.getenv("LOG_FILE") or None,
        ),
    )

    return _config_instance


def reset_config() -> None:
    """Drop the cached configuration so the next get_config() reloads it."""
    global _config_instance
    _config_instance = None
