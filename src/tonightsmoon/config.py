"""Runtime settings read from the environment (a .env file is loaded by the entry point)."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

from pytz import UnknownTimeZoneError, timezone
from pytz.tzinfo import BaseTzInfo

from tonightsmoon.i18n import LANGUAGES

logger = logging.getLogger(__name__)

_ROOT = Path(__file__).parent.parent.parent
DEFAULT_ASSETS_DIR = _ROOT / "resources"


class ConfigError(ValueError):
    """Invalid value in an environment setting."""


@dataclass(frozen=True)
class Settings:
    """Validated runtime settings."""

    assets_dir: Path  # Directory holding exclamations.txt / quotes.txt
    tz_name: str = "UTC"  # IANA zone whose calendar date defines "tonight"
    lang: str = "en"  # 'en' or 'ko'
    log_level: str = "WARNING"

    @property
    def tz(self) -> BaseTzInfo:
        return timezone(self.tz_name)


def load_settings(environ: dict[str, str] | None = None) -> Settings:
    """Build Settings from TONIGHTSMOON_* environment variables.

    Args:
        environ: Mapping to read instead of os.environ (used by tests).

    Returns:
        Settings with defaults applied for unset variables.

    Raises:
        ConfigError: On an unknown timezone, language, or log level.
    """
    env = os.environ if environ is None else environ

    assets_dir = Path(env.get("TONIGHTSMOON_ASSETS_DIR") or DEFAULT_ASSETS_DIR)

    tz_name = env.get("TONIGHTSMOON_TZ") or "UTC"
    try:
        timezone(tz_name)
    except UnknownTimeZoneError as e:
        raise ConfigError(f"Unknown timezone: {tz_name}") from e

    lang = (env.get("TONIGHTSMOON_LANG") or "en").lower()
    if lang not in LANGUAGES:
        raise ConfigError(f"Unsupported language: {lang} (expected one of {LANGUAGES})")

    log_level = (env.get("TONIGHTSMOON_LOG_LEVEL") or "WARNING").upper()
    if not isinstance(logging.getLevelName(log_level), int):
        raise ConfigError(f"Unknown log level: {log_level}")

    settings = Settings(
        assets_dir=assets_dir, tz_name=tz_name, lang=lang, log_level=log_level
    )
    logger.debug("Loaded settings: %s", settings)
    return settings
