from __future__ import annotations

import logging
import logging.config

from jablkodev.config import loader
from jablkodev.settings import LoggingSettings

_CURRENT_MODULE_NAME = "-"
_REDACTED = "***"


class _ModuleNameFilter(logging.Filter):
    def filter(self, record: logging.LogRecord) -> bool:
        if not getattr(record, "module_name", None):
            record.module_name = _CURRENT_MODULE_NAME
        return True


class _RedactingFormatter(logging.Formatter):
    """Masks the loaded JABLKO_MOD_KEY wherever it shows up in output."""

    def format(self, record: logging.LogRecord) -> str:
        text = super().format(record)
        env = loader.get_environment()
        if env is None:
            return text
        return text.replace(env.mod_key, _REDACTED)


def set_module_name(name: str | None) -> None:
    """Set the `module_name` value injected into log records."""
    global _CURRENT_MODULE_NAME
    _CURRENT_MODULE_NAME = name or "-"


def configure_logging(*, log_level: str | None = None, module_name: str | None = None) -> None:
    """Configure root logging for a Jablko module process.

    Lines are tagged with `module_name` so output from several modules sharing
    one console stays readable, and the module key is masked. Level and format
    default to JABLKODEV_LOG_LEVEL / JABLKODEV_CONSOLE_LOG_FORMAT.
    """
    settings = LoggingSettings()
    console_fmt = settings.console_log_format or (
        "%(asctime)s %(levelname)s [%(module_name)s] %(name)s:%(lineno)d %(message)s"
    )

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": {
                "module_name": {"()": "jablkodev.logging_setup._ModuleNameFilter"},
            },
            "formatters": {
                "default": {
                    "()": "jablkodev.logging_setup._RedactingFormatter",
                    "format": console_fmt,
                }
            },
            "handlers": {
                "console": {
                    "class": "logging.StreamHandler",
                    "level": str(log_level or settings.log_level).upper(),
                    "formatter": "default",
                    "filters": ["module_name"],
                    "stream": "ext://sys.stdout",
                }
            },
            "root": {"level": "DEBUG", "handlers": ["console"]},
        }
    )

    set_module_name(module_name)
    logging.captureWarnings(True)
    logging.getLogger("aiohttp").setLevel(logging.WARNING)
