from __future__ import annotations

import logging.config
import os
from typing import Any

import structlog
from beartype import beartype


class ModuleFilter(logging.Filter):
    def __init__(self, modules_to_log: dict[str, str]) -> None:
        super().__init__()
        self.modules_to_log: dict[str, str] = modules_to_log

    def filter(self, record: logging.LogRecord) -> bool:
        if not self.modules_to_log:
            return True

        for module, level in self.modules_to_log.items():
            if module == "*" or record.name.startswith(module):
                min_log_level = logging.getLevelName(level)
                if not isinstance(min_log_level, int):
                    min_log_level = logging.INFO
                return record.levelno >= min_log_level

        return False


timestamper = structlog.processors.TimeStamper(fmt="%Y-%m-%d %H:%M:%S")
pre_chain = [
    # Add the log level and a timestamp to the event_dict if the log entry
    # is not from structlog.
    structlog.stdlib.add_log_level,
    structlog.stdlib.ExtraAdder(),
    timestamper,
]


def _formatter(colors: bool) -> dict[str, Any]:
    return {
        "()": structlog.stdlib.ProcessorFormatter,
        "processors": [
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            structlog.dev.ConsoleRenderer(colors=colors),
        ],
        "foreign_pre_chain": pre_chain,
    }


@beartype
def configure(
    service_name: str = "unit_test_utils",
    log_level: str = "DEBUG",
    log_dir: str | None = None,
) -> None:
    """
    Configure structlog-based logger.

    Nothing is configured on import; test suites opt in by calling this once,
    typically from a session-scoped fixture.

    Args:
        service_name: Logger name prefix allowed through at `log_level`;
            every other module is filtered at INFO.
        log_level: Minimum log level (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        log_dir: Directory for a midnight-rotating log file; console only when None.
    """
    log_level = log_level.upper()
    handlers: dict[str, dict[str, Any]] = {
        "default": {
            "level": log_level,
            "class": "logging.StreamHandler",
            "formatter": "colored",
            "filters": ["module_filter"],
        },
    }
    if log_dir is not None:
        os.makedirs(log_dir, exist_ok=True)
        handlers["file"] = {
            "level": log_level,
            "class": "logging.handlers.TimedRotatingFileHandler",
            "filename": os.path.join(log_dir, f"{service_name}.log"),
            "when": "midnight",
            "interval": 1,
            "backupCount": 30,
            "formatter": "plain",
            "filters": ["module_filter"],
        }

    logging.config.dictConfig(
        {
            "version": 1,
            "disable_existing_loggers": False,
            "filters": {
                "module_filter": {
                    "()": ModuleFilter,
                    "modules_to_log": {service_name: log_level, "*": "INFO"},
                },
            },
            "formatters": {
                "plain": _formatter(colors=False),
                "colored": _formatter(colors=True),
            },
            "handlers": handlers,
            "loggers": {
                "": {
                    "handlers": list(handlers),
                    "level": log_level,
                    "propagate": True,
                },
            },
        }
    )
    structlog.configure(
        processors=[
            structlog.stdlib.add_log_level,
            structlog.stdlib.PositionalArgumentsFormatter(),
            timestamper,
            structlog.processors.CallsiteParameterAdder(
                parameters=[
                    structlog.processors.CallsiteParameter.FILENAME,
                    structlog.processors.CallsiteParameter.FUNC_NAME,
                    structlog.processors.CallsiteParameter.LINENO,
                ]
            ),
            structlog.processors.StackInfoRenderer(),
            structlog.processors.format_exc_info,
            structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
        ],
        logger_factory=structlog.stdlib.LoggerFactory(),
        cache_logger_on_first_use=True,
    )

    structlog.get_logger().debug("Logger initialized")
    return None


# Global logger instance, routed through stdlib logging so DEBUG events are
# dropped until configure() installs handlers.
logger: structlog.stdlib.BoundLogger = structlog.wrap_logger(
    logging.getLogger("unit_test_utils"), wrapper_class=structlog.stdlib.BoundLogger
)
