"""Centralized logging configuration using Loguru.

Usage:
    from logsweep.utils.logging import logger
    logger.info("Message")
    logger.debug("Debug message")  # Only shows if LOGSWEEP_LOG_LEVEL=DEBUG

Environment Variables:
    LOGSWEEP_LOG_LEVEL: DEBUG|INFO|WARNING|ERROR (default: INFO)
    LOGSWEEP_LOG_JSON: 0|1 (default: 0, human-readable)
    LOGSWEEP_LOG_FILE: path to log file (optional, NDJSON)

All handlers write to stderr or a file. Stdout is reserved for the match,
update and revert lines the command prints.
"""

import json
import os
import sys

from loguru import logger

# Remove default handler
logger.remove()

NUMERIC_LEVELS = {
    "TRACE": 10,
    "DEBUG": 20,
    "INFO": 30,
    "SUCCESS": 35,
    "WARNING": 40,
    "ERROR": 50,
    "CRITICAL": 60,
}

_log_level = os.environ.get("LOGSWEEP_LOG_LEVEL", "INFO").upper()
_json_mode = os.environ.get("LOGSWEEP_LOG_JSON", "0") == "1"
_log_file = os.environ.get("LOGSWEEP_LOG_FILE")


def _to_json_record(record) -> str:
    """Render a loguru record as one NDJSON line."""
    payload = {
        "level": NUMERIC_LEVELS.get(record["level"].name, 30),
        "time": int(record["time"].timestamp() * 1000),
        "msg": record["message"],
        "pid": record["process"].id,
        "module": record["name"],
    }
    for key, value in record["extra"].items():
        payload[key] = value if isinstance(value, (int, float, bool)) or value is None else str(value)

    if record["exception"]:
        payload["err"] = {
            "type": record["exception"].type.__name__ if record["exception"].type else "Error",
            "message": str(record["exception"].value) if record["exception"].value else "",
        }
    return json.dumps(payload)


def json_stderr_sink(message):
    """Write NDJSON records to stderr.

    Never call logger.* inside a sink - causes infinite recursion.
    """
    sys.stderr.write(_to_json_record(message.record) + "\n")
    sys.stderr.flush()


# Human-readable format (no emojis - Windows CP1252 compatibility)
_human_format = (
    "<green>{time:HH:mm:ss}</green> | "
    "<level>{level: <8}</level> | "
    "<cyan>{name}:{function}:{line}</cyan> - "
    "<level>{message}</level>"
)

logger.level("DEBUG", color="<blue>")
logger.level("INFO", color="<white>")
logger.level("WARNING", color="<yellow>")
logger.level("ERROR", color="<red>")
logger.level("CRITICAL", color="<red><bold>")

if _json_mode:
    logger.add(
        json_stderr_sink,
        level=_log_level,
        colorize=False,
    )
else:
    logger.add(
        sys.stderr,
        level=_log_level,
        format=_human_format,
        colorize=None,  # Auto-detect: colors if TTY, plain if piped
    )

if _log_file:
    def _file_json_sink(message):
        """Append NDJSON records to the configured log file."""
        with open(_log_file, "a", encoding="utf-8") as f:
            f.write(_to_json_record(message.record) + "\n")

    logger.add(
        _file_json_sink,
        level="DEBUG",  # File always captures everything
    )


def get_log_level() -> str:
    """Return the console log level in effect."""
    return _log_level


__all__ = ["logger", "get_log_level", "json_stderr_sink"]
