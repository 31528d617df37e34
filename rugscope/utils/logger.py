import os
import re
import sys

from loguru import logger

# Polygonscan and RPC URLs carry keys in the query string
_SECRET_QUERY = re.compile(r"\b(apikey|api-key|api_key)=[^&\s'\"]+", re.IGNORECASE)


def redact_secrets(text: str) -> str:
    return _SECRET_QUERY.sub(r"\1=***", text)


def _redact_record(record) -> None:  # type: ignore[no-untyped-def]
    record["message"] = redact_secrets(record["message"])


def setup_logger(*, json_logs: bool = False, level: str = "INFO", log_dir: str = "logs") -> None:
    """Configure loguru for the API server and CLI.

    Console level controlled by LOG_LEVEL env (default: INFO).
    File always captures DEBUG for post-mortem analysis.
    API keys in logged URLs are masked on every sink.
    """
    console_level = os.getenv("LOG_LEVEL", level).upper()
    logger.remove()
    logger.configure(patcher=_redact_record)

    if json_logs:
        logger.add(sys.stdout, serialize=True, level=console_level)
    else:
        logger.add(
            sys.stdout,
            format=(
                "<green>{time:HH:mm:ss}</green> | "
                "<level>{level: <8}</level> | "
                "<cyan>{name}</cyan>:<cyan>{function}</cyan> - "
                "<level>{message}</level>"
            ),
            level=console_level,
            colorize=True,
        )

    logger.add(
        f"{log_dir}/rugscope_{{time:YYYY-MM-DD}}.log",
        rotation="20 MB",
        retention="7 days",
        compression="gz",
        level="DEBUG",
        serialize=json_logs,
    )
