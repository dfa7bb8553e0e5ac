"""Structured logging for schema builds and tool registration."""
import logging
import sys

import structlog


def configure_logging(log_level: str = "INFO") -> None:
    """Configure structlog and stdlib logging. Call once at startup."""
    level = getattr(logging, log_level, logging.INFO)
    logging.basicConfig(
        format="%(message)s",
        stream=sys.stderr,
        level=level,
    )
    structlog.configure(
        processors=[
            structlog.contextvars.merge_contextvars,
            structlog.processors.add_log_level,
            structlog.processors.TimeStamper(fmt="iso"),
            structlog.dev.ConsoleRenderer(colors=True)
            if log_level == "DEBUG"
            else structlog.processors.JSONRenderer(),
        ],
        wrapper_class=structlog.make_filtering_bound_logger(level),
        context_class=dict,
        # stdout carries the CLI's JSON output
        logger_factory=structlog.PrintLoggerFactory(file=sys.stderr),
        cache_logger_on_first_use=True,
    )


def get_logger(name: str) -> structlog.stdlib.BoundLogger:
    return structlog.get_logger(name)


# Convenience: consistent event names across builder and registry
def log_tool_spec_built(
    logger: structlog.stdlib.BoundLogger,
    tool_name: str,
    parameter_count: int,
    required_count: int,
) -> None:
    logger.debug(
        "tool_spec_built",
        tool_name=tool_name,
        parameter_count=parameter_count,
        required_count=required_count,
    )


def log_tool_registered(
    logger: structlog.stdlib.BoundLogger,
    tool_name: str,
    source: str,
) -> None:
    logger.info("tool_registered", tool_name=tool_name, source=source)
