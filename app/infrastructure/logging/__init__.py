"""Structured logging infrastructure.

This package provides centralized logging configuration and utilities
using structlog.

Public API:
    - configure_logging(): Initialize logging for the application
    - get_logger(): Get a logger instance with a specific name
    - get_module_logger(): Get a logger for the calling module
    - bind_operation_context(): Context manager for operation-scoped logging
    - get_correlation_id(): Get current correlation ID from context
    - set_correlation_id(): Set correlation ID in context
    - clear_operation_context(): Clear all operation context

Example:
    from infrastructure.logging import (
        configure_logging,
        get_module_logger,
        bind_operation_context,
    )

    configure_logging()

    logger = get_module_logger()
    with bind_operation_context(group_id="group-1"):
        logger.info("resolving_export_scope")
"""

from infrastructure.logging.setup import (
    configure_logging,
    get_logger,
    get_module_logger,
)

from infrastructure.logging.context import (
    bind_operation_context,
    get_correlation_id,
    set_correlation_id,
    clear_operation_context,
)

__all__ = [
    # Setup
    "configure_logging",
    "get_logger",
    "get_module_logger",
    # Context
    "bind_operation_context",
    "get_correlation_id",
    "set_correlation_id",
    "clear_operation_context",
]
