"""Operation context binding for structured logging.

Binds operation-scoped context (correlation id, group id, ...) to every log
entry emitted while an operation runs. Context lives in contextvars, so each
asyncio task sees only its own bindings.

Usage:
    from infrastructure.logging import bind_operation_context

    with bind_operation_context(group_id="group-1"):
        logger.info("resolving_export_scope")

Dependencies:
    - structlog.contextvars
"""

import uuid
from contextlib import contextmanager
from typing import Optional, Any, Generator
import structlog


@contextmanager
def bind_operation_context(
    correlation_id: Optional[str] = None,
    **extra_context: Any,
) -> Generator[str, None, None]:
    """Bind operation-scoped context to all logs within the block.

    Args:
        correlation_id: Unique operation identifier. Auto-generated if not
            provided.
        **extra_context: Additional key-value pairs to include in logs.
            Keys whose value is None are skipped.

    Yields:
        The correlation id in effect for the block.
    """
    context: dict[str, Any] = {"correlation_id": correlation_id or str(uuid.uuid4())}
    context.update({k: v for k, v in extra_context.items() if v is not None})

    previous = structlog.contextvars.get_contextvars()
    structlog.contextvars.bind_contextvars(**context)
    try:
        yield context["correlation_id"]
    finally:
        structlog.contextvars.unbind_contextvars(*context.keys())
        # Restore outer bindings that this block shadowed
        restored = {k: v for k, v in previous.items() if k in context}
        if restored:
            structlog.contextvars.bind_contextvars(**restored)


def get_correlation_id() -> Optional[str]:
    """Get the current correlation ID from the logging context."""
    ctx = structlog.contextvars.get_contextvars()
    return ctx.get("correlation_id")


def set_correlation_id(correlation_id: str) -> None:
    """Set the correlation ID in the current logging context."""
    structlog.contextvars.bind_contextvars(correlation_id=correlation_id)


def clear_operation_context() -> None:
    """Clear all operation-scoped context from the logging context."""
    structlog.contextvars.clear_contextvars()
