"""
Observability package - logging support for the directory client.
"""

from .logging import (
    CorrelationIDFilter,
    StructuredFormatter,
    configure_logging,
    generate_correlation_id,
    get_correlation_id,
    set_correlation_id,
    setup_structured_logging,
)

__all__ = [
    "CorrelationIDFilter",
    "StructuredFormatter",
    "configure_logging",
    "generate_correlation_id",
    "get_correlation_id",
    "set_correlation_id",
    "setup_structured_logging",
]
