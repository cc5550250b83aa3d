from tasktrack.infrastructure.observability.logger_factory_service import configure_logging, get_logger
from tasktrack.infrastructure.observability.redaction_service import redact_dict, redact_text

__all__ = [
    "configure_logging",
    "get_logger",
    "redact_dict",
    "redact_text",
]
