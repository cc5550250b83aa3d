import re
from typing import Any

# Regex patterns for secrets that may leak into log messages
SECRET_PATTERNS = [
    r"(X-Access-Key:\s*)(\S+)",
    r"(X-Master-Key:\s*)(\S+)",
    r"(credential\s*[:=]\s*)(['\"]?\S+['\"]?)",
]

SENSITIVE_KEYS = {
    "x-access-key",
    "x-master-key",
    "access_key",
    "credential",
    "candidate",
    "password",
    "secret",
}

REDACTED = "[REDACTED]"


def redact_text(text: str) -> str:
    """
    Redacts secrets from a string using regex patterns.
    """
    if not text:
        return text

    redacted_text = text
    for pattern in SECRET_PATTERNS:
        redacted_text = re.sub(pattern, rf"\1{REDACTED}", redacted_text, flags=re.IGNORECASE)
    return redacted_text


def redact_value(value: Any) -> Any:
    if isinstance(value, str):
        return redact_text(value)
    elif isinstance(value, dict):
        return redact_dict(value)
    elif isinstance(value, list):
        return [redact_value(item) for item in value]
    return value


def redact_dict(obj: dict[str, Any]) -> dict[str, Any]:
    """
    Redacts sensitive keys and values in a dictionary (recursive).
    """
    new_obj = {}
    for k, v in obj.items():
        key_lower = str(k).lower()
        if any(sensitive in key_lower for sensitive in SENSITIVE_KEYS):
            new_obj[k] = REDACTED
        else:
            new_obj[k] = redact_value(v)
    return new_obj


def redaction_processor(logger: Any, method_name: str, event_dict: dict[str, Any]) -> dict[str, Any]:  # noqa: ARG001
    """Structlog processor masking secrets in every event before rendering."""
    return redact_dict(event_dict)
