from tasktrack.core.application.policies.retry_policy import RetryPolicy

__all__ = ["RetryPolicy"]
