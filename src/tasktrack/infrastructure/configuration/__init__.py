from tasktrack.infrastructure.configuration.tracker_settings import TrackerSettings

__all__ = ["TrackerSettings"]
