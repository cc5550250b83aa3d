from tasktrack.core.application.controller.tracker_controller import TrackerController

__all__ = ["TrackerController"]
