from tasktrack.core.domain.access.write_permission import WritePermission

__all__ = ["WritePermission"]
