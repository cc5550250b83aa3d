from enum import StrEnum


class WritePermission(StrEnum):
    READ_ONLY = "read_only"
    READ_WRITE = "read_write"

    @property
    def can_write(self) -> bool:
        return self is WritePermission.READ_WRITE
