from dataclasses import dataclass, field
from datetime import date

SORTABLE_FIELDS = frozenset({"name", "project", "deadline", "status"})


@dataclass(frozen=True)
class TaskQuery:
    """Filter and ordering criteria for a projection of the task collection.

    Every predicate left unset matches all records.
    """

    text: str = ""
    statuses: frozenset[str] = field(default_factory=frozenset)
    project: str | None = None
    deadline: date | None = None
    sort_by: str | None = None
    descending: bool = False

    def __post_init__(self):
        if self.sort_by is not None and self.sort_by not in SORTABLE_FIELDS:
            raise ValueError(f"Cannot sort by '{self.sort_by}'. Expected one of {sorted(SORTABLE_FIELDS)}")
        if not isinstance(self.statuses, frozenset):
            object.__setattr__(self, "statuses", frozenset(self.statuses))
