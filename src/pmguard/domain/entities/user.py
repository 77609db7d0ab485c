"""User entity - identity as seen by the authorization engine."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class User:
    """User with exactly one role and zero or more groups."""

    id: str
    role_id: str
    group_ids: frozenset[str] = field(default_factory=frozenset)
    first_name: str = ""
    last_name: str = ""
    email: str | None = None

    def __post_init__(self) -> None:
        object.__setattr__(self, "group_ids", frozenset(self.group_ids))

    @property
    def display_name(self) -> str:
        return f"{self.first_name} {self.last_name}".strip() or self.id
