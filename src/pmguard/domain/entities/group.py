"""Group entity."""

from dataclasses import dataclass, field


@dataclass(frozen=True)
class Group:
    """Named collection of users that may carry permission overrides."""

    id: str
    name: str
    description: str = ""
    member_ids: frozenset[str] = field(default_factory=frozenset)

    def __post_init__(self) -> None:
        object.__setattr__(self, "member_ids", frozenset(self.member_ids))
