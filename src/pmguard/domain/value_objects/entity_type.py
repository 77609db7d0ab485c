"""Resource kinds governed by the authorization engine."""

from enum import StrEnum

from pmguard.domain.exceptions import ValidationError


class EntityType(StrEnum):
    """Closed set of resource kinds."""

    PROJECTS = "projects"
    NTP_CHECKLISTS = "ntp_checklists"
    WORKFLOWS = "workflows"
    TASKS = "tasks"
    COMMENTS = "comments"
    USER_MANAGEMENT = "user_management"
    DOCUMENTS = "documents"
    DESIGNS = "designs"
    FINANCIALS = "financials"
    COMPONENTS = "components"
    BOQS = "boqs"
    SITES = "sites"
    ADMIN_LOGS = "admin_logs"

    @property
    def label(self) -> str:
        """Human-readable name for permission screens."""
        return _LABELS[self]

    @classmethod
    def parse(cls, value: str) -> "EntityType":
        """Parse resource kind, raising ValidationError for unknown values."""
        try:
            return cls(value)
        except ValueError:
            raise ValidationError(f"Unknown entity type: {value!r}") from None


_LABELS: dict[EntityType, str] = {
    EntityType.PROJECTS: "Projects",
    EntityType.NTP_CHECKLISTS: "NTP Checklists",
    EntityType.WORKFLOWS: "Workflows",
    EntityType.TASKS: "Tasks",
    EntityType.COMMENTS: "Comments",
    EntityType.USER_MANAGEMENT: "User Management",
    EntityType.DOCUMENTS: "Files",
    EntityType.DESIGNS: "Designs",
    EntityType.FINANCIALS: "Financials",
    EntityType.COMPONENTS: "Components",
    EntityType.BOQS: "Bill of Quantities",
    EntityType.SITES: "Sites",
    EntityType.ADMIN_LOGS: "Admin Logs",
}
