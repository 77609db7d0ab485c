"""Document guards.

Documents carry no ownership gate: the resolved bits decide. Annotating and
changing a document's status both ride on the update bit, as does locking.
Unlocking and versioning a locked document depend on the admin role or the
locking user, and a drawing's author may always delete it.
"""

from collections.abc import Sequence

from pmguard.application.guards.access import check_access, entity_permissions
from pmguard.domain.entities import GroupPermissionOverride, Role, User
from pmguard.domain.policies import ADMIN_ROLE_ID
from pmguard.domain.value_objects import EntityType, PermissionAction, PermissionSet


def can_upload_document(
    user: User | None,
    overrides: Sequence[GroupPermissionOverride],
    roles: Sequence[Role],
) -> bool:
    """Upload a new document."""
    return check_access(
        user, EntityType.DOCUMENTS, PermissionAction.CREATE, None, overrides, roles
    )


def can_view_document(
    user: User | None,
    document_id: str,
    overrides: Sequence[GroupPermissionOverride],
    roles: Sequence[Role],
) -> bool:
    """View or download a document."""
    return check_access(
        user, EntityType.DOCUMENTS, PermissionAction.READ, document_id, overrides, roles
    )


def can_annotate_document(
    user: User | None,
    document_id: str,
    overrides: Sequence[GroupPermissionOverride],
    roles: Sequence[Role],
) -> bool:
    """Add comments or drawings to a document."""
    return check_access(
        user, EntityType.DOCUMENTS, PermissionAction.UPDATE, document_id, overrides, roles
    )


def can_change_document_status(
    user: User | None,
    document_id: str,
    overrides: Sequence[GroupPermissionOverride],
    roles: Sequence[Role],
) -> bool:
    """Approve or reject a document."""
    return check_access(
        user, EntityType.DOCUMENTS, PermissionAction.UPDATE, document_id, overrides, roles
    )


def can_delete_document(
    user: User | None,
    document_id: str,
    overrides: Sequence[GroupPermissionOverride],
    roles: Sequence[Role],
) -> bool:
    return check_access(
        user, EntityType.DOCUMENTS, PermissionAction.DELETE, document_id, overrides, roles
    )


def can_upload_document_version(
    user: User | None,
    document_id: str,
    is_locked: bool,
    overrides: Sequence[GroupPermissionOverride],
    roles: Sequence[Role],
    *,
    admin_role_id: str = ADMIN_ROLE_ID,
) -> bool:
    """Upload a new version. A locked document only takes versions from admins."""
    if user is None:
        return False
    if is_locked and user.role_id != admin_role_id:
        return False
    return check_access(
        user, EntityType.DOCUMENTS, PermissionAction.UPDATE, document_id, overrides, roles
    )


def can_lock_document(
    user: User | None,
    document_id: str,
    is_locked: bool,
    overrides: Sequence[GroupPermissionOverride],
    roles: Sequence[Role],
) -> bool:
    """Lock an unlocked document. Needs the update bit."""
    if is_locked:
        return False
    return check_access(
        user, EntityType.DOCUMENTS, PermissionAction.UPDATE, document_id, overrides, roles
    )


def can_unlock_document(
    user: User | None,
    is_locked: bool,
    locked_by_user_id: str | None,
    *,
    admin_role_id: str = ADMIN_ROLE_ID,
) -> bool:
    """Only the user who locked the document, or an admin, may unlock it."""
    if user is None or not is_locked:
        return False
    if user.role_id == admin_role_id:
        return True
    return locked_by_user_id is not None and user.id == locked_by_user_id


def can_delete_drawing(
    user: User | None,
    document_id: str,
    drawing_author_id: str | None,
    overrides: Sequence[GroupPermissionOverride],
    roles: Sequence[Role],
) -> bool:
    """Delete a drawing on a document: its author, or anyone with the delete bit."""
    if user is None:
        return False
    if drawing_author_id is not None and user.id == drawing_author_id:
        return True
    return check_access(
        user, EntityType.DOCUMENTS, PermissionAction.DELETE, document_id, overrides, roles
    )


def get_document_permissions(
    user: User | None,
    document_id: str | None,
    overrides: Sequence[GroupPermissionOverride],
    roles: Sequence[Role],
) -> PermissionSet:
    return entity_permissions(user, EntityType.DOCUMENTS, document_id, overrides, roles)
