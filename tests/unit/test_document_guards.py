"""Unit tests for document guards."""

from pmguard.application.guards.documents import (
    can_annotate_document,
    can_change_document_status,
    can_delete_document,
    can_delete_drawing,
    can_lock_document,
    can_unlock_document,
    can_upload_document,
    can_upload_document_version,
    can_view_document,
    get_document_permissions,
)
from pmguard.domain.entities import User
from pmguard.domain.value_objects import EntityType, PermissionSet

from tests.conftest import make_override


def _in_group(user: User, *group_ids: str) -> User:
    return User(id=user.id, role_id=user.role_id, group_ids=frozenset(group_ids))


def test_viewer_can_only_view(viewer, roles) -> None:
    assert can_view_document(viewer, "doc-1", [], roles)
    assert not can_upload_document(viewer, [], roles)
    assert not can_annotate_document(viewer, "doc-1", [], roles)
    assert not can_change_document_status(viewer, "doc-1", [], roles)
    assert not can_delete_document(viewer, "doc-1", [], roles)


def test_annotate_and_status_follow_update_bit(viewer, roles) -> None:
    user = _in_group(viewer, "reviewers")
    overrides = [make_override("o1", "reviewers", EntityType.DOCUMENTS, entity_ids=("doc-1",), update=True)]

    assert can_annotate_document(user, "doc-1", overrides, roles)
    assert can_change_document_status(user, "doc-1", overrides, roles)
    assert not can_annotate_document(user, "doc-2", overrides, roles)


def test_delete_has_no_ownership_gate(member, roles) -> None:
    assert can_delete_document(member, "doc-1", [], roles)


def test_no_user_is_denied(roles) -> None:
    assert not can_upload_document(None, [], roles)
    assert not can_view_document(None, "doc-1", [], roles)
    assert get_document_permissions(None, "doc-1", [], roles) == PermissionSet.none()


class TestDocumentLocks:
    """Locked documents only take new versions from admins."""

    def test_unlocked_document_follows_update_bit(self, member, viewer, roles) -> None:
        assert can_upload_document_version(member, "doc-1", False, [], roles)
        assert not can_upload_document_version(viewer, "doc-1", False, [], roles)

    def test_locked_document_rejects_non_admin(self, member, roles) -> None:
        assert not can_upload_document_version(member, "doc-1", True, [], roles)

    def test_locked_document_accepts_admin(self, admin, roles) -> None:
        assert can_upload_document_version(admin, "doc-1", True, [], roles)

    def test_locker_or_admin_may_unlock(self, admin, member, viewer) -> None:
        assert can_unlock_document(member, True, member.id)
        assert can_unlock_document(admin, True, member.id)
        assert not can_unlock_document(viewer, True, member.id)

    def test_cannot_unlock_unlocked_document(self, admin) -> None:
        assert not can_unlock_document(admin, False, None)

    def test_custom_admin_role_id(self, member) -> None:
        assert can_unlock_document(member, True, "someone-else", admin_role_id=member.role_id)
        assert not can_unlock_document(None, True, "someone-else")

    def test_lock_requires_update_bit(self, member, viewer, roles) -> None:
        assert can_lock_document(member, "doc-1", False, [], roles)
        assert not can_lock_document(viewer, "doc-1", False, [], roles)
        assert not can_lock_document(None, "doc-1", False, [], roles)

    def test_cannot_lock_locked_document(self, admin, roles) -> None:
        assert not can_lock_document(admin, "doc-1", True, [], roles)

    def test_lock_follows_specific_revoke(self, member, roles) -> None:
        user = _in_group(member, "g1")
        overrides = [make_override("o1", "g1", EntityType.DOCUMENTS, entity_ids=("doc-1",), update=False)]

        assert not can_lock_document(user, "doc-1", False, overrides, roles)
        assert can_lock_document(user, "doc-2", False, overrides, roles)


class TestDrawingDeletion:
    """Drawings go with the delete bit or with authorship."""

    def test_author_without_delete_bit(self, viewer, roles) -> None:
        assert can_delete_drawing(viewer, "doc-1", viewer.id, [], roles)

    def test_non_author_needs_delete_bit(self, member, viewer, roles) -> None:
        assert can_delete_drawing(member, "doc-1", "someone-else", [], roles)
        assert not can_delete_drawing(viewer, "doc-1", "someone-else", [], roles)

    def test_unknown_author_never_matches(self, viewer, roles) -> None:
        assert not can_delete_drawing(viewer, "doc-1", None, [], roles)

    def test_no_user_is_denied(self, roles) -> None:
        assert not can_delete_drawing(None, "doc-1", "user-1", [], roles)
