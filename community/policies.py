"""Authorization checks for profile mutations."""

from django.core.exceptions import PermissionDenied


def _is_authenticated(actor):
    return bool(actor) and getattr(actor, "is_authenticated", False)


def can_manage_users(actor):
    """Staff accounts may moderate any member."""
    return _is_authenticated(actor) and bool(getattr(actor, "is_staff", False))


def can_update(actor, subject):
    """Return True when actor may modify subject's profile."""
    if not _is_authenticated(actor) or subject is None:
        return False
    return can_manage_users(actor) or actor.pk == subject.pk


def authorize_update(actor, subject):
    """Raise PermissionDenied unless actor may modify subject."""
    if not can_update(actor, subject):
        raise PermissionDenied("You are not allowed to modify this profile.")


def authorize_manage_users(actor):
    if not can_manage_users(actor):
        raise PermissionDenied("Only staff may moderate users.")
