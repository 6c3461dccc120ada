"""Role based field suppression.

The role comes from the launch parameters and is not authenticated.
Suppression only keeps fields off the screen for a given audience; it is not
an access-control boundary.  A deployment with real security requirements
must take the role from a verified session instead.
"""

from __future__ import annotations

from .models import FieldSpec, RenderDecision


def decide(field: FieldSpec, role: str) -> RenderDecision:
    """Return whether ``field`` is rendered for ``role``.

    Fields without ``permissions`` are always rendered.  A ``permissions``
    block without ``roles`` admits nobody.  Role matching is exact and
    case-sensitive.
    """

    permissions = field.permissions
    if permissions is None:
        return RenderDecision.RENDER
    if not permissions.roles or role not in permissions.roles:
        return RenderDecision.SUPPRESS
    return RenderDecision.RENDER


def is_suppressed(field: FieldSpec, role: str) -> bool:
    return decide(field, role) is RenderDecision.SUPPRESS


__all__ = ["decide", "is_suppressed"]
