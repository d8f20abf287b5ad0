"""Helpers for declaring static catalog entries compactly."""

from __future__ import annotations

from collections.abc import Iterable, Sequence

from jirafields.core.types import AccessPath, FieldDefinition, FieldKind, Frequency


def path(
    route: str,
    description: str,
    type: str = "string",
    frequency: Frequency = "medium",
) -> AccessPath:
    """Declare one access path."""
    return AccessPath(path=route, description=description, type=type, frequency=frequency)


def static_field(
    field_id: str,
    name: str,
    description: str,
    type: FieldKind,
    paths: Iterable[AccessPath],
    examples: Sequence[str] | None = None,
    common_usage: Sequence[Sequence[str]] | None = None,
) -> FieldDefinition:
    """Declare a static field.

    Examples default to the high-frequency paths, common usage to all of them
    taken together.
    """
    access_paths = tuple(paths)
    if examples is None:
        examples = tuple(p.path for p in access_paths if p.frequency == "high")[:2]
        if not examples and access_paths:
            examples = (access_paths[0].path,)
    if common_usage is None:
        common_usage = (examples,) if examples else ()
    return FieldDefinition(
        id=field_id,
        name=name,
        description=description,
        type=type,
        access_paths=access_paths,
        examples=tuple(examples),
        common_usage=tuple(tuple(group) for group in common_usage),
        source="static",
        confidence="high",
    )


def user_paths(prefix: str, label: str, avatars: bool = True) -> list[AccessPath]:
    """Access paths shared by every user-valued field (assignee, reporter, lead...)."""
    paths = [
        path(f"{prefix}.displayName", f"{label} display name", frequency="high"),
        path(f"{prefix}.emailAddress", f"{label} email address", frequency="high"),
        path(f"{prefix}.active", f"{label} active status", "boolean"),
        path(f"{prefix}.name", f"{label} username"),
        path(f"{prefix}.key", f"{label} user key"),
        path(f"{prefix}.accountId", f"{label} account ID"),
        path(f"{prefix}.self", f"{label} REST API URL", frequency="low"),
        path(f"{prefix}.timeZone", f"{label} timezone", frequency="low"),
    ]
    if avatars:
        paths.extend(
            path(f"{prefix}.avatarUrls.{size}", f"{label} avatar URL ({size})", frequency="low")
            for size in ("48x48", "32x32", "24x24", "16x16")
        )
    return paths
