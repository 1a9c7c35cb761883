"""Projection strings: building them from field lists and applying them to documents."""

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import Any

from src.registry.core.constants import SelectType

ID_FIELD = "_id"


@dataclass(frozen=True)
class SelectMeta:
    """A group of fields to include (``select``) or exclude (``deselect``)."""

    type: SelectType
    fields: tuple[str, ...]


def get_select_string(*metas: SelectMeta) -> str:
    """Render one or more metas into a projection string.

    All metas must share the mode of the first one; mixing modes is not
    detected and produces a meaningless projection.

    >>> get_select_string(SelectMeta(SelectType.DESELECT, ("a", "b")))
    '-a -b'
    """
    if not metas:
        return ""
    fields = [name for meta in metas for name in meta.fields]
    if metas[0].type == SelectType.SELECT:
        return " ".join(fields)
    return " ".join(f"-{name}" for name in fields)


@dataclass(frozen=True)
class Projection:
    """Parsed projection string, applied to outbound documents."""

    include: frozenset[str] = field(default_factory=frozenset)
    exclude: frozenset[str] = field(default_factory=frozenset)

    def apply(self, document: Mapping[str, Any]) -> dict[str, Any]:
        if self.include:
            keep = self.include | ({ID_FIELD} - self.exclude)
            return {k: v for k, v in document.items() if k in keep}
        return {k: v for k, v in document.items() if k not in self.exclude}


def parse_select_string(select: str | None) -> Projection:
    """Parse ``"a b"`` / ``"-a -b"`` into a :class:`Projection`.

    An empty or missing string projects nothing away. ``-_id`` is the only
    exclusion honoured alongside inclusions.
    """
    include: set[str] = set()
    exclude: set[str] = set()
    for token in (select or "").split():
        if token.startswith("-"):
            if len(token) > 1:
                exclude.add(token[1:])
        else:
            include.add(token)
    if include:
        exclude &= {ID_FIELD}
    return Projection(include=frozenset(include), exclude=frozenset(exclude))


def get_clean_object(document: Mapping[str, Any], *metas: SelectMeta) -> dict[str, Any]:
    """Copy ``document`` without any field named by a deselect meta."""
    removed = {
        name
        for meta in metas
        if meta.type == SelectType.DESELECT
        for name in meta.fields
    }
    return {k: v for k, v in document.items() if k not in removed}


class SelectMetas:
    DEFAULT = SelectMeta(
        type=SelectType.DESELECT,
        fields=("createdBy", "createdAt", "updatedBy", "updatedAt"),
    )
    USERS = SelectMeta(type=SelectType.DESELECT, fields=("password",))
