"""Query-parameter to database-filter remapping."""

from collections.abc import MutableMapping
from dataclasses import dataclass
from typing import Any

from src.registry.core.constants import RecordStatus

STATUS_QUERY_KEY = "status"
STATUS_DB_KEY = "recStatus"


@dataclass(frozen=True)
class FilterRule:
    """Moves the value of a client-facing query key onto a document field."""

    query_key: str
    db_key: str


def update_filters(
    filters: MutableMapping[str, Any], rules: list[FilterRule]
) -> MutableMapping[str, Any]:
    """Rewrite ``filters`` in place into document-field predicates.

    ``status=all`` drops the status predicate entirely, any other ``status``
    value becomes a ``recStatus`` predicate, and a query without ``status``
    only sees active records. Each rule then renames its query key to the
    document field it targets.

    The same mapping is returned for convenience.
    """
    if STATUS_QUERY_KEY in filters:
        status = filters.pop(STATUS_QUERY_KEY)
        if status != RecordStatus.ALL.value:
            filters[STATUS_DB_KEY] = status
    else:
        filters[STATUS_DB_KEY] = RecordStatus.ACTIVE.value

    for rule in rules:
        if rule.query_key in filters:
            filters[rule.db_key] = filters.pop(rule.query_key)

    return filters


class FiltersMeta:
    USERS = [FilterRule(query_key="type", db_key="userType")]
    INSTITUTES = [FilterRule(query_key="admin", db_key="adminId")]
