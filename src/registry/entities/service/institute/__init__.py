"""Institute entity package: domain models, table and repository."""

from .entity import Institute, InstituteFields, InstituteUpdate
from .repository import InstituteRepository
from .table import InstituteTable

__all__ = [
    "Institute",
    "InstituteFields",
    "InstituteRepository",
    "InstituteTable",
    "InstituteUpdate",
]
