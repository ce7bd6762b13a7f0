from .database_client import DatabaseClient
from .exceptions import ChangesetNotCreated
from .model import (
    ChangesetContent,
    ChangesetCreateRequest,
    ChangesetOsm,
    ChangesetTag,
)

__all__ = [
    "DatabaseClient",
    "ChangesetNotCreated",
    "ChangesetContent",
    "ChangesetCreateRequest",
    "ChangesetOsm",
    "ChangesetTag",
]
