"""UUIDv7 generation for focusstudy records."""

from __future__ import annotations

from uuid import UUID

import uuid_utils


def generate_uuid() -> UUID:
    """Generate a time-ordered UUIDv7.

    Participant and session records are keyed by UUIDv7 so that identifiers
    sort in enrollment order.

    Returns
    -------
    UUID
        A newly generated UUIDv7.

    Examples
    --------
    >>> uuid1 = generate_uuid()
    >>> uuid2 = generate_uuid()
    >>> uuid1 < uuid2
    True
    """
    # convert uuid_utils.UUID to standard UUID for pydantic
    return UUID(str(uuid_utils.uuid7()))


def is_valid_uuid7(uuid: UUID) -> bool:
    """Check whether a UUID has version 7.

    Parameters
    ----------
    uuid : UUID
        The UUID to check.

    Returns
    -------
    bool
        True if the UUID is version 7.
    """
    return uuid.version == 7
