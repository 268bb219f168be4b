"""Shaping of bulk publish requests and responses."""
from __future__ import annotations

import logging
import uuid
from typing import Any, Iterable, List, Optional, Sequence

from .models import (
    BulkPublishApiResponse,
    BulkPublishEntry,
    BulkPublishFailedMessage,
    BulkPublishResponse,
)
from .utils import get_content_type

_logger = logging.getLogger(__name__)


def _new_entry_id() -> str:
    return str(uuid.uuid4())


def get_bulk_publish_entries(messages: Iterable[Any]) -> List[BulkPublishEntry]:
    """Turn raw messages or partially filled entries into complete entries.

    Missing entry ids get a random UUID, missing content types are inferred
    from the event and missing metadata becomes an empty dict.
    """

    entries: List[BulkPublishEntry] = []
    for message in messages:
        if isinstance(message, BulkPublishEntry):
            entries.append(
                BulkPublishEntry(
                    event=message.event,
                    entry_id=message.entry_id or _new_entry_id(),
                    content_type=message.content_type or get_content_type(message.event),
                    metadata=message.metadata or {},
                )
            )
        else:
            entries.append(
                BulkPublishEntry(
                    event=message,
                    entry_id=_new_entry_id(),
                    content_type=get_content_type(message),
                    metadata={},
                )
            )
    return entries


def get_bulk_publish_response(
    entries: Sequence[BulkPublishEntry],
    response: Optional[BulkPublishApiResponse] = None,
    error: Optional[Exception] = None,
) -> BulkPublishResponse:
    """Map the runtime's answer back onto the entries that were sent.

    With ``error`` the whole request failed and every entry is reported
    against it. Otherwise only the entries the runtime lists as failed are
    reported.
    """

    if error is not None:
        return BulkPublishResponse(
            failed_messages=[BulkPublishFailedMessage(message=entry, error=error) for entry in entries]
        )
    if response is None:
        raise ValueError("either response or error is required")

    by_id: dict[Optional[str], BulkPublishEntry] = {}
    for entry in entries:
        by_id.setdefault(entry.entry_id, entry)

    failed: List[BulkPublishFailedMessage] = []
    for failed_entry in response.failed_entries:
        entry = by_id.get(failed_entry.entry_id)
        if entry is None:
            _logger.warning("bulk publish response names unknown entry id=%s", failed_entry.entry_id)
            continue
        failed.append(BulkPublishFailedMessage(message=entry, error=Exception(failed_entry.error)))
    return BulkPublishResponse(failed_messages=failed)


__all__ = ["get_bulk_publish_entries", "get_bulk_publish_response"]
