"""
AnnouncementBoard - plain announcement list with caller-supplied ids.

The simplest variant of the record lists: no event queue view, just
add/remove/find/list/count over a LinkedArena keyed by integer id.
"""

from __future__ import annotations

from collections.abc import Iterator
import logging

from bulletin.boards.models import Announcement
from bulletin.core.exceptions import DuplicateIdError, RecordNotFoundError
from bulletin.core.linked import LinkedArena

logger = logging.getLogger(__name__)


class AnnouncementBoard:
    """
    Ordered list of announcements.

    Example:
        >>> board = AnnouncementBoard()
        >>> board.add("Admin", 7, "Library closed on Friday", "09:00").announcement_id
        7
        >>> board.count()
        1
    """

    def __init__(self) -> None:
        self._items: LinkedArena[Announcement] = LinkedArena()
        self._index: dict[int, int] = {}

    def add(self, author: str, announcement_id: int, content: str, posted_at: str) -> Announcement:
        """
        Append an announcement.

        Raises:
            DuplicateIdError: If announcement_id is already on the board
        """
        if announcement_id in self._index:
            logger.warning(f"Rejected announcement: id {announcement_id} is already live")
            raise DuplicateIdError(announcement_id)

        item = Announcement(
            announcement_id=announcement_id, author=author, content=content, posted_at=posted_at
        )
        self._index[announcement_id] = self._items.append(item)
        logger.debug(f"Added announcement {announcement_id} by {author}")
        return item.model_copy()

    def remove(self, announcement_id: int) -> Announcement:
        """
        Remove an announcement.

        Raises:
            RecordNotFoundError: If no announcement has this id
        """
        handle = self._index.pop(announcement_id, None)
        if handle is None:
            raise RecordNotFoundError(announcement_id)
        item = self._items.unlink(handle)
        logger.debug(f"Removed announcement {announcement_id}")
        return item

    def find(self, announcement_id: int) -> Announcement:
        """
        Find an announcement by id.

        Raises:
            RecordNotFoundError: If no announcement has this id
        """
        handle = self._index.get(announcement_id)
        if handle is None:
            raise RecordNotFoundError(announcement_id)
        return self._items.get(handle).model_copy()

    def list_all(self) -> Iterator[Announcement]:
        for item in self._items.values():
            yield item.model_copy()

    def count(self) -> int:
        return len(self._items)

    def __len__(self) -> int:
        return len(self._items)

    def __contains__(self, announcement_id: object) -> bool:
        return announcement_id in self._index
