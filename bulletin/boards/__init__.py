"""Simple record lists: announcements by id, users by name."""

from bulletin.boards.announcements import AnnouncementBoard
from bulletin.boards.models import Announcement, User, UserRole
from bulletin.boards.users import UserDirectory

__all__ = [
    "Announcement",
    "AnnouncementBoard",
    "User",
    "UserDirectory",
    "UserRole",
]
