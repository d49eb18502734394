from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum


class RecordKind(Enum):
    USER = "user"
    SESSION = "session"


USER_FIELDS = ("id", "first_name", "last_name", "age")
SESSION_FIELDS = ("user_id", "session_id", "browser", "time", "date")

RECORD_FIELDS: dict[RecordKind, tuple[str, ...]] = {
    RecordKind.USER: USER_FIELDS,
    RecordKind.SESSION: SESSION_FIELDS,
}


@dataclass(frozen=True, slots=True)
class UserRecord:
    id: str | None = None
    first_name: str | None = None
    last_name: str | None = None
    age: str | None = None

    @property
    def display_key(self) -> str:
        return f"{self.first_name or ''} {self.last_name or ''}"


@dataclass(frozen=True, slots=True)
class SessionRecord:
    user_id: str | None = None
    session_id: str | None = None
    browser: str | None = None
    time: str | None = None
    date: str | None = None


@dataclass(frozen=True, slots=True)
class UserGroup:
    user: UserRecord
    sessions: tuple[SessionRecord, ...] = ()


@dataclass(frozen=True, slots=True)
class UserStats:
    sessions_count: int
    total_time: str
    longest_session: str
    browsers: str
    used_ie: bool
    always_used_chrome: bool
    dates: tuple[str, ...]

    def to_dict(self) -> dict:
        return {
            "sessionsCount": self.sessions_count,
            "totalTime": self.total_time,
            "longestSession": self.longest_session,
            "browsers": self.browsers,
            "usedIE": self.used_ie,
            "alwaysUsedChrome": self.always_used_chrome,
            "dates": list(self.dates),
        }


@dataclass(frozen=True, slots=True)
class Report:
    total_users: int
    unique_browsers_count: int
    total_sessions: int
    all_browsers: str
    users_stats: dict[str, UserStats] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "totalUsers": self.total_users,
            "uniqueBrowsersCount": self.unique_browsers_count,
            "totalSessions": self.total_sessions,
            "allBrowsers": self.all_browsers,
            "usersStats": {key: stats.to_dict() for key, stats in self.users_stats.items()},
        }
