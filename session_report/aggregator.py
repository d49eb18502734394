from __future__ import annotations

import logging
from collections import defaultdict
from collections.abc import Sequence

from .conversions import format_minutes, parse_calendar_date, parse_minutes
from .errors import MissingFieldError
from .models import Report, SessionRecord, UserGroup, UserRecord, UserStats

IE_MARKER = "INTERNET EXPLORER"
CHROME_MARKER = "CHROME"


def normalized_browser(session: SessionRecord) -> str:
    if session.browser is None:
        raise MissingFieldError("browser")
    return session.browser.upper()


def group_sessions(users: Sequence[UserRecord], sessions: Sequence[SessionRecord]) -> list[UserGroup]:
    """Pair every user with its sessions, both kept in input order."""
    by_user: dict[str | None, list[SessionRecord]] = defaultdict(list)
    for session in sessions:
        by_user[session.user_id].append(session)

    return [UserGroup(user=user, sessions=tuple(by_user.get(user.id, ()))) for user in users]


def count_unique_browsers(sessions: Sequence[SessionRecord]) -> int:
    # Raw strings on purpose: "Chrome 6" and "CHROME 6" count twice here.
    return len({session.browser for session in sessions})


def all_browsers(sessions: Sequence[SessionRecord]) -> str:
    return ",".join(sorted({normalized_browser(session) for session in sessions}))


def build_user_stats(group: UserGroup) -> UserStats:
    times = [parse_minutes(session.time) for session in group.sessions]
    browsers = [normalized_browser(session) for session in group.sessions]
    dates = [parse_calendar_date(session.date).isoformat() for session in group.sessions]

    # A user without sessions reports 0 for the longest session and, vacuously,
    # always used Chrome.
    return UserStats(
        sessions_count=len(group.sessions),
        total_time=format_minutes(sum(times)),
        longest_session=format_minutes(max(times, default=0)),
        browsers=", ".join(sorted(browsers)),
        used_ie=any(IE_MARKER in browser for browser in browsers),
        always_used_chrome=all(CHROME_MARKER in browser for browser in browsers),
        dates=tuple(sorted(dates, reverse=True)),
    )


class Aggregator:
    def __init__(self, logger: logging.Logger | None = None) -> None:
        self.logger = logger or logging.getLogger(__name__)

    def collect_user_stats(
        self,
        users: Sequence[UserRecord],
        sessions: Sequence[SessionRecord],
    ) -> list[tuple[str, UserStats]]:
        return [
            (group.user.display_key, build_user_stats(group))
            for group in group_sessions(users, sessions)
        ]

    def merge_user_stats(self, pairs: Sequence[tuple[str, UserStats]]) -> dict[str, UserStats]:
        """Insert-or-replace by display key; the last user with a given name wins."""
        merged: dict[str, UserStats] = {}
        for key, stats in pairs:
            if key in merged:
                self.logger.warning("Duplicate user name %r, keeping the later statistics", key)
            merged[key] = stats
        return merged

    def build_report(self, users: Sequence[UserRecord], sessions: Sequence[SessionRecord]) -> Report:
        pairs = self.collect_user_stats(users, sessions)

        report = Report(
            total_users=len(users),
            unique_browsers_count=count_unique_browsers(sessions),
            total_sessions=len(sessions),
            all_browsers=all_browsers(sessions),
            users_stats=self.merge_user_stats(pairs),
        )
        self.logger.debug(
            "Aggregated %d users, %d sessions, %d distinct browsers",
            report.total_users,
            report.total_sessions,
            report.unique_browsers_count,
        )
        return report
