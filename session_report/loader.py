from __future__ import annotations

import logging
from collections.abc import Iterable, Iterator
from pathlib import Path

from .models import RecordKind, SessionRecord, UserRecord
from .parser import Record, parse_record, record_kind, split_line

logger = logging.getLogger(__name__)


def iter_records(lines: Iterable[str]) -> Iterator[tuple[RecordKind, Record]]:
    """Yield (kind, record) for every tagged line, preserving input order."""
    skipped = 0
    for raw_line in lines:
        line = raw_line.rstrip("\r\n")
        kind = record_kind(split_line(line))
        if kind is None:
            skipped += 1
            continue
        yield kind, parse_record(kind, line)

    if skipped:
        logger.debug("Skipped %d untagged or unknown lines", skipped)


def load_records(lines: Iterable[str]) -> tuple[list[UserRecord], list[SessionRecord]]:
    users: list[UserRecord] = []
    sessions: list[SessionRecord] = []

    for kind, record in iter_records(lines):
        if kind is RecordKind.USER:
            users.append(record)
        else:
            sessions.append(record)

    return users, sessions


def read_file(path: str | Path) -> tuple[list[UserRecord], list[SessionRecord]]:
    with Path(path).open("r", encoding="utf-8") as handle:
        users, sessions = load_records(handle)

    logger.debug("Loaded %d users and %d sessions from %s", len(users), len(sessions), path)
    return users, sessions
