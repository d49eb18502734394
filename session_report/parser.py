from __future__ import annotations

from .models import RECORD_FIELDS, RecordKind, SessionRecord, UserRecord

Record = UserRecord | SessionRecord

FIELD_SEPARATOR = ","

_RECORD_TYPES: dict[RecordKind, type] = {
    RecordKind.USER: UserRecord,
    RecordKind.SESSION: SessionRecord,
}


def split_line(line: str) -> list[str]:
    return line.split(FIELD_SEPARATOR)


def record_kind(tokens: list[str]) -> RecordKind | None:
    """Return the kind named by the leading type tag, or None for unknown tags."""
    if not tokens:
        return None
    try:
        return RecordKind(tokens[0])
    except ValueError:
        return None


def fields_from_tokens(kind: RecordKind, tokens: list[str]) -> dict[str, str | None]:
    # Field i takes token i + 1; the type tag is token 0.
    values = tokens[1:]
    return {
        name: values[index] if index < len(values) else None
        for index, name in enumerate(RECORD_FIELDS[kind])
    }


def parse_record(kind: RecordKind, line: str) -> Record:
    """Build a typed record from one raw line.

    Tokens are assigned positionally with no trimming or coercion. Short lines
    leave their trailing fields as None, extra tokens are ignored.
    """
    fields = fields_from_tokens(kind, split_line(line))
    return _RECORD_TYPES[kind](**fields)
