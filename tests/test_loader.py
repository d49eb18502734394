from session_report.loader import load_records, read_file
from session_report.models import SessionRecord, UserRecord


def test_lines_dispatched_by_tag_in_order() -> None:
    lines = [
        "user,0,Leida,Cira,0\n",
        "session,0,0,Safari 29,87,2016-10-23\n",
        "user,1,Palmer,Katrina,65\n",
        "session,1,0,Safari 17,12,2016-10-21\n",
        "session,0,1,Firefox 12,118,2017-02-27\n",
    ]

    users, sessions = load_records(lines)

    assert [user.id for user in users] == ["0", "1"]
    assert [(s.user_id, s.session_id) for s in sessions] == [("0", "0"), ("1", "0"), ("0", "1")]


def test_unknown_tags_and_blank_lines_skipped() -> None:
    lines = ["header,a,b\n", "\n", "USER,9,X,Y,1\n", "user,1,Ann,Lee,30\n"]

    users, sessions = load_records(lines)

    assert users == [UserRecord(id="1", first_name="Ann", last_name="Lee", age="30")]
    assert sessions == []


def test_line_terminators_removed_from_last_field() -> None:
    _, sessions = load_records(["session,0,0,Safari 29,87,2016-10-23\r\n"])

    assert sessions == [
        SessionRecord(user_id="0", session_id="0", browser="Safari 29", time="87", date="2016-10-23")
    ]


def test_read_file(tmp_path) -> None:
    source = tmp_path / "data.txt"
    source.write_text("user,0,Leida,Cira,0\nsession,0,0,Safari 29,87,2016-10-23\n", encoding="utf-8")

    users, sessions = read_file(source)

    assert len(users) == 1
    assert len(sessions) == 1
    assert users[0].age == "0"
