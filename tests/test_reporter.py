from session_report.models import Report, UserStats
from session_report.reporter import Reporter, render_report


def _report(name: str = "Leida Cira") -> Report:
    stats = UserStats(
        sessions_count=1,
        total_time="87 min.",
        longest_session="87 min.",
        browsers="SAFARI 29",
        used_ie=False,
        always_used_chrome=False,
        dates=("2016-10-23",),
    )
    return Report(
        total_users=1,
        unique_browsers_count=1,
        total_sessions=1,
        all_browsers="SAFARI 29",
        users_stats={name: stats},
    )


def test_render_compact_json_with_key_order() -> None:
    content = render_report(_report())

    assert content == (
        '{"totalUsers":1,"uniqueBrowsersCount":1,"totalSessions":1,"allBrowsers":"SAFARI 29",'
        '"usersStats":{"Leida Cira":{"sessionsCount":1,"totalTime":"87 min.","longestSession":"87 min.",'
        '"browsers":"SAFARI 29","usedIE":false,"alwaysUsedChrome":false,"dates":["2016-10-23"]}}}\n'
    )


def test_render_keeps_non_ascii_names() -> None:
    assert '"Zoë Ñuñez"' in render_report(_report("Zoë Ñuñez"))


def test_write_report_overwrites(tmp_path) -> None:
    output = tmp_path / "result.json"
    output.write_text("stale content that is longer than the report itself" * 10, encoding="utf-8")

    content = Reporter().write_report(_report(), output)

    assert output.read_text(encoding="utf-8") == content
    assert content.endswith("}\n")
