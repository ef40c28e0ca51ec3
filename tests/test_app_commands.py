from __future__ import annotations

import json

import app


def _run(service, argv: list[str]) -> int:
    args = app.build_parser().parse_args(argv)
    return app.run_command(service, args, args.handler)


def test_add_then_show_with_similar(tmp_path, capsys) -> None:
    service = app.build_service(str(tmp_path / "cli.db"))

    assert _run(service, ["add", "--title", "Water outage", "--description", "Building A tonight"]) == 0
    assert _run(service, ["add", "--title", "Outage update", "--description", "Water is back"]) == 0
    capsys.readouterr()

    assert _run(service, ["show", "1", "--format", "json"]) == app.EXIT_OK
    payload = json.loads(capsys.readouterr().out)

    assert payload["title"] == "Water outage"
    assert [item["id"] for item in payload["similarAnnouncements"]] == [2]


def test_show_missing_returns_not_found(tmp_path, capsys) -> None:
    service = app.build_service(str(tmp_path / "cli.db"))

    assert _run(service, ["show", "5"]) == app.EXIT_NOT_FOUND
    assert "was not found" in capsys.readouterr().err


def test_invalid_input_returns_invalid_exit_code(tmp_path, capsys) -> None:
    service = app.build_service(str(tmp_path / "cli.db"))

    assert _run(service, ["add", "--title", "ab", "--description", "long enough"]) == app.EXIT_INVALID
    assert _run(service, ["list", "--page", "0"]) == app.EXIT_INVALID
    assert "error:" in capsys.readouterr().err


def test_update_delete_and_list(tmp_path, capsys) -> None:
    service = app.build_service(str(tmp_path / "cli.db"))
    _run(service, ["add", "--title", "Draft title", "--description", "Draft body"])

    assert _run(service, ["update", "1", "--title", "Final title", "--description", "Final body"]) == 0
    assert _run(service, ["list", "--format", "json"]) == 0
    out = capsys.readouterr().out
    listing = json.loads(out[out.index("[") :])
    assert listing[0]["title"] == "Final title"

    assert _run(service, ["delete", "1"]) == 0
    assert _run(service, ["delete", "1"]) == app.EXIT_NOT_FOUND


def test_seed_command(tmp_path, capsys) -> None:
    service = app.build_service(str(tmp_path / "cli.db"))
    seed_path = tmp_path / "seed.json"
    seed_path.write_text(
        json.dumps(
            [
                {"title": "Older news", "description": "Shared word", "added_date": "2024-01-01T00:00:00Z"},
                {"title": "Newer news", "description": "Other text", "added_date": "2024-02-01T00:00:00Z"},
            ]
        ),
        encoding="utf-8",
    )

    assert _run(service, ["seed", str(seed_path)]) == 0
    assert "Imported 2 announcements" in capsys.readouterr().out
    assert len(service.list_announcements()) == 2


def test_seed_command_reports_unreadable_file(tmp_path, capsys) -> None:
    service = app.build_service(str(tmp_path / "cli.db"))

    assert _run(service, ["seed", str(tmp_path / "missing.json")]) == app.EXIT_INVALID
    assert "cannot read seed file" in capsys.readouterr().err
