"""Unit tests for the ``folio`` CLI commands."""

from __future__ import annotations

import typing as typ
from textwrap import dedent

import msgspec.json as msgspec_json
import pytest

from folio_view import cli
from folio_view.events import EventScriptError

if typ.TYPE_CHECKING:
    from pathlib import Path


def test_snapshot_prints_json(
    sample_config_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cli.snapshot(
        config=sample_config_path,
        width=390,
        scroll=1550,
        anchor=["home=0", "about=800", "projects=1600", "contact=2400"],
        category="mobile",
    )
    payload = msgspec_json.decode(capsys.readouterr().out)
    assert payload["active_section"] == "projects"
    assert payload["navigation"]["mode"] == "overlay_closed"
    assert payload["catalog"]["visible_ids"] == [
        "weather-app",
        "habit-tracker",
        "expense-split",
    ]
    assert payload["carousel"]["is_open"] is False


def test_snapshot_with_partial_anchors_reports_no_section(
    sample_config_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    cli.snapshot(
        config=sample_config_path,
        width=390,
        scroll=1550,
        anchor=["home=0", "projects=1600"],
    )
    payload = msgspec_json.decode(capsys.readouterr().out)
    assert payload["active_section"] is None
    assert payload["navigation"]["mode"] == "overlay_closed"


def test_snapshot_rejects_bad_anchor(sample_config_path: Path) -> None:
    with pytest.raises(EventScriptError, match="section=offset"):
        cli.snapshot(config=sample_config_path, anchor=["home"])


def test_replay_emits_one_line_per_event(
    tmp_path: Path, sample_config_path: Path, capsys: pytest.CaptureFixture[str]
) -> None:
    script = tmp_path / "events.yaml"
    script.write_text(
        dedent(
            """
            - {type: resize, width: 1280, height: 800}
            - {type: select, item: shop-front}
            - {type: previous}
            - {type: key, key: Escape}
            """
        ).strip()
        + "\n",
        encoding="utf-8",
    )
    cli.replay(script, config=sample_config_path, changes_only=True)
    lines = [msgspec_json.decode(line) for line in capsys.readouterr().out.splitlines()]
    assert [line["event"] for line in lines] == [
        "Resize",
        "SelectItem",
        "CarouselPrevious",
        "KeyDown",
    ]
    assert lines[1]["changed"] == ["carousel", "chrome"]
    assert lines[2]["changed"] == ["carousel"]
    assert "snapshot" not in lines[0]


def test_replay_reports_malformed_events(
    tmp_path: Path, sample_config_path: Path
) -> None:
    script = tmp_path / "events.yaml"
    script.write_text("- {type: scroll}\n", encoding="utf-8")
    with pytest.raises(EventScriptError, match="scroll"):
        cli.replay(script, config=sample_config_path)


def test_snapshot_options_are_documented() -> None:
    hints = typ.get_type_hints(cli.snapshot, include_extras=True)
    assert "--filter" in hints["category"].__metadata__[0].name
    for option in ("category", "show_all", "verbose"):
        assert hints[option].__metadata__[0].help, f"{option} lacks help text"
