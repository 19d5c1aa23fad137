from __future__ import annotations

import json

from click.testing import CliRunner

from book_builder.config.settings import PROFILES, EditorProfile
from main import main


def test_list_formats() -> None:
    result = CliRunner().invoke(main, ["--list-formats"])

    assert result.exit_code == 0
    assert "digestSpread" in result.output
    assert "Comic Book" in result.output


def test_resolve_spread_with_guides() -> None:
    result = CliRunner().invoke(main, ["--format", "digestSpread", "--pages", "300", "--binding", "hardcover", "--guides"])

    assert result.exit_code == 0, result.output
    assert 'Spine: 0.938"' in result.output
    assert 'Gutter: 0.500"' in result.output
    assert "spine" in result.output.splitlines()[-1]


def test_guides_follow_profile_toggles(monkeypatch) -> None:
    monkeypatch.delenv("BOOK_BUILDER_PROFILE", raising=False)
    monkeypatch.setitem(PROFILES, "screen", EditorProfile(show_bleed=False, show_safety=False))

    result = CliRunner().invoke(main, ["--format", "usTrade", "--guides"])

    assert result.exit_code == 0, result.output
    labels = [line.split()[0] for line in result.output.splitlines() if line.startswith("  ")]
    assert labels == ["page"]


def test_viewport_prints_fit_scale(monkeypatch) -> None:
    monkeypatch.delenv("BOOK_BUILDER_PROFILE", raising=False)
    monkeypatch.setitem(PROFILES, "screen", EditorProfile(fit_margin=0.5))

    result = CliRunner().invoke(main, ["--format", "usTrade", "--pages", "120", "--viewport", "900x666"])

    assert result.exit_code == 0, result.output
    assert f"Fit scale for 900x666: {666 / (9.25 * 72) * 0.5:.4f}" in result.output


def test_viewport_must_be_w_by_h() -> None:
    result = CliRunner().invoke(main, ["--format", "usTrade", "--viewport", "900"])

    assert result.exit_code == 2
    assert "WxH" in result.output


def test_unknown_format_exits_with_error() -> None:
    result = CliRunner().invoke(main, ["--format", "doesNotExist"])

    assert result.exit_code == 1
    assert "doesNotExist" in result.output


def test_spread_toggle_without_companion_warns() -> None:
    result = CliRunner().invoke(main, ["--format", "royal", "--spread"])

    assert result.exit_code == 0
    assert "keeping royal" in result.output


def test_custom_dimensions_are_bounded() -> None:
    result = CliRunner().invoke(main, ["--custom-width", "20", "--custom-height", "8"])

    assert result.exit_code == 1
    assert "width" in result.output


def test_export_and_validate(tmp_path) -> None:
    out = tmp_path / "template.json"
    runner = CliRunner()

    result = runner.invoke(main, ["--custom-width", "5", "--custom-height", "8", "--pages", "120", "--name", "Draft", "--out", str(out)])
    assert result.exit_code == 0, result.output

    document = json.loads(out.read_text(encoding="utf-8"))
    assert document["name"] == "Draft"
    assert document["format"]["withBleed"] == {"width": 5.25, "height": 8.25}
    assert document["elements"] == []

    result = runner.invoke(main, ["--validate-path", str(out)])
    assert result.exit_code == 0
    assert "Draft" in result.output


def test_validate_rejects_malformed(tmp_path) -> None:
    bad = tmp_path / "bad.json"
    bad.write_text('{"id": "t", "name": "x"}', encoding="utf-8")

    result = CliRunner().invoke(main, ["--validate-path", str(bad)])

    assert result.exit_code == 1
    assert "format" in result.output
