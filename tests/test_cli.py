"""CLI-level tests."""

from __future__ import annotations

from pathlib import Path

import pytest

from culvert_sizer import FieldCard, FieldCardStore
from culvert_sizer import cli

from .sample_data import CONFIG_JSON


def test_size_from_config(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    config_path: Path = tmp_path / "card.json"
    config_path.write_text(CONFIG_JSON, encoding="utf-8")
    store_path: Path = tmp_path / "field_cards.json"
    report_path: Path = tmp_path / "report.txt"

    exit_code: int = cli.main(
        [
            "size",
            "--config",
            str(config_path),
            "--report",
            str(report_path),
            "--save",
            "--store",
            str(store_path),
        ]
    )

    assert exit_code == 0
    output: str = capsys.readouterr().out
    assert "CR-101: recommended culvert 1000 mm" in output
    assert report_path.exists()
    cards: list[FieldCard] = FieldCardStore(store_path).all()
    assert [card.stream_id for card in cards] == ["CR-101"]
    assert cards[0].result is not None


def test_measure_command(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code: int = cli.main(
        [
            "measure",
            "--stream-id",
            "WIDE-1",
            "--top-width",
            "5.5",
            "--bottom-width",
            "0.5",
            "--depth",
            "0.2",
        ]
    )

    assert exit_code == 0
    assert "WIDE-1: recommended culvert 1514 mm (professional design required)" in capsys.readouterr().out


def test_measure_rejects_invalid_readings() -> None:
    with pytest.raises(SystemExit, match="Invalid input: .*Bottom width"):
        cli.main(["measure", "--top-width", "1.0", "--bottom-width", "-1", "--depth", "0.2"])


def test_measure_with_climate_factor(capsys: pytest.CaptureFixture[str]) -> None:
    exit_code: int = cli.main(
        [
            "measure",
            "--top-width",
            "1.0",
            "--bottom-width",
            "0.5",
            "--depth",
            "0.2",
            "--climate-factor",
            "2.0",
        ]
    )

    assert exit_code == 0
    assert "CLI: recommended culvert 1200 mm" in capsys.readouterr().out


def test_history(tmp_path: Path, capsys: pytest.CaptureFixture[str]) -> None:
    store_path: Path = tmp_path / "field_cards.json"
    assert cli.main(["history", "--store", str(store_path)]) == 0
    assert "No field cards saved" in capsys.readouterr().out

    cli.main(
        [
            "measure",
            "--stream-id",
            "S-9",
            "--top-width",
            "1.0",
            "--bottom-width",
            "0.5",
            "--depth",
            "0.2",
            "--save",
            "--store",
            str(store_path),
        ]
    )
    capsys.readouterr()
    assert cli.main(["history", "--store", str(store_path)]) == 0
    assert "S-9" in capsys.readouterr().out


def test_demo(capsys: pytest.CaptureFixture[str]) -> None:
    assert cli.main(["demo"]) == 0
    output: str = capsys.readouterr().out
    assert output.startswith("Culvert Sizing Results")
    assert "Stream/Culvert ID: DEMO-1" in output
