"""Plain-text report rendering."""

from __future__ import annotations

from pathlib import Path

import pytest

from culvert_sizer import FieldCard, ReportWriter, StreamMeasurement
from culvert_sizer.writer import PROFESSIONAL_DESIGN_NOTE

from .sample_data import build_sample_card


def test_report_contents(tmp_path: Path) -> None:
    card: FieldCard = build_sample_card()
    card.calculate()

    report_path: Path = ReportWriter(card).write(tmp_path / "reports" / "cr-101.md")
    text: str = report_path.read_text(encoding="utf-8")
    lines: list[str] = text.splitlines()

    assert report_path.suffix == ".txt"
    assert lines[0] == "Culvert Sizing Results"
    assert "Stream/Culvert ID: CR-101" in lines
    assert "GPS: 49.25010, -123.10020" in lines
    assert "TRANSPORTABILITY ASSESSMENT:" in lines
    assert "- Transport Index: 6.00" in lines
    assert "CLIMATE PROJECTION:" in lines
    assert "- Scenario: Long-term / 2080s (+20%)" in lines
    assert "- Recommended Culvert Size: 1000 mm (1.00 m)" in lines
    assert "- Large culvert (1000mm)" in lines
    assert PROFESSIONAL_DESIGN_NOTE not in text
    assert "- inlet.jpg" in lines


def test_report_flags_professional_design() -> None:
    card = FieldCard(stream_id="WIDE-1", measurement=StreamMeasurement.of([5.5], 0.5, [0.2]))
    card.calculate()

    text: str = ReportWriter(card).render()

    assert "- California Method Size: Professional design (Q100)" in text
    assert PROFESSIONAL_DESIGN_NOTE in text
    assert "CLIMATE PROJECTION" not in text
    assert "TRANSPORTABILITY ASSESSMENT" not in text


def test_unsized_card_cannot_be_reported(tmp_path: Path) -> None:
    with pytest.raises(ValueError, match="has not been sized"):
        ReportWriter(build_sample_card()).write(tmp_path / "report.txt")


def test_overwrite_guard(tmp_path: Path) -> None:
    card: FieldCard = build_sample_card()
    card.calculate()
    writer = ReportWriter(card)
    writer.write(tmp_path / "report.txt")

    with pytest.raises(FileExistsError):
        writer.write(tmp_path / "report.txt", overwrite=False)
