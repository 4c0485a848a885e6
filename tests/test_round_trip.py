from __future__ import annotations

from pathlib import Path

import pytest

from story_blocks.parser import parse
from story_blocks.renderers import render_markdown

_SAMPLES_DIR = Path(__file__).resolve().parents[1] / "data"


def _pitch_source() -> str:
    return "\n".join(
        [
            "# Solar Lantern",
            "",
            "##### Deep heading clamps",
            "",
            "Our **lantern *charges* fast** and costs `$20`.",
            "   indented paragraph stays a paragraph",
            "- first",
            "* second with [link](https://x.io)",
            "",
            "![](https://img/a.png)",
            "---",
            "Unterminated **bold and `code",
        ]
    )


def _load_markdown_samples() -> list[tuple[str, str]]:
    samples: list[tuple[str, str]] = [("inline_pitch", _pitch_source())]
    for path in sorted(_SAMPLES_DIR.glob("*.md")):
        samples.append((path.stem, path.read_text(encoding="utf-8")))
    return samples


_ROUND_TRIP_SAMPLES = _load_markdown_samples()
_ROUND_TRIP_SAMPLE_IDS = [sample_id for sample_id, _ in _ROUND_TRIP_SAMPLES]


@pytest.mark.parametrize(("sample_id", "source"), _ROUND_TRIP_SAMPLES, ids=_ROUND_TRIP_SAMPLE_IDS)
def test_markdown_round_trip(sample_id: str, source: str):
    blocks = parse(source)

    rebuilt = render_markdown(blocks)

    assert parse(rebuilt) == blocks, sample_id
    assert render_markdown(parse(rebuilt)) == rebuilt
