"""Entry point for the story editor NiceGUI demo."""

from __future__ import annotations

import logging
import sys
from pathlib import Path

from nicegui import app, ui

# Allow running as ``python apps/demo/main.py`` by ensuring the repo root is on sys.path.
if __package__ in {None, ""}:  # pragma: no cover - runtime convenience
    repo_root = Path(__file__).resolve().parents[2]
    if str(repo_root) not in sys.path:
        sys.path.insert(0, str(repo_root))
    from apps.demo import pages  # noqa: F401
    from apps.demo.state import UPLOAD_DIR, UPLOAD_ROUTE
else:  # pragma: no cover - normal package import
    from . import pages  # noqa: F401
    from .state import UPLOAD_DIR, UPLOAD_ROUTE


def main() -> None:  # pragma: no cover - UI wiring
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    UPLOAD_DIR.mkdir(parents=True, exist_ok=True)
    app.add_static_files(UPLOAD_ROUTE, str(UPLOAD_DIR))
    ui.run(title="Story Blocks Demo")


if __name__ in {"__main__", "__mp_main__"}:  # pragma: no cover - CLI entry
    main()
