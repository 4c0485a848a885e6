from __future__ import annotations

from collections.abc import Callable
from pathlib import Path

import pytest

from story_blocks.authoring import AuthoringSession
from story_blocks.config import StoryConfig

_DATA_DIR = Path(__file__).resolve().parents[1] / "data"


class ManualTimer:
    """Timer double that only fires when the test says so."""

    def __init__(self, interval: float, fire: Callable[[], None]) -> None:
        self.interval = interval
        self._fire = fire
        self.started = False
        self.cancelled = False

    def start(self) -> None:
        self.started = True

    def cancel(self) -> None:
        self.cancelled = True

    def fire(self) -> None:
        self._fire()


class ManualTimerFactory:
    def __init__(self) -> None:
        self.timers: list[ManualTimer] = []

    def __call__(self, interval: float, fire: Callable[[], None]) -> ManualTimer:
        timer = ManualTimer(interval, fire)
        self.timers.append(timer)
        return timer

    @property
    def latest(self) -> ManualTimer:
        return self.timers[-1]

    def live(self) -> list[ManualTimer]:
        return [timer for timer in self.timers if timer.started and not timer.cancelled]


@pytest.fixture
def timer_factory() -> ManualTimerFactory:
    return ManualTimerFactory()


@pytest.fixture
def story_config() -> StoryConfig:
    return StoryConfig(debounce_seconds=0.3, max_image_bytes=5 * 1024 * 1024, max_chars=20_000)


@pytest.fixture
def updates() -> list[str]:
    return []


@pytest.fixture
def session_factory(
    timer_factory: ManualTimerFactory,
    story_config: StoryConfig,
    updates: list[str],
) -> Callable[..., AuthoringSession]:
    created: list[AuthoringSession] = []

    def _factory(initial: str = "", *, config: StoryConfig | None = None) -> AuthoringSession:
        session = AuthoringSession(
            updates.append,
            initial,
            config=config or story_config,
            timer_factory=timer_factory,
        )
        created.append(session)
        return session

    yield _factory
    for session in created:
        session.close()


@pytest.fixture
def sample_story() -> str:
    return (_DATA_DIR / "sample_story.md").read_text(encoding="utf-8")
