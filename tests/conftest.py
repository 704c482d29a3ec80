"""Pytest fixtures for envscope tests."""

import pytest

from envscope.inspection.providers import StaticDataProvider


class RecordingSink:
    """Sink that keeps every call for assertions."""

    def __init__(self) -> None:
        self.events: list[tuple[str, str]] = []

    def info(self, line: str) -> None:
        self.events.append(("info", line))

    def start_group(self, title: str) -> None:
        self.events.append(("start", title))

    def end_group(self) -> None:
        self.events.append(("end", ""))

    @property
    def titles(self) -> list[str]:
        """Section titles in emission order."""
        return [text for kind, text in self.events if kind == "start"]

    @property
    def lines(self) -> list[str]:
        """All info lines in emission order."""
        return [text for kind, text in self.events if kind == "info"]

    def section(self, title: str) -> list[str]:
        """Info lines inside the section called *title*."""
        lines: list[str] = []
        inside = False
        for kind, text in self.events:
            if kind == "start":
                inside = text == title
            elif kind == "end":
                if inside:
                    return lines
            elif inside:
                lines.append(text)
        raise KeyError(title)


@pytest.fixture
def sink() -> RecordingSink:
    """Create an empty recording sink."""
    return RecordingSink()


@pytest.fixture
def sample_env() -> dict[str, str]:
    """A small CI-like environment."""
    return {
        "HOME": "/root",
        "GITHUB_SHA": "abc123",
        "GITHUB_ACTOR": "bob",
        "PATH": "/bin",
    }


@pytest.fixture
def provider(sample_env: dict[str, str]) -> StaticDataProvider:
    """Create a static provider around the sample environment."""
    return StaticDataProvider(env=dict(sample_env))
