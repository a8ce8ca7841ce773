"""Test doubles shared across test modules."""

from __future__ import annotations

from text_humanizer.humanizer import validate_text


class FakeHumanizer:
    """Stands in for the provider-backed Humanizer."""

    def __init__(self, output: str = "Sure, here's a friendlier take.", error: Exception | None = None) -> None:
        self.output = output
        self.error = error
        self.calls: list[tuple[str, str]] = []

    def humanize(self, text: str, style: str = "natural") -> str:
        validate_text(text)
        self.calls.append((text, style))
        if self.error is not None:
            raise self.error
        return self.output
