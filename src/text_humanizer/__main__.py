"""CLI para detectar y humanizar texto rápidamente."""

from __future__ import annotations

import logging
import sys

from .config import get_history_path
from .detector import detect_ai_text
from .history import HumanizationHistory, JsonFileStorage
from .humanizer import HumanizeError, Humanizer
from .prompts import DEFAULT_STYLE, STYLES


def _usage() -> None:
    print("Usage:")
    print('  python -m text_humanizer detect "your text"')
    print('  python -m text_humanizer humanize "your text"')
    print('  python -m text_humanizer humanize <style> "your text"')
    print("  python -m text_humanizer history")
    print("  python -m text_humanizer history clear")
    print("\nStyles: " + ", ".join(STYLES))


def _print_detection(text: str) -> None:
    result = detect_ai_text(text)
    print(f"AI: {result.ai_score}% | Human: {result.human_score}%")
    for name, value in result.features.to_dict().items():
        print(f"- {name}: {value:.2f}")


def _history() -> HumanizationHistory:
    return HumanizationHistory(JsonFileStorage(get_history_path()))


def main(argv: list[str] | None = None) -> None:
    args = sys.argv[1:] if argv is None else argv
    if not args:
        _usage()
        raise SystemExit(1)

    command = args[0].lower()

    if command == "detect":
        if len(args) < 2:
            print("Missing text to analyze.")
            raise SystemExit(1)
        _print_detection(args[1])
        return

    if command == "history":
        history = _history()
        if len(args) > 1 and args[1].lower() == "clear":
            history.clear()
            print("History cleared.")
            return
        items = history.load()
        if not items:
            print("No humanization history yet.")
            return
        for item in items:
            preview = item.original_text[:60]
            if len(item.original_text) > 60:
                preview += "..."
            print(f"\n[{item.created_at}] style={item.style}")
            print(f"  {preview}")
        return

    if command == "humanize":
        if len(args) >= 3:
            style, text = args[1], args[2]
        elif len(args) == 2:
            style, text = DEFAULT_STYLE, args[1]
        else:
            print("Missing text to humanize.")
            raise SystemExit(1)

        logging.basicConfig(
            format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
            level=logging.INFO,
        )
        try:
            humanized = Humanizer().humanize(text, style)
        except HumanizeError as err:
            print(f"Error: {err}")
            raise SystemExit(1)

        _history().add(text, humanized, style)

        print("\nHUMANIZED:")
        print("```")
        print(humanized.strip())
        print("```")
        print()
        _print_detection(humanized)
        return

    _usage()
    raise SystemExit(1)


if __name__ == "__main__":
    main()
