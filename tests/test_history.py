"""Tests for the local humanization history."""

from __future__ import annotations

import json
from datetime import datetime, timedelta, timezone
from pathlib import Path

from text_humanizer.history import (
    HISTORY_KEY,
    MAX_ENTRIES,
    UPDATED_EVENT,
    HumanizationHistory,
    JsonFileStorage,
)

BASE_TIME = datetime(2024, 5, 1, 12, 30, 45, 123456, tzinfo=timezone.utc)


class TestHumanizationHistory:
    def test_add_creates_record(self) -> None:
        history = HumanizationHistory({})

        item = history.add("original", "humanized", "natural", now=BASE_TIME)

        assert item.id == "2024-05-01T12:30:45.123Z"
        assert item.created_at == item.id
        assert history.load() == [item]

    def test_newest_first(self) -> None:
        history = HumanizationHistory({})
        history.add("first", "1", "natural", now=BASE_TIME)
        history.add("second", "2", "emotional", now=BASE_TIME + timedelta(seconds=1))

        items = history.load()

        assert [i.original_text for i in items] == ["second", "first"]

    def test_capped_at_ten(self) -> None:
        history = HumanizationHistory({})
        for i in range(12):
            history.add(f"text {i}", f"out {i}", "natural", now=BASE_TIME + timedelta(seconds=i))

        items = history.load()

        assert len(items) == MAX_ENTRIES
        assert items[0].original_text == "text 11"
        assert items[-1].original_text == "text 2"

    def test_stored_shape(self) -> None:
        storage: dict[str, str] = {}
        HumanizationHistory(storage).add("o", "h", "technical", now=BASE_TIME)

        payload = json.loads(storage[HISTORY_KEY])

        assert payload == [
            {
                "id": "2024-05-01T12:30:45.123Z",
                "original_text": "o",
                "humanized_text": "h",
                "style": "technical",
                "created_at": "2024-05-01T12:30:45.123Z",
            }
        ]

    def test_clear(self) -> None:
        storage: dict[str, str] = {}
        history = HumanizationHistory(storage)
        history.add("o", "h", "natural")

        history.clear()

        assert HISTORY_KEY not in storage
        assert history.load() == []

    def test_corrupt_storage_loads_empty(self) -> None:
        history = HumanizationHistory({HISTORY_KEY: "{not json"})

        assert history.load() == []

    def test_skips_malformed_records(self) -> None:
        storage = {HISTORY_KEY: json.dumps([{"id": "x"}, "junk"])}

        assert HumanizationHistory(storage).load() == []


class TestListeners:
    def test_listeners_notified_on_write(self) -> None:
        history = HumanizationHistory({})
        events: list[str] = []
        history.subscribe(events.append)

        history.add("o", "h", "natural")
        history.clear()

        assert events == [UPDATED_EVENT, UPDATED_EVENT]

    def test_listener_sees_updated_history(self) -> None:
        history = HumanizationHistory({})
        seen: list[int] = []
        history.subscribe(lambda _event: seen.append(len(history.load())))

        history.add("o", "h", "natural")

        assert seen == [1]

    def test_unsubscribe(self) -> None:
        history = HumanizationHistory({})
        events: list[str] = []
        history.subscribe(events.append)
        history.unsubscribe(events.append)

        history.add("o", "h", "natural")

        assert events == []


class TestJsonFileStorage:
    def test_persists_across_instances(self, tmp_path: Path) -> None:
        path = tmp_path / "nested" / "storage.json"
        HumanizationHistory(JsonFileStorage(path)).add("o", "h", "natural", now=BASE_TIME)

        items = HumanizationHistory(JsonFileStorage(path)).load()

        assert len(items) == 1
        assert items[0].humanized_text == "h"

    def test_unreadable_file_starts_empty(self, tmp_path: Path) -> None:
        path = tmp_path / "storage.json"
        path.write_text("garbage", encoding="utf-8")

        storage = JsonFileStorage(path)

        assert len(storage) == 0

    def test_delete_is_persisted(self, tmp_path: Path) -> None:
        path = tmp_path / "storage.json"
        storage = JsonFileStorage(path)
        storage["k"] = "v"
        del storage["k"]

        assert json.loads(path.read_text(encoding="utf-8")) == {}
