"""Historial local de humanizaciones (las 10 más recientes primero)."""

from __future__ import annotations

import json
import logging
from dataclasses import asdict, dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Callable, Dict, Iterator, List, MutableMapping

from .timestamps import iso_timestamp

log = logging.getLogger(__name__)

HISTORY_KEY = "humanization_history"
UPDATED_EVENT = "humanization_updated"
MAX_ENTRIES = 10

Listener = Callable[[str], None]


@dataclass(frozen=True)
class Humanization:
    id: str
    original_text: str
    humanized_text: str
    style: str
    created_at: str

    def to_dict(self) -> Dict[str, str]:
        return asdict(self)

    @classmethod
    def from_dict(cls, payload: Dict[str, Any]) -> "Humanization":
        return cls(
            id=str(payload["id"]),
            original_text=str(payload["original_text"]),
            humanized_text=str(payload["humanized_text"]),
            style=str(payload["style"]),
            created_at=str(payload["created_at"]),
        )


class JsonFileStorage(MutableMapping[str, str]):
    """
    Almacén clave/valor de strings persistido como un objeto JSON en disco.
    Cada escritura reescribe el fichero completo.
    """

    def __init__(self, path: str | Path) -> None:
        self._path = Path(path)
        self._data: Dict[str, str] = {}
        if self._path.exists():
            try:
                payload = json.loads(self._path.read_text(encoding="utf-8"))
            except (OSError, json.JSONDecodeError):
                log.warning("Ignoring unreadable storage file %s", self._path)
                payload = {}
            if isinstance(payload, dict):
                self._data = {str(k): str(v) for k, v in payload.items()}

    def _save(self) -> None:
        self._path.parent.mkdir(parents=True, exist_ok=True)
        self._path.write_text(json.dumps(self._data), encoding="utf-8")

    def __getitem__(self, key: str) -> str:
        return self._data[key]

    def __setitem__(self, key: str, value: str) -> None:
        self._data[key] = value
        self._save()

    def __delitem__(self, key: str) -> None:
        del self._data[key]
        self._save()

    def __iter__(self) -> Iterator[str]:
        return iter(self._data)

    def __len__(self) -> int:
        return len(self._data)


class HumanizationHistory:
    """
    Lee y escribe el historial en el almacén inyectado y avisa a los
    listeners registrados después de cada escritura.
    """

    def __init__(self, storage: MutableMapping[str, str]) -> None:
        self._storage = storage
        self._listeners: List[Listener] = []

    def subscribe(self, listener: Listener) -> None:
        if listener not in self._listeners:
            self._listeners.append(listener)

    def unsubscribe(self, listener: Listener) -> None:
        if listener in self._listeners:
            self._listeners.remove(listener)

    def _notify(self) -> None:
        for listener in list(self._listeners):
            listener(UPDATED_EVENT)

    def load(self) -> List[Humanization]:
        raw = self._storage.get(HISTORY_KEY)
        if not raw:
            return []
        try:
            payload = json.loads(raw)
        except json.JSONDecodeError:
            log.warning("Stored history is not valid JSON, treating it as empty")
            return []
        if not isinstance(payload, list):
            return []

        items: List[Humanization] = []
        for record in payload:
            if not isinstance(record, dict):
                continue
            try:
                items.append(Humanization.from_dict(record))
            except KeyError:
                continue
        return items

    def add(
        self,
        original_text: str,
        humanized_text: str,
        style: str,
        now: datetime | None = None,
    ) -> Humanization:
        timestamp = iso_timestamp(now)
        item = Humanization(
            id=timestamp,
            original_text=original_text,
            humanized_text=humanized_text,
            style=style,
            created_at=timestamp,
        )
        updated = [item, *self.load()][:MAX_ENTRIES]
        self._storage[HISTORY_KEY] = json.dumps([h.to_dict() for h in updated])
        self._notify()
        return item

    def clear(self) -> None:
        self._storage.pop(HISTORY_KEY, None)
        self._notify()
