"""Formato de fechas compartido por el historial y las cabeceras de rate limit."""

from __future__ import annotations

from datetime import datetime, timezone


def iso_timestamp(moment: datetime | None = None) -> str:
    """
    UTC con milisegundos y sufijo Z, p. ej. ``2024-05-01T12:00:00.000Z``.
    Es el formato de Date.toISOString().
    """

    moment = (moment or datetime.now(timezone.utc)).astimezone(timezone.utc)
    return moment.strftime("%Y-%m-%dT%H:%M:%S.") + f"{moment.microsecond // 1000:03d}Z"


def iso_from_epoch(seconds: float) -> str:
    return iso_timestamp(datetime.fromtimestamp(seconds, tz=timezone.utc))
