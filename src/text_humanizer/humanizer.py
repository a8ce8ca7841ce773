"""Cliente del modelo generativo que reescribe el texto en tono humano."""

from __future__ import annotations

from typing import Any, Dict
import logging
import time

import httpx

from .config import (
    get_generation_model,
    get_max_output_tokens,
    get_openrouter_api_key,
    get_openrouter_chat_endpoint,
)
from .prompts import DEFAULT_STYLE, build_prompt

log = logging.getLogger(__name__)

MAX_TEXT_LENGTH = 5000
MAX_ATTEMPTS = 3


class HumanizeError(Exception):
    """Errores derivados del proceso de humanización."""


class InputValidationError(HumanizeError):
    """Texto vacío o demasiado largo. El mensaje se muestra tal cual."""


class GenerationError(HumanizeError):
    """Fallo del proveedor del modelo."""


def validate_text(text: str | None) -> str:
    if not text or len(text) > MAX_TEXT_LENGTH:
        raise InputValidationError(
            f"Text must be between 1 and {MAX_TEXT_LENGTH} characters."
        )
    return text


def _extract_content(data: Dict[str, Any]) -> str:
    choices = data.get("choices") or []
    for choice in choices:
        content_obj: Any = ""
        message = choice.get("message")
        if isinstance(message, dict):
            content_obj = message.get("content", "")
        elif "text" in choice:
            content_obj = choice.get("text", "")

        if isinstance(content_obj, list):
            # Algunas APIs entregan fragmentos estructurados.
            content = "".join(
                part.get("text", "")
                for part in content_obj
                if isinstance(part, dict)
            )
        else:
            content = str(content_obj or "")

        content = content.strip()
        if content:
            return content

    output = data.get("output") or data.get("text")
    return str(output).strip() if output else ""


def _provider_message(err: httpx.HTTPStatusError) -> str | None:
    try:
        payload = err.response.json()
    except ValueError:
        return None
    error = payload.get("error") if isinstance(payload, dict) else None
    if isinstance(error, dict):
        message = error.get("message")
        return str(message) if message else None
    if isinstance(error, str):
        return error
    return None


def _call_llm(prompt: str, model_name: str, max_tokens: int) -> str:
    api_key = get_openrouter_api_key()
    endpoint = get_openrouter_chat_endpoint()

    if not api_key:
        raise GenerationError("Missing OpenRouter API key.")

    payload = {
        "model": model_name,
        "messages": [{"role": "user", "content": prompt}],
        "max_tokens": max_tokens,
    }

    for attempt in range(MAX_ATTEMPTS):
        try:
            resp = httpx.post(
                endpoint,
                headers={
                    "Authorization": f"Bearer {api_key}",
                    "Content-Type": "application/json",
                },
                json=payload,
                timeout=60,
            )
            resp.raise_for_status()
            data: Dict[str, Any] = resp.json()
            break
        except httpx.HTTPStatusError as err:
            status = err.response.status_code
            if status == 429 and attempt < MAX_ATTEMPTS - 1:
                log.warning("Provider throttled (attempt %s), backing off", attempt + 1)
                time.sleep(2 ** attempt)
                continue
            message = _provider_message(err) or f"HTTP error from provider: {status}"
            raise GenerationError(message) from err
        except (httpx.TransportError, ValueError) as err:
            if attempt < MAX_ATTEMPTS - 1:
                log.warning("Provider call failed (attempt %s): %s", attempt + 1, err)
                time.sleep(1 + attempt)
                continue
            raise GenerationError(f"Error calling generation model: {err}") from err

    content = _extract_content(data)
    if not content:
        raise GenerationError("Empty response from the generation model.")
    return content


class Humanizer:
    """
    Dado un texto y un estilo, construye el prompt y pide la reescritura
    al modelo. No guarda historial ni aplica rate limit.
    """

    def __init__(self, model_name: str | None = None, max_tokens: int | None = None) -> None:
        self._model_name = model_name or get_generation_model()
        self._max_tokens = max_tokens or get_max_output_tokens()

    @property
    def model_name(self) -> str:
        return self._model_name

    def humanize(self, text: str, style: str = DEFAULT_STYLE) -> str:
        validate_text(text)
        prompt = build_prompt(style, text)
        log.info(
            "Humanizing %s chars with style=%s model=%s",
            len(text),
            style,
            self._model_name,
        )
        return _call_llm(prompt, model_name=self._model_name, max_tokens=self._max_tokens)
