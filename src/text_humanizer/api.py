"""
FastAPI service: humanización vía modelo generativo + detector local.
"""

from __future__ import annotations

import asyncio
import logging
import time
from concurrent.futures import ThreadPoolExecutor
from typing import Callable, Optional

from fastapi import FastAPI, HTTPException, Request, Response
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from pydantic import BaseModel, Field

from .detector import detect_ai_text
from .humanizer import GenerationError, Humanizer, InputValidationError
from .prompts import DEFAULT_STYLE, list_styles
from .rate_limit import RateLimiter

log = logging.getLogger(__name__)

LAST_REQUEST_COOKIE = "last-request-time"
COOKIE_MAX_AGE = 60 * 60
MIN_REQUEST_INTERVAL_MS = 2000
TOO_FREQUENT_MESSAGE = "Please wait a moment before making another request."
GENERIC_FAILURE_MESSAGE = "Failed to humanize text"


class HumanizeRequest(BaseModel):
    text: str = ""
    style: str = DEFAULT_STYLE


class HumanizeResponse(BaseModel):
    humanized_text: str = Field(serialization_alias="humanizedText")


class DetectRequest(BaseModel):
    text: str = ""


def _client_key(request: Request) -> str:
    forwarded = request.headers.get("x-forwarded-for", "")
    if forwarded:
        return forwarded.split(",")[0].strip()
    if request.client and request.client.host:
        return request.client.host
    return "anonymous"


def _too_soon(cookie_value: Optional[str], now_ms: int) -> bool:
    if not cookie_value:
        return False
    try:
        last = int(cookie_value)
    except ValueError:
        return False
    return now_ms - last < MIN_REQUEST_INTERVAL_MS


def create_app(
    limiter: RateLimiter | None = None,
    humanizer_factory: Callable[[], Humanizer] | None = None,
    secure_cookies: bool = False,
) -> FastAPI:
    """
    Construye la app con su estado explícito: el rate limiter vive lo que
    vive la app y se comparte entre todas las peticiones.
    """

    # El intervalo mínimo de 2 s lo aplica la cookie de /api/humanize.
    rate_limiter = limiter or RateLimiter(min_interval=0)
    make_humanizer = humanizer_factory or Humanizer
    executor = ThreadPoolExecutor(max_workers=3)

    app = FastAPI(
        title="Text Humanizer API",
        description="Rewrites AI-sounding text and scores it with a local heuristic detector",
        version="1.0.0",
    )
    app.state.rate_limiter = rate_limiter

    app.add_middleware(
        CORSMiddleware,
        allow_origins=["*"],
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    @app.middleware("http")
    async def rate_limit_api(request: Request, call_next):
        if not request.url.path.startswith("/api/"):
            return await call_next(request)

        result = rate_limiter.check(_client_key(request))
        if not result.allowed:
            return JSONResponse(
                status_code=429,
                content={
                    "success": False,
                    "error": "Rate limit exceeded",
                    "limit": result.limit,
                    "remaining": result.remaining,
                    "reset": result.reset_iso,
                    "retryAfter": round(result.retry_after, 3),
                },
                headers=result.headers(),
            )

        response = await call_next(request)
        for name, value in result.headers().items():
            response.headers[name] = value
        return response

    @app.get("/")
    async def root():
        return {
            "status": "ok",
            "service": "text-humanizer-api",
            "version": "1.0.0",
        }

    @app.get("/health")
    async def health():
        return {"status": "healthy"}

    @app.get("/api/styles")
    async def styles():
        return list_styles()

    @app.post("/api/detect")
    async def detect(payload: DetectRequest):
        return detect_ai_text(payload.text).to_dict()

    @app.post("/api/humanize", response_model=HumanizeResponse)
    async def humanize(
        payload: HumanizeRequest, request: Request, response: Response
    ) -> HumanizeResponse:
        """
        Reescribe el texto con el estilo pedido. Errores de validación van
        tal cual al cliente; los del proveedor, como mensaje genérico salvo
        que el proveedor dé uno concreto.
        """

        now_ms = int(time.time() * 1000)
        if _too_soon(request.cookies.get(LAST_REQUEST_COOKIE), now_ms):
            raise HTTPException(status_code=429, detail=TOO_FREQUENT_MESSAGE)

        response.set_cookie(
            LAST_REQUEST_COOKIE,
            str(now_ms),
            max_age=COOKIE_MAX_AGE,
            httponly=True,
            secure=secure_cookies,
            samesite="strict",
        )

        def run_humanize() -> str:
            return make_humanizer().humanize(payload.text, payload.style)

        try:
            loop = asyncio.get_running_loop()
            text = await loop.run_in_executor(executor, run_humanize)
        except InputValidationError as err:
            raise HTTPException(status_code=400, detail=str(err))
        except GenerationError as err:
            log.error("Error humanizing text: %s", err)
            raise HTTPException(status_code=502, detail=str(err) or GENERIC_FAILURE_MESSAGE)
        except Exception:
            log.exception("Error humanizing text")
            raise HTTPException(status_code=502, detail=GENERIC_FAILURE_MESSAGE)

        return HumanizeResponse(humanized_text=text)

    return app
