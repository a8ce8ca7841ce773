"""
Entry point for uvicorn: `uvicorn api:app`.
"""

from __future__ import annotations

import logging
import os

from text_humanizer.api import create_app

logging.basicConfig(
    format="%(asctime)s [%(levelname)s] %(name)s: %(message)s",
    level=logging.INFO,
)

app = create_app(secure_cookies=os.environ.get("APP_ENV") == "production")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=int(os.environ.get("PORT", "8000")))
