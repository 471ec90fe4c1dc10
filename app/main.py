# app/main.py
from __future__ import annotations

import uvicorn

from app.bootstrap import create_app
from app.core.config import settings
from app.lifecycle import register_lifecycle

# ASGI entrypoint: uvicorn app.main:app
app = create_app()
register_lifecycle(app)


if __name__ == "__main__":
    # access log off: RequestLoggingMiddleware already logs every request
    uvicorn.run(app, host=settings.host, port=settings.port, access_log=False)
