"""API server: runs uvicorn inside the current asyncio event loop."""

from __future__ import annotations

import uvicorn
from loguru import logger

from config.settings import Settings


async def run_api_server(cfg: Settings) -> None:
    """Serve the FastAPI app until uvicorn receives SIGINT/SIGTERM."""
    from rugscope.api.app import create_app

    app = create_app(cfg)
    config = uvicorn.Config(
        app=app,
        host=cfg.host,
        port=cfg.port,
        log_level="warning",
    )
    server = uvicorn.Server(config)
    logger.info(f"Server running at http://localhost:{cfg.port}")
    await server.serve()
