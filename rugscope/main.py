"""Entry point for the rugscope API server."""

import asyncio

from loguru import logger

from config.settings import settings
from rugscope.api.server import run_api_server
from rugscope.utils.logger import setup_logger


async def main() -> None:
    setup_logger(level="INFO")
    logger.info("Starting rugscope API...")
    if not settings.polygonscan_api_key:
        logger.warning("POLYGONSCAN_API_KEY is not set, explorer calls will be rejected")
    if not settings.llm_api_key:
        logger.warning("LLM_API_KEY / DEEPSEEK_API_KEY is not set, reports will fail")

    await run_api_server(settings)
    logger.info("Shutdown complete")


def run() -> None:
    asyncio.run(main())


if __name__ == "__main__":
    run()
