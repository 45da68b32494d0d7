import logging
from contextlib import asynccontextmanager

import httpx
import uvicorn
from fastapi import FastAPI

from deposit_relay.app.api.routes import deposit
from deposit_relay.app.core.config import Settings, load_settings
from deposit_relay.app.core.handlers import register_exception_handlers
from deposit_relay.app.core.log_config import configure_logging
from deposit_relay.app.services.engine_service import EngineClient

logger = logging.getLogger(__name__)

VERSION = "1.0.0"


def create_app(settings: Settings, transport: httpx.AsyncBaseTransport | None = None) -> FastAPI:
    configure_logging(settings.LOG_LEVEL)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        logger.info("Server listening on port %s", settings.PORT)
        logger.info("Using Engine: %s", settings.engine_base_url)
        logger.info("Backend Wallet: %s", settings.BACKEND_WALLET_ADDRESS)
        logger.info("Contract Address: %s", settings.CONTRACT_ADDRESS)
        logger.info("Chain ID: %s", settings.CHAIN_ID)
        yield

    app = FastAPI(title="Deposit Relay", version=VERSION, lifespan=lifespan)
    app.state.settings = settings
    app.state.engine_client = EngineClient(settings, transport=transport)

    register_exception_handlers(app)
    app.include_router(deposit.router)

    @app.get("/")
    def health_check():
        return {"status": "healthy", "version": VERSION}

    return app


def run():
    settings = load_settings()
    uvicorn.run(create_app(settings), host="0.0.0.0", port=settings.PORT)


if __name__ == "__main__":
    run()
