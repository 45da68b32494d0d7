from fastapi import Request

from deposit_relay.app.core.config import Settings
from deposit_relay.app.services.engine_service import EngineClient


def get_settings(request: Request) -> Settings:
    return request.app.state.settings


def get_engine_client(request: Request) -> EngineClient:
    return request.app.state.engine_client
