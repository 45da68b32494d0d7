import logging

from fastapi import APIRouter, Depends

from deposit_relay.app.api.deps import get_engine_client, get_settings
from deposit_relay.app.core.config import Settings
from deposit_relay.app.core.errors import internal_error
from deposit_relay.app.core.exceptions import EngineRequestError
from deposit_relay.app.schemas.deposit import (
    ENTRY_FEE_WEI,
    DepositRequest,
    DepositResponse,
    ErrorResponse,
)
from deposit_relay.app.schemas.engine import EngineCallOptions, WriteContractBody
from deposit_relay.app.services.engine_service import EngineClient

logger = logging.getLogger(__name__)

router = APIRouter(tags=["Deposit"])

QUEUED_MESSAGE = "Deposit transaction queued successfully!"


def _write_path(settings: Settings) -> str:
    return f"/contract/{settings.CHAIN_ID}/{settings.CONTRACT_ADDRESS}/write"


def build_deposit_call(payload: DepositRequest) -> EngineCallOptions:
    body = WriteContractBody(
        functionName="deposit",
        args=[payload.offchainId],
        txOverrides={"value": ENTRY_FEE_WEI},
    )
    return EngineCallOptions(
        method="POST",
        headers={"x-account-address": payload.userAddress},
        body=body.model_dump(),
    )


@router.post(
    "/deposit",
    response_model=DepositResponse,
    responses={400: {"model": ErrorResponse}, 500: {"model": ErrorResponse}},
)
async def deposit(
    payload: DepositRequest,
    settings: Settings = Depends(get_settings),
    engine: EngineClient = Depends(get_engine_client),
):
    logger.info(
        "Processing deposit for offchainId: %s by user: %s",
        payload.offchainId,
        payload.userAddress,
    )
    logger.debug("Using ENTRY_FEE: %s Wei (0.001 ETH)", ENTRY_FEE_WEI)

    try:
        result = await engine.call(_write_path(settings), build_deposit_call(payload))
    except EngineRequestError as exc:
        logger.error("Error processing deposit %s: %s", payload.offchainId, exc.message)
        raise

    if not isinstance(result, dict):
        logger.error("Engine result for deposit %s is not an object: %r", payload.offchainId, result)
        raise internal_error()

    queue_id = result.get("queueId")
    logger.info("Transaction queued with Engine. Queue ID: %s", queue_id)

    # Status can be polled on Engine with this queue id.
    return {"message": QUEUED_MESSAGE, "queueId": queue_id}
