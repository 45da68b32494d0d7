from typing import Any

from pydantic import BaseModel, Field, StrictStr, field_validator


# 0.001 of the chain's native unit, in wei. Not read from the contract.
ENTRY_FEE_WEI = "1000000000000000"


class DepositRequest(BaseModel):
    offchainId: StrictStr = Field(min_length=1)
    userAddress: StrictStr

    @field_validator("userAddress")
    @classmethod
    def _check_address(cls, value: str) -> str:
        # Prefix and length only, no hex or checksum check.
        if not value.startswith("0x") or len(value) != 42:
            raise ValueError("userAddress must be a 0x-prefixed, 42 character address")
        return value


class DepositResponse(BaseModel):
    message: str
    queueId: Any = None


class ErrorResponse(BaseModel):
    error: str
