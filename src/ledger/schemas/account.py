"""Pydantic schemas for account output."""

from pydantic import BaseModel


class AccountResponse(BaseModel):
    """Serialized form of a single account."""

    model_config = {"from_attributes": True}

    account_id: int
    name: str
    balance: float


class AccountListResponse(BaseModel):
    """Serialized listing of accounts."""

    accounts: list[AccountResponse]
    count: int
