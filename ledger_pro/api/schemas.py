"""Pydantic wire schemas for the ledger backend."""

from __future__ import annotations

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _WireModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, frozen=True)


class Account(_WireModel):
    id: str = Field(..., alias="_id")
    name: str

    @field_validator("id", mode="before")
    @classmethod
    def _coerce_id(cls, value):
        # Some backends hand out numeric ids; the client treats them as opaque.
        return str(value) if isinstance(value, int) else value


class Transaction(_WireModel):
    id: str = Field(..., alias="_id")
    account_id: Optional[str] = Field(default=None, alias="accountId")
    date_of_entry: Optional[str] = Field(default=None, alias="dateOfEntry")
    due_on: Optional[str] = Field(default=None, alias="dueOn")
    reference: str = ""
    description: str = ""
    debit: float = 0.0
    credit: float = 0.0
    remarks: str = ""
    balance: float = 0.0

    @field_validator("id", "account_id", mode="before")
    @classmethod
    def _coerce_id(cls, value):
        return str(value) if isinstance(value, int) else value

    @field_validator("reference", "description", "remarks", mode="before")
    @classmethod
    def _blank_text(cls, value):
        return "" if value is None else value

    @field_validator("debit", "credit", "balance", mode="before")
    @classmethod
    def _zero_amount(cls, value):
        return 0.0 if value is None or value == "" else value


class AccountCreateRequest(_WireModel):
    name: str = Field(..., min_length=1)


class TransactionCreateRequest(_WireModel):
    account_id: str = Field(..., alias="accountId")
    date_of_entry: str = Field(default="", alias="dateOfEntry")
    due_on: Optional[str] = Field(default=None, alias="dueOn")
    reference: str = ""
    description: str = ""
    debit: float = Field(default=0.0, ge=0)
    credit: float = Field(default=0.0, ge=0)
    remarks: str = ""

    def to_wire(self) -> dict[str, object]:
        return self.model_dump(by_alias=True)


__all__ = [
    "Account",
    "Transaction",
    "AccountCreateRequest",
    "TransactionCreateRequest",
]
