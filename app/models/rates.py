from __future__ import annotations
from pydantic import BaseModel, ConfigDict, Field, field_validator


class _PairModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    from_currency: str = Field(..., alias="from")
    to_currency: str = Field(..., alias="to")

    @field_validator("from_currency", "to_currency")
    @classmethod
    def canonical_code(cls, v: str) -> str:
        return v.upper()

    def to_payload(self) -> dict:
        return self.model_dump(by_alias=True)


class RateOut(_PairModel):
    rate: float


class RateSetOut(_PairModel):
    rate: float = Field(..., gt=0)
    inverse_rate: float = Field(..., gt=0)


class RateDeletedOut(_PairModel):
    status: str = "deleted"


class ConversionOut(_PairModel):
    amount: float = Field(..., ge=0)
    converted: float
