"""Typed views of the JSON payloads returned by an ndau node."""

from __future__ import annotations

from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field, RootModel


class _NodeModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="ignore")


class AccountListReq(_NodeModel):
    limit: int = 0
    after: str = ""

    def to_params(self) -> Dict[str, Any]:
        """Return query parameters, leaving out unset values."""

        params: Dict[str, Any] = {}
        if self.limit:
            params["limit"] = self.limit
        if self.after:
            params["after"] = self.after
        return params


class AccountListResp(_NodeModel):
    num_accounts: int = Field(0, alias="NumAccounts")
    first_index: int = Field(0, alias="FirstIndex")
    after: str = Field("", alias="After")
    next_after: str = Field("", alias="NextAfter")
    accounts: List[str] = Field(default_factory=list, alias="Accounts")


class Account(_NodeModel):
    currency_seat_date: Optional[datetime] = Field(None, alias="CurrencySeatDate")
    id: str = ""
    balance: int = 0


class AccountResp(RootModel[Dict[str, Account]]):
    """Accounts keyed by account id."""

    def __getitem__(self, address: str) -> Account:
        return self.root[address]

    def __len__(self) -> int:
        return len(self.root)


class CurrentPriceResp(_NodeModel):
    market_price: int = Field(0, alias="marketPrice")
    target_price: int = Field(0, alias="targetPrice")
    floor_price: int = Field(0, alias="floorPrice")
    total_released: int = Field(0, alias="totalReleased")
    total_issued: int = Field(0, alias="totalIssued")
    total_ndau: int = Field(0, alias="totalNdau")
    total_burned: int = Field(0, alias="totalBurned")
    sib: int = 0
