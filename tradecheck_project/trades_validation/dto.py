import json
from dataclasses import dataclass, field
from typing import Dict, Optional, Tuple


@dataclass(frozen=True)
class TradeDTO:
    trade_type: str
    customer: str

    def date_fields(self) -> Dict[str, str]:
        return {}


@dataclass(frozen=True)
class FxTradeDTO(TradeDTO):
    trade_date: str
    value_date: str

    def date_fields(self) -> Dict[str, str]:
        return {"tradeDate": self.trade_date, "valueDate": self.value_date}


@dataclass(frozen=True)
class VanillaOptionDTO(TradeDTO):
    style: str
    pay_ccy: str
    premium_ccy: str
    expiry_date: str
    premium_date: str
    delivery_date: str
    trade_date: Optional[str] = None
    excercise_start_date: Optional[str] = None

    def date_fields(self) -> Dict[str, str]:
        dates = {
            "tradeDate": self.trade_date,
            "expiryDate": self.expiry_date,
            "premiumDate": self.premium_date,
            "deliveryDate": self.delivery_date,
            "excerciseStartDate": self.excercise_start_date,
        }
        return {k: v for k, v in dates.items() if v is not None}


@dataclass(frozen=True)
class ViolationEntry:
    error_type: str
    trade_number: int

    def to_dict(self) -> Dict[str, object]:
        return {"ErrorType": str(self.error_type), "TradeNumber": self.trade_number}


@dataclass(frozen=True)
class ValidationOutcome:
    passed: bool = True
    entries: Tuple[ViolationEntry, ...] = field(default_factory=tuple)

    @property
    def message(self) -> Optional[str]:
        if not self.entries:
            return None
        return "\n".join(json.dumps(e.to_dict()) for e in self.entries)
