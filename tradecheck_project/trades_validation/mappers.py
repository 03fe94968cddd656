from typing import Any, Dict

from .dto import FxTradeDTO, TradeDTO, VanillaOptionDTO
from .enums import FX_TRADE_TYPES, TradeType


def dto_from_payload(data: Dict[str, Any]) -> TradeDTO:
    trade_type = data["type"]
    if trade_type in FX_TRADE_TYPES:
        return FxTradeDTO(
            trade_type=trade_type,
            customer=data["customer"],
            trade_date=data["tradeDate"],
            value_date=data["valueDate"],
        )
    if trade_type == TradeType.VANILLA_OPTION:
        return VanillaOptionDTO(
            trade_type=trade_type,
            customer=data["customer"],
            style=data["style"],
            pay_ccy=data["payCcy"],
            premium_ccy=data["premiumCcy"],
            expiry_date=data["expiryDate"],
            premium_date=data["premiumDate"],
            delivery_date=data["deliveryDate"],
            trade_date=data.get("tradeDate"),
            excercise_start_date=data.get("excerciseStartDate"),
        )
    return TradeDTO(trade_type=trade_type, customer=data["customer"])