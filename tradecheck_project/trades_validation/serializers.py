from rest_framework import serializers

from .enums import OptionStyle, TradeType


def _text(**kwargs):
    # Values are checked as submitted; blank or padded values are rule failures, not structural ones.
    return serializers.CharField(allow_blank=True, trim_whitespace=False, **kwargs)


class TradeRecordSerializer(serializers.Serializer):
    type     = _text()
    customer = _text()


class FxTradeSerializer(TradeRecordSerializer):
    tradeDate = _text()
    valueDate = _text()


class VanillaOptionSerializer(TradeRecordSerializer):
    style        = _text()
    payCcy       = _text()
    premiumCcy   = _text()
    expiryDate   = _text()
    premiumDate  = _text()
    deliveryDate = _text()

    tradeDate          = _text(required=False)
    excerciseStartDate = _text(required=False)

    def validate(self, data):
        if data["style"].upper() == OptionStyle.AMERICAN:
            missing = [k for k in ("tradeDate", "excerciseStartDate") if k not in data]
            if missing:
                raise serializers.ValidationError(
                    {k: "This field is required for AMERICAN style options." for k in missing}
                )
        return data


SERIALIZERS_BY_TYPE = {
    TradeType.SPOT.value: FxTradeSerializer,
    TradeType.FORWARD.value: FxTradeSerializer,
    TradeType.VANILLA_OPTION.value: VanillaOptionSerializer,
}


def serializer_for(record) -> serializers.Serializer:
    trade_type = record.get("type") if isinstance(record, dict) else None
    if not isinstance(trade_type, str):
        trade_type = None
    serializer_class = SERIALIZERS_BY_TYPE.get(trade_type, TradeRecordSerializer)
    return serializer_class(data=record)
