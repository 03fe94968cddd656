from django.db import models


class TradeType(models.TextChoices):
    SPOT = "Spot", "Spot"
    FORWARD = "Forward", "Forward"
    VANILLA_OPTION = "VanillaOption", "Vanilla Option"


class OptionStyle(models.TextChoices):
    AMERICAN = "AMERICAN", "American"
    EUROPEAN = "EUROPEAN", "European"


class ErrorType(models.TextChoices):
    VALUE_DATE_BEFORE_TRADE_DATE = "valueDateNotbeforeTradeDate", "Value date before trade date"
    VALUE_DATE_ON_WEEKEND = "valueDateFallinWeekend", "Value date falls on a weekend"
    PAY_CCY_NOT_ISO4217 = "payCcyNotValidISO4217", "Pay currency is not a valid ISO 4217 code"
    PREMIUM_CCY_NOT_ISO4217 = "premiumCcyNotValidISO4217", "Premium currency is not a valid ISO 4217 code"
    CUSTOMER_NOT_VALID = "CustomerNotValid", "Customer is not supported"
    STYLE_NOT_VALID = "StyleNotValid", "Option style is not supported"
    INVALID_EXERCISE_START_DATE = "InvalidExcerciseStartDate", "Exercise start date outside trade/expiry window"
    INVALID_EXPIRY_AND_PREMIUM_DATE = "InvalidExpiryAndPrimiumDate", "Expiry or premium date not before delivery date"
    INVALID_DATE_FORMAT = "InvalidDateFormat", "Date is not in YYYY-MM-DD format"


FX_TRADE_TYPES = frozenset({TradeType.SPOT.value, TradeType.FORWARD.value})
