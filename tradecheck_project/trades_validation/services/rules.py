"""Business rules applied to every trade in a batch.

Each rule is a stateless value: an applicability gate plus a check that
returns the error codes it found. Rules never hold on to the entries they
produce; the pipeline collects them into the run's report.
"""
import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Tuple

from ..dto import FxTradeDTO, TradeDTO, ValidationOutcome, VanillaOptionDTO, ViolationEntry
from ..enums import ErrorType, FX_TRADE_TYPES, OptionStyle, TradeType
from ..validators import is_before, is_valid_currency_code, is_weekend

logger = logging.getLogger(__name__)

DEFAULT_VALID_CUSTOMERS = frozenset({"PLUTO1", "PLUTO2"})
VALID_STYLES = frozenset({OptionStyle.AMERICAN.value, OptionStyle.EUROPEAN.value})


@dataclass(frozen=True)
class Rule:
    name: str
    applies: Callable[[TradeDTO], bool]
    check: Callable[[TradeDTO], List[str]]

    def evaluate(self, trade: TradeDTO, trade_number: int) -> ValidationOutcome:
        if not self.applies(trade):
            return ValidationOutcome()
        codes = self.check(trade)
        entries = tuple(ViolationEntry(str(code), trade_number) for code in codes)
        for entry in entries:
            logger.info("Trade %s failed %s: %s", trade_number, self.name, entry.error_type)
        return ValidationOutcome(passed=not entries, entries=entries)


def _is_fx(trade: TradeDTO) -> bool:
    return trade.trade_type in FX_TRADE_TYPES and isinstance(trade, FxTradeDTO)


def _is_option(trade: TradeDTO) -> bool:
    return trade.trade_type == TradeType.VANILLA_OPTION and isinstance(trade, VanillaOptionDTO)


def _is_american_option(trade: TradeDTO) -> bool:
    return _is_option(trade) and trade.style.upper() == OptionStyle.AMERICAN


def _applies_to_all(trade: TradeDTO) -> bool:
    return True


def _check_value_date(trade: FxTradeDTO) -> List[str]:
    if is_before(trade.value_date, trade.trade_date):
        return [ErrorType.VALUE_DATE_BEFORE_TRADE_DATE]
    return []


def _check_weekend(trade: FxTradeDTO) -> List[str]:
    if is_weekend(trade.value_date):
        return [ErrorType.VALUE_DATE_ON_WEEKEND]
    return []


def _check_currencies(trade: VanillaOptionDTO) -> List[str]:
    codes = []
    if not is_valid_currency_code(trade.pay_ccy):
        codes.append(ErrorType.PAY_CCY_NOT_ISO4217)
    if not is_valid_currency_code(trade.premium_ccy):
        codes.append(ErrorType.PREMIUM_CCY_NOT_ISO4217)
    return codes


def _check_style(trade: VanillaOptionDTO) -> List[str]:
    if trade.style.upper() not in VALID_STYLES:
        return [ErrorType.STYLE_NOT_VALID]
    return []


def _check_exercise_window(trade: VanillaOptionDTO) -> List[str]:
    # tradeDate <= excerciseStartDate < expiryDate
    starts_before_trade = is_before(trade.excercise_start_date, trade.trade_date)
    starts_before_expiry = is_before(trade.excercise_start_date, trade.expiry_date)
    if starts_before_trade or not starts_before_expiry:
        return [ErrorType.INVALID_EXERCISE_START_DATE]
    return []


def _check_expiry_and_premium(trade: VanillaOptionDTO) -> List[str]:
    expiry_ok = is_before(trade.expiry_date, trade.delivery_date)
    premium_ok = is_before(trade.premium_date, trade.delivery_date)
    if not expiry_ok or not premium_ok:
        return [ErrorType.INVALID_EXPIRY_AND_PREMIUM_DATE]
    return []


def make_customer_rule(valid_customers: Iterable[str] = DEFAULT_VALID_CUSTOMERS) -> Rule:
    allowed = frozenset(valid_customers)

    def _check_customer(trade: TradeDTO) -> List[str]:
        if trade.customer not in allowed:
            return [ErrorType.CUSTOMER_NOT_VALID]
        return []

    return Rule("customer", _applies_to_all, _check_customer)


VALUE_DATE_RULE = Rule("value_date_not_before_trade_date", _is_fx, _check_value_date)
WEEKEND_RULE = Rule("value_date_not_on_weekend", _is_fx, _check_weekend)
CURRENCY_RULE = Rule("iso4217_currencies", _is_option, _check_currencies)
CUSTOMER_RULE = make_customer_rule()
STYLE_RULE = Rule("option_style", _is_option, _check_style)
EXERCISE_WINDOW_RULE = Rule("exercise_start_date", _is_american_option, _check_exercise_window)
EXPIRY_PREMIUM_RULE = Rule("expiry_and_premium_date", _is_option, _check_expiry_and_premium)


def build_rules(valid_customers: Iterable[str] = DEFAULT_VALID_CUSTOMERS) -> Tuple[Rule, ...]:
    return (
        VALUE_DATE_RULE,
        WEEKEND_RULE,
        CURRENCY_RULE,
        make_customer_rule(valid_customers),
        STYLE_RULE,
        EXERCISE_WINDOW_RULE,
        EXPIRY_PREMIUM_RULE,
    )


DEFAULT_RULES = build_rules()
