import logging
from dataclasses import dataclass, field
from typing import Dict, Iterator, List, Optional, Sequence, Tuple

from ..conf import get_setting
from ..dto import TradeDTO, ViolationEntry
from ..enums import ErrorType
from ..validators import is_date
from .rules import DEFAULT_RULES, Rule, build_rules

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ValidationReport:
    entries: Tuple[ViolationEntry, ...] = field(default_factory=tuple)

    def __len__(self) -> int:
        return len(self.entries)

    def __iter__(self) -> Iterator[ViolationEntry]:
        return iter(self.entries)

    @property
    def is_empty(self) -> bool:
        return not self.entries

    def for_trade(self, trade_number: int) -> List[ViolationEntry]:
        return [e for e in self.entries if e.trade_number == trade_number]

    def to_payload(self) -> List[Dict[str, object]]:
        return [e.to_dict() for e in self.entries]


class ValidationPipeline:
    """Runs an ordered list of rules over every trade of a batch.

    Rules run in list order for each trade, trades in batch order, and a
    failing rule never stops the remaining ones. With ``strict_dates`` a
    trade carrying an unparsable date also gets an ``InvalidDateFormat``
    entry ahead of its rule results.
    """

    def __init__(self, rules: Optional[Sequence[Rule]] = None, *, strict_dates: bool = False):
        self.rules = tuple(DEFAULT_RULES if rules is None else rules)
        self.strict_dates = strict_dates

    def validate_trade(self, trade: TradeDTO, trade_number: int) -> List[ViolationEntry]:
        entries: List[ViolationEntry] = []
        if self.strict_dates:
            bad = [name for name, value in trade.date_fields().items() if not is_date(value)]
            if bad:
                logger.info("Trade %s has malformed dates: %s", trade_number, ", ".join(bad))
                entries.append(ViolationEntry(str(ErrorType.INVALID_DATE_FORMAT), trade_number))
        for rule in self.rules:
            entries.extend(rule.evaluate(trade, trade_number).entries)
        return entries

    def run(self, batch: Sequence[TradeDTO]) -> ValidationReport:
        entries: List[ViolationEntry] = []
        for index, trade in enumerate(batch):
            entries.extend(self.validate_trade(trade, index + 1))
        logger.info("Validated %d trades, %d violations", len(batch), len(entries))
        return ValidationReport(entries=tuple(entries))


def build_pipeline() -> ValidationPipeline:
    return ValidationPipeline(
        rules=build_rules(get_setting("VALID_CUSTOMERS")),
        strict_dates=bool(get_setting("STRICT_DATE_FORMAT")),
    )
