import logging
from typing import Any, Dict, List, Optional

from ..dto import TradeDTO
from ..mappers import dto_from_payload
from ..serializers import serializer_for
from .pipeline import ValidationPipeline, ValidationReport, build_pipeline

logger = logging.getLogger(__name__)


class MalformedTradeBatch(Exception):
    def __init__(self, message: str, errors: Optional[Dict[str, Any]] = None):
        super().__init__(message)
        self.errors = errors or {}


def load_trades(raw_batch: Any) -> List[TradeDTO]:
    if not isinstance(raw_batch, list):
        raise MalformedTradeBatch("Trade batch must be a JSON array of trade objects.")

    trades, errors = [], {}
    for index, record in enumerate(raw_batch):
        s = serializer_for(record)
        if s.is_valid():
            trades.append(dto_from_payload(s.validated_data))
        else:
            errors[str(index + 1)] = s.errors

    if errors:
        logger.warning("Rejected batch: %d of %d trades are malformed", len(errors), len(raw_batch))
        raise MalformedTradeBatch("One or more trades are missing required fields.", errors)
    return trades


def validate_trades(raw_batch: Any, pipeline: Optional[ValidationPipeline] = None) -> ValidationReport:
    trades = load_trades(raw_batch)
    if pipeline is None:
        pipeline = build_pipeline()
    return pipeline.run(trades)
