import logging

from rest_framework import viewsets
from rest_framework.decorators import action
from rest_framework.parsers import JSONParser
from rest_framework.response import Response

from .parsers import PlainTextJSONParser
from .services.use_cases import MalformedTradeBatch, validate_trades

logger = logging.getLogger(__name__)

SUCCESS_MESSAGE = "Validation Successful :: No error found in trade data"


class TradeValidationViewSet(viewsets.GenericViewSet):
    parser_classes = [JSONParser, PlainTextJSONParser]

    @action(detail=False, methods=["post"])
    def validate(self, request):
        raw_batch = request.data
        try:
            report = validate_trades(raw_batch)
        except MalformedTradeBatch as e:
            return Response({"detail": str(e), "errors": e.errors}, status=400)
        except Exception as e:
            logger.exception("Trade validation failed")
            return Response({"detail": f"Internal error: {str(e)}"}, status=500)

        if report.is_empty:
            return Response(SUCCESS_MESSAGE, status=200)
        return Response(report.to_payload(), status=200)
