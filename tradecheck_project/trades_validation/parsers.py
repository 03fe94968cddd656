import json

from django.conf import settings
from rest_framework.exceptions import ParseError
from rest_framework.parsers import BaseParser


class PlainTextJSONParser(BaseParser):
    """Accepts a JSON document posted as ``text/plain``."""

    media_type = "text/plain"

    def parse(self, stream, media_type=None, parser_context=None):
        parser_context = parser_context or {}
        encoding = parser_context.get("encoding", settings.DEFAULT_CHARSET)
        try:
            return json.loads(stream.read().decode(encoding))
        except ValueError as exc:
            raise ParseError(f"Trade batch is not valid JSON - {exc}")
