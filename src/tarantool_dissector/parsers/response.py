"""
Tarantool response body parsing.

This module handles the bodies of OK and error responses.
"""

from typing import Any

from msgpack import ExtType

from .base import BaseParser
from ..models import Annotation
from ..protocol.constants import EMPTY_BODY_TEXT
from ..protocol.types import BodyKey
from ..protocol.utils import ValueFormatter


class ResponseParser(BaseParser):
    """Parser for response bodies."""

    @classmethod
    def parse_response(cls, body: dict[int, Any], formatter: ValueFormatter) -> list[Annotation]:
        """
        Describe an OK response.

        Each returned tuple becomes its own line inside a "tuple" group.
        """
        data = body.get(BodyKey.DATA)
        if data is None:
            return [Annotation(EMPTY_BODY_TEXT)]

        if isinstance(data, ExtType) or not isinstance(data, (list, tuple)):
            data = [data]

        tuple_tree = Annotation('tuple')
        for item in data:
            tuple_tree.add(formatter.format(item))
        return [tuple_tree]

    @classmethod
    def parse_error_response(cls, body: dict[int, Any], formatter: ValueFormatter) -> list[Annotation]:
        """Describe an error response by its message."""
        message = body.get(BodyKey.ERROR)
        if message is None:
            return [Annotation(EMPTY_BODY_TEXT)]
        return [Annotation(message if isinstance(message, str) else formatter.format(message))]
