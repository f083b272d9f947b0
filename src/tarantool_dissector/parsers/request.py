"""
Tarantool request body parsing.

This module renders the bodies of data manipulation and call requests
as short, SQL-like descriptions.
"""

from typing import Any

from .base import BaseParser
from ..models import Annotation
from ..protocol.types import BodyKey
from ..protocol.utils import ValueFormatter


class RequestParser(BaseParser):
    """Parser for request bodies."""

    @classmethod
    def parse_select(cls, body: dict[int, Any], formatter: ValueFormatter) -> list[Annotation]:
        """
        Describe a SELECT request.

        Reference: Tarantool binary protocol, IPROTO_SELECT
        """
        descr = (
            f"SELECT FROM space {cls.get_field(body, BodyKey.SPACE_ID)} "
            f"WHERE index({cls.get_field(body, BodyKey.INDEX_ID)}) = ({formatter.join(body.get(BodyKey.KEY))}) "
            f"LIMIT {cls.get_field(body, BodyKey.LIMIT)} "
            f"OFFSET {cls.get_field(body, BodyKey.OFFSET)} "
            f"ITERATOR {cls.get_field(body, BodyKey.ITERATOR)}"
        )
        return [Annotation(descr)]

    @classmethod
    def parse_insert(cls, body: dict[int, Any], formatter: ValueFormatter) -> list[Annotation]:
        """
        Describe an INSERT or REPLACE request.

        The tuple is emitted as a nested group below the space id.
        """
        tuple_tree = Annotation('tuple')
        tuple_tree.add(formatter.join(body.get(BodyKey.TUPLE)))
        return [
            Annotation(f"space_id: {cls.get_field(body, BodyKey.SPACE_ID)}"),
            tuple_tree,
        ]

    @classmethod
    def parse_delete(cls, body: dict[int, Any], formatter: ValueFormatter) -> list[Annotation]:
        """Describe a DELETE request."""
        descr = (
            f"DELETE FROM space({cls.get_field(body, BodyKey.SPACE_ID)}) "
            f"WHERE index({cls.get_field(body, BodyKey.INDEX_ID)}) = ({formatter.join(body.get(BodyKey.KEY))})"
        )
        return [Annotation(descr)]

    @classmethod
    def parse_call(cls, body: dict[int, Any], formatter: ValueFormatter) -> list[Annotation]:
        """Describe a CALL request as name(arg, ...)."""
        return [cls._describe_invocation(body, BodyKey.FUNCTION_NAME, formatter)]

    @classmethod
    def parse_eval(cls, body: dict[int, Any], formatter: ValueFormatter) -> list[Annotation]:
        """Describe an EVAL request as expression(arg, ...)."""
        return [cls._describe_invocation(body, BodyKey.EXPRESSION, formatter)]

    @classmethod
    def _describe_invocation(cls, body: dict[int, Any], name_key: int,
                             formatter: ValueFormatter) -> Annotation:
        name = body.get(name_key)
        if not isinstance(name, str):
            name = cls.get_field(body, name_key)
        arguments = formatter.join(body.get(BodyKey.TUPLE))
        return Annotation(f"{name}({arguments})")
