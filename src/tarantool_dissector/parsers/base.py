"""
Base parser class with common utilities for Tarantool packet parsing.
"""

from typing import Any

from ..models import Annotation
from ..protocol.constants import NOT_IMPLEMENTED_TEXT, NULL_TEXT
from ..protocol.utils import ValueFormatter, format_value


class BaseParser:
    """Base class for all Tarantool packet parsers."""

    @staticmethod
    def get_field(body: dict, key: int, default: str = NULL_TEXT) -> str:
        """
        Render a scalar body field as text.

        Numbers render as plain numerals; any other value renders the way
        the value formatter renders it.

        Args:
            body: decoded body mapping
            key: body key
            default: text used when the key is absent

        Returns:
            Field text
        """
        value = body.get(key)
        if value is None:
            return default
        if isinstance(value, (int, float)) and not isinstance(value, bool):
            return str(value)
        return format_value(value)

    @staticmethod
    def extract_string(data: bytes, offset: int, length: int, encoding: str = 'ascii') -> str:
        """
        Extract and clean a string from binary data.

        Args:
            data: binary data
            offset: offset into data
            length: maximum string length
            encoding: string encoding

        Returns:
            Cleaned string
        """
        raw_bytes = data[offset:offset + length]
        # Remove null bytes, padding and the line terminator
        return raw_bytes.rstrip(b'\x00 \r\n').decode(encoding, errors='replace')

    @staticmethod
    def validate_data_length(data: bytes, expected_min_length: int, name: str = "data") -> None:
        """
        Validate that data meets minimum length requirements.

        Raises:
            ValueError: If data is too short
        """
        if len(data) < expected_min_length:
            raise ValueError(f"{name} too short: got {len(data)} bytes, need at least {expected_min_length}")

    @classmethod
    def parse_not_implemented(cls, body: Any, formatter: ValueFormatter) -> list[Annotation]:
        """Placeholder for commands whose body layout is not modeled."""
        return [Annotation(NOT_IMPLEMENTED_TEXT)]
