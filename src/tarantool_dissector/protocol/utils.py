"""
Tarantool Protocol Utilities

Rendering of decoded MessagePack values for annotations.
"""

from typing import Any

from msgpack import ExtType

from .constants import DEFAULT_MAX_FORMAT_DEPTH, NULL_TEXT, TRUNCATED_TEXT


class ValueFormatter:
    """
    Recursive value-to-text renderer.

    Rendering rules:
        int, float  -> numeral
        str         -> "text" (embedded quotes are not escaped)
        bool, None  -> true, false, null
        dict        -> {a, b, key = value}; keys 1..n render positionally
        list, tuple -> {a, b} when nested inside another value
        other       -> the value's own textual form

    Values nested deeper than max_depth render as "...".
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_FORMAT_DEPTH):
        if max_depth < 0:
            raise ValueError(f"max_depth must be non-negative, got {max_depth}")
        self.max_depth = max_depth

    def format(self, value: Any, depth: int = 0) -> str:
        """Render a single decoded value."""
        if value is None:
            return NULL_TEXT
        if isinstance(value, bool):
            return 'true' if value else 'false'
        if isinstance(value, (int, float)):
            return str(value)
        if isinstance(value, str):
            return f'"{value}"'
        if isinstance(value, ExtType):
            return str(value)
        if isinstance(value, (dict, list, tuple)):
            if depth >= self.max_depth:
                return TRUNCATED_TEXT
            if isinstance(value, dict):
                return '{' + ', '.join(self._format_entries(value, depth + 1)) + '}'
            return '{' + ', '.join(self.format(item, depth + 1) for item in value) + '}'
        return repr(value) if isinstance(value, (bytes, bytearray)) else str(value)

    def join(self, values: Any, separator: str = ', ') -> str:
        """
        Render the elements of a top-level sequence (a key, a tuple).

        Args:
            values: Sequence of decoded values; None renders empty and any
                other non-sequence renders as a single element
            separator: Element separator

        Returns:
            Joined element text without enclosing brackets
        """
        if values is None:
            return ''
        if isinstance(values, ExtType) or not isinstance(values, (list, tuple)):
            return self.format(values)
        return separator.join(self.format(item) for item in values)

    def _format_entries(self, mapping: dict, depth: int) -> list[str]:
        # Positional part: integer keys 1, 2, ... without gaps
        positional = []
        index = 1
        int_keys = {key for key in mapping if type(key) is int}
        while index in int_keys:
            positional.append(self.format(mapping[index], depth))
            index += 1

        keyed = []
        for key, item in mapping.items():
            if type(key) is int and 1 <= key < index:
                continue
            key_text = key if isinstance(key, str) else self.format(key, depth)
            keyed.append(f'{key_text} = {self.format(item, depth)}')

        return positional + keyed


_default_formatter = ValueFormatter()


def format_value(value: Any) -> str:
    """Render a decoded value with the default depth bound."""
    return _default_formatter.format(value)


def join_values(values: Any, separator: str = ', ') -> str:
    """Render sequence elements with the default depth bound."""
    return _default_formatter.join(values, separator)
