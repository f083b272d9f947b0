"""
Tarantool greeting parsing.

The server opens every connection with a fixed 128-byte greeting made of
two 64-byte text lines: the server version and a base64 salt.
"""

from .base import BaseParser
from ..models import Annotation, GreetingInfo
from ..protocol.constants import (
    GREETING_MARKER,
    GREETING_RESERVED_OFFSET,
    GREETING_SALT_OFFSET,
    GREETING_SALT_SIZE,
    GREETING_SIZE,
    GREETING_VERSION_SIZE,
    PROTOCOL_NAME,
)


class GreetingParser(BaseParser):
    """Parser for the server greeting."""

    @staticmethod
    def is_greeting(data: bytes) -> bool:
        """Check whether data starts with the greeting marker."""
        return data[:len(GREETING_MARKER)] == GREETING_MARKER

    @staticmethod
    def is_partial_greeting(data: bytes) -> bool:
        """Check whether data is a non-empty prefix of the greeting marker."""
        return 0 < len(data) < len(GREETING_MARKER) and GREETING_MARKER.startswith(data)

    @classmethod
    def parse_greeting(cls, data: bytes) -> GreetingInfo:
        """
        Parse the greeting fields.

        Args:
            data: at least GREETING_SIZE bytes starting with the marker

        Returns:
            GreetingInfo with version text and raw salt

        Reference: Tarantool binary protocol, "Greeting message"
        """
        cls.validate_data_length(data, GREETING_SIZE, "Greeting")

        return GreetingInfo(
            version=cls.extract_string(data, 0, GREETING_VERSION_SIZE),
            salt=bytes(data[GREETING_SALT_OFFSET:GREETING_SALT_OFFSET + GREETING_SALT_SIZE]),
        )

    @classmethod
    def build_tree(cls, greeting: GreetingInfo) -> Annotation:
        """Annotation tree for a parsed greeting."""
        tree = Annotation(f"{PROTOCOL_NAME} greeting packet", 0, GREETING_SIZE)
        tree.add(f"Server version: {greeting.version}", 0, GREETING_VERSION_SIZE)
        tree.add(f"Salt: {greeting.salt_text}", GREETING_SALT_OFFSET, GREETING_SALT_SIZE)
        tree.add("Reserved space", GREETING_RESERVED_OFFSET, GREETING_SIZE - GREETING_RESERVED_OFFSET)
        return tree
