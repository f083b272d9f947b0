"""
Tarantool Dissector Exception Classes

Custom exception classes for Tarantool binary protocol dissection.

Only malformed input that destroys stream framing is reported through
exceptions. Incomplete input, unknown commands and unexpected body shapes are
ordinary dissection outcomes and never raise.

References:
- Tarantool binary protocol (IPROTO), "Packet structure"
"""


class DissectorError(Exception):
    """Base exception class for all dissector errors."""
    pass


class ProtocolError(DissectorError):
    """
    Raised when a byte stream can no longer be followed.

    This includes:
    - A length prefix that is not a MessagePack unsigned integer
    - A header or body value that cannot be decoded inside its frame
    - A header that is not a mapping or lacks an integer command code

    Once raised, offsets into the stream are unreliable and the caller should
    stop dissecting it.

    Attributes:
        offset: Position within the dissected span where decoding failed,
            when known
        results: Packets dissected from the same chunk before the failure
    """
    def __init__(self, message, offset=None, results=None):
        super().__init__(message)
        self.offset = offset
        self.results = results if results is not None else []


class ValueDecodeError(ProtocolError):
    """Raised when a MessagePack value is invalid or truncated."""
    pass
