"""
Mock Tarantool packets for testing

Builders for greetings and IPROTO packets that can be used in unit tests
to simulate captured traffic without a live server.
"""

import struct

import msgpack

GREETING_VERSION = "Tarantool 1.6.8 (Binary) 3b4cd4f6-8a1b-4a46-8e5b-5e2e8d4a1c2f"
GREETING_SALT = b"QK2HoFZGXTXBq2vFj7soCsHqTo6PGTF575ssUBAJLAI="


def create_greeting(version: str = GREETING_VERSION, salt: bytes = GREETING_SALT,
                    reserved: bytes = b' ' * 19 + b'\n') -> bytes:
    """Create a 128-byte server greeting."""
    first_line = version.encode('ascii').ljust(63, b' ') + b'\n'
    return first_line + salt + reserved


def pack_length(length: int) -> bytes:
    """Pack a length prefix as MessagePack uint32, as the server does."""
    return b'\xce' + struct.pack('>I', length)


def create_packet(header: dict, body=None) -> bytes:
    """Create a length-prefixed IPROTO packet."""
    payload = msgpack.packb(header)
    if body is not None:
        payload += msgpack.packb(body, use_bin_type=True)
    return pack_length(len(payload)) + payload


def create_request(code: int, body: dict | None = None, sync: int = 1) -> bytes:
    """Create a request packet."""
    return create_packet({0x00: code, 0x01: sync}, body if body is not None else {})


def create_select_request(space_id: int = 512, index_id: int = 0, key=None,
                          limit: int = 100, offset: int = 0, iterator: int | None = 0,
                          sync: int = 1) -> bytes:
    """Create a SELECT request packet."""
    body = {
        0x10: space_id,
        0x11: index_id,
        0x12: limit,
        0x13: offset,
        0x20: [1] if key is None else key,
    }
    if iterator is not None:
        body[0x14] = iterator
    return create_request(0x01, body, sync)


def create_ok_response(data=None, sync: int = 1) -> bytes:
    """Create an OK response packet; data=None omits the DATA key."""
    body = {} if data is None else {0x30: data}
    return create_packet({0x00: 0x00, 0x01: sync}, body)


def create_error_response(message: str | None, error_code: int = 0x02, sync: int = 1) -> bytes:
    """Create an error response packet."""
    body = {} if message is None else {0x31: message}
    return create_packet({0x00: 0x8000 | error_code, 0x01: sync}, body)
