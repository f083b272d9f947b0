"""
Tarantool Protocol Constants

Protocol constants, fixed layout sizes and dissector defaults.
"""

# Protocol Constants
# Reference: Tarantool binary protocol, "Greeting message"
TARANTOOL_PORT = 3301           # Conventional Tarantool listen port
PROTOCOL_NAME = "Tarantool"     # Protocol column label

# Greeting Layout
GREETING_MARKER = b"Tarantool"  # First bytes of every server greeting
GREETING_SIZE = 128             # Greeting is always 128 bytes
GREETING_VERSION_SIZE = 64      # First line: server version text
GREETING_SALT_OFFSET = 64       # Second line: base64 salt
GREETING_SALT_SIZE = 44         # Salt length in bytes
GREETING_RESERVED_OFFSET = 108  # Remainder of the second line is unused

# Packet Framing
# Reference: Tarantool binary protocol, "Packet structure"
# The length is always sent as MessagePack uint32 (0xce + 4 bytes).
LENGTH_PREFIX_SIZE = 5

# Any response code with this bit set is an error response
ERROR_CODE_FLAG = 0x8000

# Annotation Text
NULL_TEXT = "null"
EMPTY_BODY_TEXT = "(empty response body)"
NOT_IMPLEMENTED_TEXT = "parser not yet implemented (or unknown packet?)"
TRUNCATED_TEXT = "..."

# Default Values
DEFAULT_MAX_FORMAT_DEPTH = 32                # Nesting depth rendered before eliding
DEFAULT_MAX_BUFFER_SIZE = 16 * 1024 * 1024   # Pending bytes a stream may hold
