"""
Tarantool Protocol Package

Re-exports protocol constants, types, value decoding and formatting.
"""

# Import all constants
from .constants import *  # noqa: F401,F403

# Import all enums and types
from .types import *  # noqa: F401,F403

# Import MessagePack decoding functions
from .values import decode_length_prefix, decode_value  # noqa: F401

# Import formatting utilities
from .utils import *  # noqa: F401,F403
