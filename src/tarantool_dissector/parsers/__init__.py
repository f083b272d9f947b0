"""
Tarantool packet parsing module.

This module provides specialized parsers for the parts of the Tarantool
binary protocol: framing, the greeting, and request and response bodies.
"""

from .base import BaseParser
from .frame import FrameParser
from .greeting import GreetingParser
from .request import RequestParser
from .response import ResponseParser

__all__ = [
    'BaseParser',
    'FrameParser',
    'GreetingParser',
    'RequestParser',
    'ResponseParser'
]
