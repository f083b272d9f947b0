"""
Unit tests for exception classes

Tests custom exception hierarchy and error information.
"""

import unittest

from tarantool_dissector.exceptions import (
    DissectorError,
    ProtocolError,
    ValueDecodeError
)


class TestExceptionHierarchy(unittest.TestCase):
    """Test exception class hierarchy."""

    def test_base_exception(self):
        """Test base DissectorError exception."""
        exc = DissectorError("Base error")
        self.assertIsInstance(exc, Exception)
        self.assertEqual(str(exc), "Base error")

    def test_protocol_error_inheritance(self):
        """Test ProtocolError inheritance."""
        exc = ProtocolError("Unsynchronized stream")
        self.assertIsInstance(exc, DissectorError)
        self.assertEqual(str(exc), "Unsynchronized stream")

    def test_value_decode_error_inheritance(self):
        """Test ValueDecodeError inheritance."""
        exc = ValueDecodeError("Truncated value")
        self.assertIsInstance(exc, ProtocolError)
        self.assertIsInstance(exc, DissectorError)


class TestProtocolErrorOffset(unittest.TestCase):
    """Test ProtocolError offset attribute."""

    def test_offset_default(self):
        """Test that offset defaults to None."""
        self.assertIsNone(ProtocolError("Malformed").offset)

    def test_offset_value(self):
        """Test an explicit offset."""
        exc = ValueDecodeError("Truncated value", 5)
        self.assertEqual(exc.offset, 5)
        self.assertEqual(str(exc), "Truncated value")

    def test_catch_as_base(self):
        """Test catching subclasses through the base class."""
        with self.assertRaises(DissectorError):
            raise ValueDecodeError("Invalid value", 0)


if __name__ == '__main__':
    unittest.main()
