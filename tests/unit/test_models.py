"""
Unit tests for data models

Tests dataclasses describing frames, headers, greetings and annotations.
"""

import unittest

from tarantool_dissector.models import (
    Annotation,
    CommandDescriptor,
    DissectionResult,
    FrameDecision,
    GreetingInfo,
    PacketHeader,
    PacketKind,
)


def _interpreter(body, formatter):
    return []


class TestFrameDecision(unittest.TestCase):
    """Test FrameDecision constructors."""

    def test_complete_frame(self):
        """Test a complete frame decision."""
        decision = FrameDecision.complete_frame(42)
        self.assertTrue(decision.complete)
        self.assertEqual(decision.length, 42)
        self.assertEqual(decision.needed, 0)

    def test_need_more(self):
        """Test a reassembly decision."""
        decision = FrameDecision.need_more(7)
        self.assertFalse(decision.complete)
        self.assertEqual(decision.needed, 7)

    def test_need_more_requires_positive_count(self):
        """Test that a reassembly decision needs at least one byte."""
        with self.assertRaises(ValueError):
            FrameDecision.need_more(0)


class TestPacketHeader(unittest.TestCase):
    """Test PacketHeader properties."""

    def test_request_header(self):
        """Test a request header."""
        header = PacketHeader(code=0x01, sync=7)
        self.assertFalse(header.is_error)
        self.assertIsNone(header.error_code)

    def test_error_header(self):
        """Test the error number carried in an error code."""
        header = PacketHeader(code=0x8024)
        self.assertTrue(header.is_error)
        self.assertEqual(header.error_code, 0x24)
        self.assertIsNone(header.sync)


class TestGreetingInfo(unittest.TestCase):
    """Test GreetingInfo."""

    def test_salt_text(self):
        """Test printable salt rendering."""
        greeting = GreetingInfo(version="Tarantool 1.6.8", salt=b"c2FsdA==" + b" " * 36)
        self.assertEqual(greeting.salt_text, "c2FsdA==")


class TestCommandDescriptor(unittest.TestCase):
    """Test CommandDescriptor summaries."""

    def test_request_summary(self):
        """Test that the request name is capitalized."""
        command = CommandDescriptor('select', False, _interpreter)
        self.assertEqual(command.summary, 'Select request.')

    def test_uppercase_request_summary(self):
        """Test that an uppercase name is kept."""
        command = CommandDescriptor('UNKNOWN', False, _interpreter)
        self.assertEqual(command.summary, 'UNKNOWN request.')

    def test_response_summary(self):
        """Test the response summary."""
        command = CommandDescriptor('OK', True, _interpreter)
        self.assertEqual(command.summary, 'Response.')

    def test_descriptor_is_immutable(self):
        """Test that descriptors cannot be modified."""
        command = CommandDescriptor('call', False, _interpreter)
        with self.assertRaises(AttributeError):
            command.name = 'eval'


class TestAnnotation(unittest.TestCase):
    """Test the annotation tree."""

    def test_add_inherits_range(self):
        """Test that children inherit the parent's byte range."""
        root = Annotation("root", 5, 10)
        child = root.add("child")

        self.assertEqual(child.offset, 5)
        self.assertEqual(child.length, 10)
        self.assertEqual(root.children, [child])

    def test_add_explicit_range(self):
        """Test adding a child with its own range."""
        root = Annotation("root", 0, 128)
        child = root.add("salt", 64, 44)
        self.assertEqual((child.offset, child.length), (64, 44))

    def test_place_is_recursive(self):
        """Test that place assigns the range to all descendants."""
        node = Annotation("tuple")
        leaf = node.add("1, 2")
        node.place(12, 8)

        self.assertEqual((node.offset, node.length), (12, 8))
        self.assertEqual((leaf.offset, leaf.length), (12, 8))

    def test_texts_and_lines(self):
        """Test flattening and indented rendering."""
        root = Annotation("root")
        group = root.add("tuple")
        group.add("1")
        root.add("after")

        self.assertEqual(root.texts(), ["root", "tuple", "1", "after"])
        self.assertEqual(root.lines(), ["root", "  tuple", "    1", "  after"])


class TestDissectionResult(unittest.TestCase):
    """Test DissectionResult helpers."""

    def test_need_more(self):
        """Test a reassembly result."""
        result = DissectionResult.need_more(3)
        self.assertEqual(result.kind, PacketKind.NEED_MORE)
        self.assertEqual(result.needed, 3)
        self.assertEqual(result.consumed, 0)
        self.assertFalse(result.is_complete)
        self.assertEqual(result.descriptions, [])

    def test_descriptions_skip_header_line(self):
        """Test that descriptions start after the header line."""
        tree = Annotation("Tarantool protocol data")
        tree.add("code: 0x01 (select), sync: 0x0001")
        tree.add("SELECT ...")
        result = DissectionResult(kind=PacketKind.REQUEST, consumed=10, tree=tree)

        self.assertTrue(result.is_complete)
        self.assertEqual(result.descriptions, ["SELECT ..."])


if __name__ == '__main__':
    unittest.main()
