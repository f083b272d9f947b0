"""
Tarantool Dissector Data Models

Structured data classes describing dissection results.
Provides clear interfaces instead of generic dictionaries.

References:
- Tarantool binary protocol (IPROTO)
"""

from dataclasses import dataclass, field
from enum import IntEnum
from typing import Any, Callable, Iterator

from .protocol.constants import ERROR_CODE_FLAG


class PacketKind(IntEnum):
    """Outcome of one dissection call."""
    GREETING = 0    # Server greeting
    REQUEST = 1     # Client request
    RESPONSE = 2    # OK or error response
    NEED_MORE = 3   # Reassembly request


@dataclass(frozen=True)
class FrameDecision:
    """
    Framing decision for the bytes currently available.

    Attributes:
        complete: Whether a whole packet is available
        length: Total packet length including the length prefix (complete only)
        needed: Additional bytes required before decoding can proceed (incomplete only)
    """
    complete: bool
    length: int = 0
    needed: int = 0

    @classmethod
    def complete_frame(cls, length: int) -> 'FrameDecision':
        return cls(complete=True, length=length)

    @classmethod
    def need_more(cls, count: int) -> 'FrameDecision':
        if count <= 0:
            raise ValueError(f"Additional byte count must be positive, got {count}")
        return cls(complete=False, needed=count)


@dataclass
class PacketHeader:
    """
    Decoded IPROTO packet header.

    Attributes:
        code: Command code (TYPE key)
        sync: Correlation id (SYNC key), None when absent
    """
    code: int
    sync: Any = None

    @property
    def is_error(self) -> bool:
        """Check whether the code marks an error response."""
        return self.code >= ERROR_CODE_FLAG

    @property
    def error_code(self) -> int | None:
        """Server error number carried in the low bits of an error code."""
        return self.code & ~ERROR_CODE_FLAG if self.is_error else None


@dataclass
class GreetingInfo:
    """
    Server greeting contents.

    Attributes:
        version: Server version line with padding removed
        salt: Raw 44-byte authentication salt
    """
    version: str
    salt: bytes

    @property
    def salt_text(self) -> str:
        """Salt as printable text (it is base64 on the wire)."""
        return self.salt.decode('ascii', errors='replace').rstrip()


@dataclass(frozen=True)
class CommandDescriptor:
    """
    Static description of a command code.

    Attributes:
        name: Display name
        is_response: Whether packets with this code are responses
        interpreter: Callable(body, formatter) -> list[Annotation]
    """
    name: str
    is_response: bool
    interpreter: Callable = field(compare=False)

    @property
    def summary(self) -> str:
        """One-line traffic summary for packets of this command."""
        if self.is_response:
            return "Response."
        # Only a lowercase initial is raised, so "UNKNOWN" stays as is
        name = self.name[:1].upper() + self.name[1:] if self.name[:1].islower() else self.name
        return f"{name} request."


@dataclass
class Annotation:
    """
    Annotation tree node covering a byte range of the dissected span.

    Children added without an explicit range inherit the parent's range.
    """
    text: str
    offset: int = 0
    length: int = 0
    children: list['Annotation'] = field(default_factory=list)

    def add(self, text: str, offset: int | None = None, length: int | None = None) -> 'Annotation':
        """Append a child node and return it."""
        child = Annotation(
            text=text,
            offset=self.offset if offset is None else offset,
            length=self.length if length is None else length,
        )
        self.children.append(child)
        return child

    def place(self, offset: int, length: int) -> None:
        """Assign a byte range to this node and all of its descendants."""
        self.offset = offset
        self.length = length
        for child in self.children:
            child.place(offset, length)

    def walk(self, depth: int = 0) -> Iterator[tuple[int, 'Annotation']]:
        """Yield (depth, node) pairs in pre-order."""
        yield depth, self
        for child in self.children:
            yield from child.walk(depth + 1)

    def texts(self) -> list[str]:
        """Texts of this node and its descendants in pre-order."""
        return [node.text for _, node in self.walk()]

    def lines(self, indent: str = '  ') -> list[str]:
        """Render the tree as indented text lines."""
        return [f"{indent * depth}{node.text}" for depth, node in self.walk()]


@dataclass
class DissectionResult:
    """
    Result of dissecting the bytes at the start of a span.

    Exactly one of greeting, request, response or reassembly request.

    Attributes:
        kind: Outcome of the call
        consumed: Bytes occupied by the dissected packet (0 for NEED_MORE)
        needed: Additional bytes required (NEED_MORE only)
        summary: One-line description for a traffic summary column
        tree: Annotation tree for the packet
        header: Decoded header (requests and responses)
        command: Command descriptor chosen for the header code
        greeting: Greeting contents (greetings only)
    """
    kind: PacketKind
    consumed: int = 0
    needed: int = 0
    summary: str = ""
    tree: Annotation | None = None
    header: PacketHeader | None = None
    command: CommandDescriptor | None = None
    greeting: GreetingInfo | None = None

    @property
    def is_complete(self) -> bool:
        """Check whether a packet was dissected."""
        return self.kind != PacketKind.NEED_MORE

    @property
    def descriptions(self) -> list[str]:
        """Body annotation texts following the header line, in pre-order."""
        if self.tree is None or self.kind == PacketKind.GREETING:
            return []
        texts = []
        for node in self.tree.children[1:]:
            texts.extend(node.texts())
        return texts

    @classmethod
    def need_more(cls, needed: int) -> 'DissectionResult':
        return cls(kind=PacketKind.NEED_MORE, needed=needed)
