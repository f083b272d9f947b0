"""
Tarantool Protocol Dissector

Main dissector classes turning captured Tarantool traffic into annotated
packet descriptions. Dissection is synchronous and keeps no state between
packets; the stream helper only buffers undecoded bytes.

References:
- Tarantool binary protocol (IPROTO), "Packet structure", "Greeting message"
"""

import logging

from .exceptions import ProtocolError
from .models import (
    Annotation,
    CommandDescriptor,
    DissectionResult,
    FrameDecision,
    PacketHeader,
    PacketKind,
)
from .parsers import FrameParser, GreetingParser
from .protocol import (
    # Constants
    DEFAULT_MAX_BUFFER_SIZE,
    DEFAULT_MAX_FORMAT_DEPTH,
    GREETING_SIZE,
    LENGTH_PREFIX_SIZE,
    NOT_IMPLEMENTED_TEXT,
    NULL_TEXT,
    PROTOCOL_NAME,
    # Formatting
    ValueFormatter,
)
from .registry import lookup_command


class TarantoolDissector:
    """
    Tarantool binary protocol dissector.

    Dissects the packet at the start of a byte span. Each call returns exactly
    one result: a greeting, a request, a response, or a request for more bytes.

    Example:
        dissector = TarantoolDissector()
        result = dissector.dissect(data)
        if result.kind == PacketKind.NEED_MORE:
            wait_for(result.needed)
        else:
            print(result.summary)
            print("\\n".join(result.tree.lines()))
            data = data[result.consumed:]
    """

    def __init__(self, max_depth: int = DEFAULT_MAX_FORMAT_DEPTH):
        """
        Initialize the dissector.

        Args:
            max_depth: Nesting depth of composite values rendered before
                eliding them as "..."
        """
        self.formatter = ValueFormatter(max_depth)
        self._logger = logging.getLogger(__name__)

    def dissect(self, data: bytes) -> DissectionResult:
        """
        Dissect the packet at the start of data.

        Args:
            data: Undecoded bytes at the current stream position

        Returns:
            DissectionResult; for NEED_MORE the caller must retry from the
            same position once result.needed more bytes are available

        Raises:
            ProtocolError: If the stream is malformed and framing is lost
        """
        data = bytes(data)

        if GreetingParser.is_greeting(data) or GreetingParser.is_partial_greeting(data):
            return self._dissect_greeting(data)

        try:
            decision = FrameParser.read_frame(data)
            if not decision.complete:
                self._logger.debug(f"Need {decision.needed} more bytes")
                return DissectionResult.need_more(decision.needed)
            return self._dissect_packet(data[:decision.length], decision)
        except ProtocolError as e:
            self._logger.error(f"Failed to dissect packet: {e}")
            raise

    def _dissect_greeting(self, data: bytes) -> DissectionResult:
        if len(data) < GREETING_SIZE:
            decision = FrameDecision.need_more(GREETING_SIZE - len(data))
            self._logger.debug(f"Greeting incomplete, need {decision.needed} more bytes")
            return DissectionResult.need_more(decision.needed)

        greeting = GreetingParser.parse_greeting(data)
        self._logger.debug(f"Greeting from {greeting.version}")
        return DissectionResult(
            kind=PacketKind.GREETING,
            consumed=GREETING_SIZE,
            summary="Greeting packet.",
            tree=GreetingParser.build_tree(greeting),
            greeting=greeting,
        )

    def _dissect_packet(self, frame: bytes, decision: FrameDecision) -> DissectionResult:
        header, header_size, body, body_size = FrameParser.decode_packet(frame)
        command = lookup_command(header.code)
        self._logger.debug(f"Packet code 0x{header.code:02x} ({command.name}), {decision.length} bytes")

        title = f"{PROTOCOL_NAME} protocol data"
        if command.is_response:
            title += " (response)"
        tree = Annotation(title, 0, decision.length)
        tree.add(self._describe_header(header, command), LENGTH_PREFIX_SIZE, header_size)

        body_offset = LENGTH_PREFIX_SIZE + header_size
        for node in self._interpret(command, body):
            node.place(body_offset, body_size)
            tree.children.append(node)

        return DissectionResult(
            kind=PacketKind.RESPONSE if command.is_response else PacketKind.REQUEST,
            consumed=decision.length,
            summary=command.summary,
            tree=tree,
            header=header,
            command=command,
        )

    def _describe_header(self, header: PacketHeader, command: CommandDescriptor) -> str:
        if header.sync is None:
            sync = NULL_TEXT
        elif isinstance(header.sync, int) and not isinstance(header.sync, bool):
            sync = f"0x{header.sync:04x}"
        else:
            sync = self.formatter.format(header.sync)
        return f"code: 0x{header.code:02x} ({command.name}), sync: {sync}"

    def _interpret(self, command: CommandDescriptor, body) -> list[Annotation]:
        try:
            return command.interpreter(body, self.formatter)
        except (AttributeError, KeyError, TypeError, ValueError) as e:
            self._logger.warning(f"Cannot interpret {command.name} body: {e}")
            return [Annotation(NOT_IMPLEMENTED_TEXT)]


class StreamDissector:
    """
    Buffering front end for one direction of one connection.

    Accepts chunks as the transport delivers them and returns every packet
    that became complete, in arrival order.
    """

    def __init__(self, dissector: TarantoolDissector | None = None,
                 max_buffer: int = DEFAULT_MAX_BUFFER_SIZE):
        """
        Initialize the stream.

        Args:
            dissector: Packet dissector to use (default: a new TarantoolDissector)
            max_buffer: Maximum number of undecoded bytes held
        """
        self.dissector = dissector or TarantoolDissector()
        self.max_buffer = max_buffer
        self.needed = 0
        self._buffer = bytearray()
        self._logger = logging.getLogger(__name__)

    @property
    def pending(self) -> int:
        """Number of buffered, undecoded bytes."""
        return len(self._buffer)

    def feed(self, chunk: bytes) -> list[DissectionResult]:
        """
        Add a chunk and dissect every packet it completes.

        Args:
            chunk: Next bytes of the stream

        Returns:
            Results of completed packets; reassembly requests are not
            returned but recorded in self.needed

        Raises:
            ProtocolError: If the stream is malformed or the undecoded bytes
                exceed the buffer limit; packets completed before the failure
                are available in the exception's results attribute
        """
        self._buffer.extend(chunk)

        results = []
        self.needed = 0
        try:
            while self._buffer:
                result = self.dissector.dissect(self._buffer)
                if not result.is_complete:
                    self.needed = result.needed
                    break
                del self._buffer[:result.consumed]
                results.append(result)
        except ProtocolError as e:
            e.results = results
            raise

        if len(self._buffer) > self.max_buffer:
            raise ProtocolError(
                f"Stream buffer limit exceeded: {len(self._buffer)} > {self.max_buffer} bytes",
                results=results)

        if results:
            self._logger.debug(f"Dissected {len(results)} packets, {self.pending} bytes pending")
        return results

    def reset(self) -> None:
        """Discard buffered bytes, e.g. after a ProtocolError."""
        self._buffer.clear()
        self.needed = 0
