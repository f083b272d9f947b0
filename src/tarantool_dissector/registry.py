"""
Tarantool Command Registry

Immutable table mapping command codes to display names and body parsers.
"""

from types import MappingProxyType

from .models import CommandDescriptor
from .parsers import BaseParser, RequestParser, ResponseParser
from .protocol.constants import ERROR_CODE_FLAG
from .protocol.types import CommandCode

COMMANDS = MappingProxyType({
    CommandCode.SELECT: CommandDescriptor('select', False, RequestParser.parse_select),
    CommandCode.INSERT: CommandDescriptor('insert', False, RequestParser.parse_insert),
    CommandCode.REPLACE: CommandDescriptor('replace', False, RequestParser.parse_insert),
    CommandCode.UPDATE: CommandDescriptor('update', False, BaseParser.parse_not_implemented),
    CommandCode.DELETE: CommandDescriptor('delete', False, RequestParser.parse_delete),
    CommandCode.CALL: CommandDescriptor('call', False, RequestParser.parse_call),
    CommandCode.AUTH: CommandDescriptor('auth', False, BaseParser.parse_not_implemented),
    CommandCode.EVAL: CommandDescriptor('eval', False, RequestParser.parse_eval),
    CommandCode.UPSERT: CommandDescriptor('upsert', False, BaseParser.parse_not_implemented),

    # Admin commands
    CommandCode.PING: CommandDescriptor('ping', False, BaseParser.parse_not_implemented),

    # Response code of every successful reply
    CommandCode.OK: CommandDescriptor('OK', True, ResponseParser.parse_response),
})

# Error codes are not enumerated: any code with ERROR_CODE_FLAG set is an error
ERROR_COMMAND = CommandDescriptor('ERROR', True, ResponseParser.parse_error_response)
UNKNOWN_COMMAND = CommandDescriptor('UNKNOWN', False, BaseParser.parse_not_implemented)


def lookup_command(code: int) -> CommandDescriptor:
    """
    Resolve a header command code.

    Args:
        code: TYPE value of the packet header

    Returns:
        CommandDescriptor for the code; ERROR for any code with the error
        flag set, UNKNOWN for codes outside the table
    """
    if code >= ERROR_CODE_FLAG:
        return ERROR_COMMAND
    return COMMANDS.get(code, UNKNOWN_COMMAND)
