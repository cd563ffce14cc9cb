"""Command parser for console input."""

import shlex

from cli.models import (
    CommandRequest,
    CorruptCommand,
    GetCommand,
    ListCommand,
    PutCommand,
)


class ParseError(Exception):
    """Raised when command parsing fails."""

    pass


def parse_command(input_line: str) -> CommandRequest:
    """Parse user input into a CommandRequest object.

    Args:
        input_line: Raw user input from REPL

    Returns:
        CommandRequest object (one of Put/Get/List/Corrupt)

    Raises:
        ParseError: If command syntax is invalid
    """
    if not input_line.strip():
        raise ParseError("Empty command")

    try:
        tokens = shlex.split(input_line)
    except ValueError as e:
        raise ParseError(f"Invalid syntax: {e}")

    if not tokens:
        raise ParseError("Empty command")

    command_name = tokens[0].lower()

    if command_name == "put":
        return _parse_put(tokens[1:])
    elif command_name == "get":
        return _parse_get(tokens[1:])
    elif command_name == "list":
        return _parse_list(tokens[1:])
    elif command_name == "corrupt":
        return _parse_corrupt(tokens[1:])
    else:
        raise ParseError(f"Unknown command: {command_name}")


def _parse_put(args: list[str]) -> PutCommand:
    """Parse 'put <content> <filename>' command."""
    if len(args) != 2:
        raise ParseError("Usage: put <content> <filename> (quote content containing spaces)")

    content, filename = args
    return PutCommand(content=content, filename=filename)


def _parse_get(args: list[str]) -> GetCommand:
    """Parse 'get <filename>' command."""
    if len(args) != 1:
        raise ParseError("Usage: get <filename>")

    return GetCommand(filename=args[0])


def _parse_list(args: list[str]) -> ListCommand:
    """Parse 'list' command."""
    if args:
        raise ParseError("Usage: list")

    return ListCommand()


def _parse_corrupt(args: list[str]) -> CorruptCommand:
    """Parse 'corrupt <filename>' command."""
    if len(args) != 1:
        raise ParseError("Usage: corrupt <filename> (Simulates bit rot)")

    return CorruptCommand(filename=args[0])
