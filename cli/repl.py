"""REPL with prompt_toolkit for user interaction."""

import os
import sys
from prompt_toolkit import PromptSession
from prompt_toolkit.history import InMemoryHistory

from client.cluster import DFSCluster
from cli.commands import (
    handle_corrupt,
    handle_get,
    handle_list,
    handle_put,
)
from cli.completer import TinyDFSCompleter
from cli.constants import (
    BANNER,
    HELP_TEXT,
    PROMPT_TEXT,
    STYLE,
    WELCOME_HELP,
)
from cli.models import (
    CorruptCommand,
    GetCommand,
    ListCommand,
    PutCommand,
)
from cli.parser import ParseError, parse_command
from common.exceptions import DFSException
from common.logging_config import get_logger

logger = get_logger(__name__)


def clear_screen() -> None:
    """Clear the terminal screen (cross-platform)."""
    if sys.platform == "win32":
        os.system("cls")
    else:
        os.system("clear")


def show_banner() -> None:
    print(f"\n{BANNER}")
    print(WELCOME_HELP)


def dispatch_command(cmd_obj, cluster: DFSCluster) -> str:
    """Dispatch parsed command to appropriate handler."""
    if isinstance(cmd_obj, PutCommand):
        return handle_put(cmd_obj, cluster)
    elif isinstance(cmd_obj, GetCommand):
        return handle_get(cmd_obj, cluster)
    elif isinstance(cmd_obj, ListCommand):
        return handle_list(cmd_obj, cluster)
    elif isinstance(cmd_obj, CorruptCommand):
        return handle_corrupt(cmd_obj, cluster)
    else:
        return f"Unknown command type: {type(cmd_obj)}"


def execute_line(user_input: str, cluster: DFSCluster) -> str:
    """
    Parse and run one console line, rendering failures as text.

    Args:
        user_input: Raw line typed by the user
        cluster: Running cluster

    Returns:
        Output to show the user
    """
    try:
        cmd_obj = parse_command(user_input)
        return dispatch_command(cmd_obj, cluster)
    except ParseError as e:
        return f"Error: {e}"
    except DFSException as e:
        logger.debug(f"Command failed: {e}", exc_info=True)
        return f"Error: {e}"
    except Exception as e:
        logger.error(f"Unexpected error running '{user_input}': {e}", exc_info=True)
        return f"Error: {e}"


def repl_loop(cluster: DFSCluster) -> None:
    """Start interactive REPL with prompt_toolkit."""
    completer = TinyDFSCompleter(cluster.registry)
    history = InMemoryHistory()
    session: PromptSession = PromptSession(
        completer=completer, history=history, style=STYLE
    )

    show_banner()

    while True:
        try:
            user_input = session.prompt([("class:prompt", PROMPT_TEXT)])

            if not user_input.strip():
                continue

            if user_input.strip() == "exit":
                print("Shutting down...")
                break

            if user_input.strip() == "help":
                print(HELP_TEXT)
                continue

            if user_input.strip() == "clear":
                clear_screen()
                show_banner()
                continue

            print(execute_line(user_input, cluster))

        except KeyboardInterrupt:
            continue
        except EOFError:
            print("\nShutting down...")
            break
