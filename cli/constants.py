"""Console constants."""

from prompt_toolkit.styles import Style

COMMANDS = ["put", "get", "list", "corrupt", "clear", "exit", "help"]

# Commands whose first argument is a registered filename.
FILENAME_COMMANDS = ("get", "corrupt")

STYLE = Style.from_dict(
    {
        "prompt": "#2E86C1 bold",
    }
)

BANNER = "--- TinyDFS Console ---"
WELCOME_HELP = "Commands: put <text_content> <filename>, get <filename>, list, corrupt <filename>, exit\n"

PROMPT_TEXT = "DFS> "

HELP_TEXT = """Available commands:
  put <content> <filename>    Store text content as a file (quote content with spaces)
  get <filename>              Read a file and print its content
  list                        List stored files and their block counts
  corrupt <filename>          Overwrite the file's first block (simulates bit rot)
  clear                       Clear screen and redisplay the banner
  help                        Show this help
  exit                        Exit the console

Examples:
  put hello a.txt
  put "hello world" b.txt
  get a.txt
  corrupt a.txt"""
