from __future__ import annotations
from dataclasses import dataclass
from enum import Enum
from typing import Optional

from dropfour.errors import InvalidInput


class Command(Enum):
    COLUMN = "column"
    ENTER = "enter"
    YES = "yes"
    NO = "no"
    QUIT = "quit"
    TOGGLE_AI = "toggle_ai"
    HELP = "help"
    LEFT = "left"
    RIGHT = "right"


@dataclass(frozen=True, slots=True)
class Input:
    command: Command
    column: Optional[int] = None


_ALIASES = {
    "": Command.ENTER,
    "y": Command.YES,
    "yes": Command.YES,
    "n": Command.NO,
    "no": Command.NO,
    "q": Command.QUIT,
    "quit": Command.QUIT,
    "exit": Command.QUIT,
    "stop": Command.QUIT,
    "e": Command.QUIT,
    "s": Command.QUIT,
    "ai": Command.TOGGLE_AI,
    "toggle ai": Command.TOGGLE_AI,
    "h": Command.HELP,
    "help": Command.HELP,
    "?": Command.HELP,
    "<": Command.LEFT,
    "a": Command.LEFT,
    ">": Command.RIGHT,
    "d": Command.RIGHT,
}

ROUND_HELP = (
    "Place a piece in a column by typing a number between 1 and {width}"
    " (the column numbers are visible above the columns)\n"
    "Use < and > (or a and d) to move the cursor, Enter drops at the cursor\n"
    "Type quit to stop the round"
)

SESSION_HELP = """Commands
  help\t\t\tshow this page
  toggle ai\t\ttoggle the ai on/off
  yes\t\t\tconfirm action (only when applicable)
  no\t\t\tconfirm action (only when applicable)
  KEY: Enter\t\tuse highlighted option (only when applicable)
  quit\t\t\tquit
Aliases
  h, ?\t\t\tshort for help
  ai\t\t\tshort for toggle ai
  y\t\t\tshort for yes
  n\t\t\tshort for no
  exit, stop, q, e, s\tshort for quit"""


def parse_input(raw: str, width: Optional[int] = None) -> Input:
    s = raw.strip().lower()
    cmd = _ALIASES.get(s)
    if cmd is not None:
        return Input(cmd)
    if not (s.isascii() and s.isdigit()):
        raise InvalidInput(raw, width)
    # range is checked by Grid.place so the error names the column
    return Input(Command.COLUMN, int(s))
