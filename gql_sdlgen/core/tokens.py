"""Literal text tokens used to lay out SDL.

    "{\\n"  => BLOCK_OPEN
    "}\\n"  => BLOCK_CLOSE
    "["    => LIST_OPEN
    "]"    => LIST_CLOSE
    "!"    => NON_NULL
    ": "   => KEY_SEP
    "( "   => ARGS_OPEN
    ") "   => ARGS_CLOSE
    ","    => ARG_SEP
"""

from enum import Enum


class SDLToken(Enum):
    """Structural token and the text it renders as."""
    BLOCK_OPEN = "{\n"
    BLOCK_CLOSE = "}\n"
    NEWLINE = "\n"
    SPACE = " "
    NON_NULL = "!"
    LIST_OPEN = "["
    LIST_CLOSE = "]"
    KEY_SEP = ": "
    ARGS_OPEN = "( "
    ARGS_CLOSE = ") "
    ARG_SEP = ","


def render(token: SDLToken) -> str:
    """Return the literal text for a token."""
    return token.value
