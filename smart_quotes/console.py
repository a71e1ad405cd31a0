from __future__ import annotations

from typing import TextIO

DEFAULT_QUIT_COMMAND = "exit"


def read_until(stream: TextIO, quit_command: str = DEFAULT_QUIT_COMMAND) -> str:
    """Read lines until one equals `quit_command` (ignoring surrounding whitespace).

    The sentinel line is not included. End of stream also stops reading, so
    piped input works without a trailing quit line.
    """

    buf: list[str] = []
    for line in stream:
        if line.strip() == quit_command:
            break
        buf.append(line)
    return "".join(buf)
