"""Block decoration and stderr output for failure reports."""

from __future__ import annotations

import sys
from typing import TextIO

from assertfmt.lib.errors import require_str


def decorate(title: str, body: str) -> str:
    """Enclose body in a titled header and a footer.

    The block is preceded and followed by an empty line to make it stand out.

    >>> decorate("TITLE", "body")
    '\\n-- TITLE --\\nbody\\n--\\n\\n'
    """
    require_str(title, name="title")
    require_str(body, name="body")
    if body and not body.endswith("\n"):
        body += "\n"
    return f"\n-- {title} --\n{body}--\n\n"


def write_err(
    *message: str,
    stdin: TextIO | None = None,
    stream: TextIO | None = None,
) -> None:
    """Write a message to stderr.

    With no message arguments the message is copied from stdin instead.
    """
    dest = sys.stderr if stream is None else stream
    if message:
        dest.write(" ".join(require_str(part, name="message") for part in message) + "\n")
    else:
        dest.write((sys.stdin if stdin is None else stdin).read())
    dest.flush()
