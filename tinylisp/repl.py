"""Line-oriented read-eval-print loop.

Each input line is one form. `exit` or end of input ends the session.
"""

import logging
import sys
from typing import TextIO

from tinylisp.config import get_prompt
from tinylisp.interpreter import Interpreter

logger = logging.getLogger("REPL")


def repl(
    interp: Interpreter | None = None,
    instream: TextIO | None = None,
    outstream: TextIO | None = None,
    prompt: str | None = None,
) -> None:
    interp = interp if interp is not None else Interpreter()
    instream = instream if instream is not None else sys.stdin
    outstream = outstream if outstream is not None else sys.stdout
    prompt = prompt if prompt is not None else get_prompt()

    while True:
        outstream.write(prompt)
        outstream.flush()
        line = instream.readline()
        if not line:
            logger.debug("End of input")
            outstream.write("\n")
            break
        line = line.strip()
        if line == "exit":
            break
        if not line:
            continue
        outstream.write(interp.evaluate(line) + "\n")
