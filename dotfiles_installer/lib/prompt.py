from __future__ import annotations

import logging
import re
from typing import Callable, Optional

logger = logging.getLogger(__name__)

_YES = re.compile(r"^[Yy]")


def confirm(
    question: str,
    *,
    assume_yes: bool = False,
    input_fn: Optional[Callable[[str], str]] = None,
) -> bool:
    """Ask a y/n question. Anything not starting with y/Y is a no, as is EOF."""

    if assume_yes:
        logger.info("%s -> yes (assumed)", question)
        return True

    ask = input_fn or input
    try:
        reply = ask(f"{question} (y/n) ")
    except EOFError:
        reply = ""
    answer = bool(_YES.match(reply.strip()))
    logger.info("%s -> %s", question, "yes" if answer else "no")
    return answer
