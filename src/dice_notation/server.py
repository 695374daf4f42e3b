from __future__ import annotations

import logging

from mcp.server.fastmcp import FastMCP

from .config import make_rng, settings
from .dice import roll_from_text
from .errors import DiceError


logger = logging.getLogger(__name__)

mcp = FastMCP(settings.server_name)

_rng = make_rng(settings.rng_seed)


@mcp.tool()
def roll_dice(text: str, average: bool = False):
    """Roll dice notation such as '2d20 + 5' or '-d8 - 3'.

    Input: text (string), average (bool) to include the expected value
    Output: structured JSON with the per-die rolls, total and explanation

    Raises a hard error (exception) on invalid input.
    """

    try:
        return roll_from_text(text, include_average=average, rng=_rng)
    except DiceError as e:
        logger.info("Rejected roll request %r: %s", text, e)
        # Fail-fast: surface stable error codes in the message.
        raise ValueError(str(e)) from None


def run() -> None:
    logging.basicConfig(level=settings.log_level.upper())
    # Default transport is stdio.
    mcp.run()


if __name__ == "__main__":
    run()
