from __future__ import annotations

import logging
import re
from collections.abc import Iterable

from .errors import InvalidTokenError, NumericOverflowError
from .models import INT32_MAX, INT32_MIN, UINT32_MAX, ConstantTerm, DiceTerm, RolledTerm, Term


logger = logging.getLogger(__name__)

# Alternatives are tried in order at each position, so a dice term wins over a
# constant and anything left over is captured as one invalid run.
_TOKEN_RE = re.compile(
    r"""
    (?P<space>\s+)
    |
    (?P<dice>(?P<dice_sign>[+-])?\s*(?P<count>\d*)d(?P<sides>\d+))
    |
    (?P<constant>(?P<constant_sign>[+-])?\s*(?P<value>\d+))
    |
    (?P<invalid>\S+)
    """,
    re.VERBOSE | re.IGNORECASE | re.ASCII,
)


def _sign_of(sign: str | None) -> int:
    return -1 if sign == "-" else 1


# Enough digits for any value up to UINT32_MAX; longer runs are out of range
# without converting them.
_MAX_SIGNIFICANT_DIGITS = 10


def _to_int(digits: str, token: str, position: int, field: str) -> int:
    significant = digits.lstrip("0") or "0"
    if len(significant) > _MAX_SIGNIFICANT_DIGITS:
        logger.debug("Rejecting %d-digit %s in token at %d", len(significant), field, position)
        raise NumericOverflowError(token, position, field)
    return int(significant)


def _checked(value: int, low: int, high: int, token: str, position: int, field: str) -> int:
    if not low <= value <= high:
        logger.debug("Rejecting %s %d in %r", field, value, token)
        raise NumericOverflowError(token, position, field)
    return value


def parse(text: str) -> list[Term]:
    """Parse dice notation into terms, left to right.

    Raises InvalidTokenError on the first token that is neither a dice term
    nor a constant, and NumericOverflowError when a number does not fit.
    """

    terms: list[Term] = []

    for m in _TOKEN_RE.finditer(text):
        kind = m.lastgroup
        if kind == "space":
            continue

        token = m.group(0)
        position = m.start()

        if m.group("dice") is not None:
            sign = _sign_of(m.group("dice_sign"))
            count_str = m.group("count")
            count = sign * _to_int(count_str, token, position, "count") if count_str else sign
            sides = _to_int(m.group("sides"), token, position, "sides")

            count = _checked(count, INT32_MIN, INT32_MAX, token, position, "count")
            if sides == 0:
                logger.debug("Rejecting zero-sided die %r", token)
                raise InvalidTokenError(token, position)
            sides = _checked(sides, 1, UINT32_MAX, token, position, "sides")

            terms.append(DiceTerm(count=count, sides=sides))
            continue

        if m.group("constant") is not None:
            value = _sign_of(m.group("constant_sign")) * _to_int(m.group("value"), token, position, "constant")
            value = _checked(value, INT32_MIN, INT32_MAX, token, position, "constant")
            terms.append(ConstantTerm(value=value))
            continue

        logger.debug("Rejecting token %r at %d in %r", token, position, text)
        raise InvalidTokenError(token, position)

    logger.debug("Parsed %d term(s) from %r", len(terms), text)
    return terms


def render_term(term: Term) -> str:
    if isinstance(term, DiceTerm):
        return f"{term.count}d{term.sides}"
    return str(term.value)


def render_expression(terms: Iterable[Term]) -> str:
    return " + ".join(render_term(t) for t in terms)


def render_rolled_term(rolled: RolledTerm) -> str:
    if isinstance(rolled.term, DiceTerm):
        return f"{render_term(rolled.term)}: rolls {list(rolled.values)} => {rolled.subtotal}"
    return f"{rolled.term.value:+d}"
