"""Roll evaluation for parsed dice expressions.

Rolling draws fresh values on every call; averages are closed-form and
deterministic. Totals accumulate in Python ints, so a sum past the 32-bit
range of individual terms is returned exactly rather than wrapped.
"""

from __future__ import annotations

import logging
import uuid
from collections.abc import Iterable, Sequence
from datetime import datetime, timezone
from typing import Any, Protocol

from .config import make_rng
from .errors import EmptyExpressionError
from .models import ConstantTerm, DiceTerm, RolledTerm, Term
from .parser import parse, render_expression, render_rolled_term


logger = logging.getLogger(__name__)


class RandomSource(Protocol):
    def randint(self, a: int, b: int) -> int: ...


def _now_utc_iso() -> str:
    return datetime.now(timezone.utc).replace(microsecond=0).isoformat().replace("+00:00", "Z")


def _default_rng() -> RandomSource:
    return make_rng()


def roll_term(term: Term, rng: RandomSource | None = None) -> RolledTerm:
    if isinstance(term, ConstantTerm):
        return RolledTerm(term=term, values=(term.value,))

    if rng is None:
        rng = _default_rng()
    sign = -1 if term.count < 0 else 1
    values = tuple(sign * rng.randint(1, term.sides) for _ in range(abs(term.count)))
    return RolledTerm(term=term, values=values)


def roll(expression: Iterable[Term], rng: RandomSource | None = None) -> list[RolledTerm]:
    if rng is None:
        rng = _default_rng()
    return [roll_term(term, rng) for term in expression]


def total(rolled: Iterable[RolledTerm]) -> int:
    return sum(r.subtotal for r in rolled)


def average_term(term: Term) -> float:
    """Expected value of a term; negative dice counts give negative averages."""

    if isinstance(term, DiceTerm):
        return term.count * (term.sides + 1) / 2
    return float(term.value)


def average(expression: Iterable[Term]) -> float:
    return sum((average_term(t) for t in expression), 0.0)


def _term_report(rolled: RolledTerm) -> dict[str, Any]:
    if isinstance(rolled.term, ConstantTerm):
        return {
            "type": "constant",
            "value": rolled.term.value,
            "subtotal": rolled.subtotal,
        }
    return {
        "type": "dice",
        "count": rolled.term.count,
        "sides": rolled.term.sides,
        "rolls": list(rolled.values),
        "subtotal": rolled.subtotal,
    }


def _explain(rolled: Sequence[RolledTerm], result: int) -> str:
    return "; ".join(render_rolled_term(r) for r in rolled) + f" => {result}"


def roll_from_text(
    text: str,
    *,
    include_average: bool = False,
    rng: RandomSource | None = None,
) -> dict[str, Any]:
    """Parse, validate, then roll. Raises DiceError for invalid input."""

    terms = parse(text)
    if not terms:
        raise EmptyExpressionError()

    source = rng if rng is not None else _default_rng()
    rolled = roll(terms, source)
    result = total(rolled)
    logger.info("Rolled %s => %d", render_expression(terms), result)

    report: dict[str, Any] = {
        "request_id": uuid.uuid4().hex,
        "timestamp": _now_utc_iso(),
        "input": text,
        "expression": render_expression(terms),
        "rng": {"source": f"{type(source).__module__}.{type(source).__name__}"},
        "terms": [_term_report(r) for r in rolled],
        "total": result,
        "explanation": _explain(rolled, result),
    }
    if include_average:
        report["average"] = average(terms)
    return report
