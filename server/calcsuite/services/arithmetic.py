from __future__ import annotations

import logging
import math
import operator
import re
from dataclasses import dataclass
from typing import Callable

from calcsuite.core.config import get_settings
from calcsuite.core.exceptions import (
    InvalidExpressionError,
    InvalidInputError,
    InvalidOperatorError,
)
from calcsuite.models.arithmetic import ArithmeticResult
from calcsuite.services.utils import as_number, ensure_finite, format_number, normalize_code

logger = logging.getLogger("calcsuite.services.arithmetic")

_OPERATOR_ALIASES: dict[str, str] = {
    "+": "+",
    "add": "+",
    "-": "-",
    "sub": "-",
    "*": "*",
    "mul": "*",
    "/": "/",
    "div": "/",
}

_BINARY_OPERATORS: dict[str, Callable[[float, float], float]] = {
    "+": operator.add,
    "-": operator.sub,
    "*": operator.mul,
    "/": operator.truediv,
    "%": operator.mod,
}

_ALLOWED_CHARACTERS = re.compile(r"^[0-9+\-*/.()%\s]*$")
_TOKEN_PATTERN = re.compile(r"\s*(?:(\d+\.?\d*|\.\d+)|(.))")


@dataclass(frozen=True)
class _Token:
    kind: str  # "number" | "op" | "end"
    text: str
    position: int


def _tokenize(expression: str) -> list[_Token]:
    tokens: list[_Token] = []
    position = 0
    length = len(expression)
    while position < length:
        match = _TOKEN_PATTERN.match(expression, position)
        if match is None:
            # Only trailing whitespace is left.
            break
        number, symbol = match.groups()
        if number is not None:
            tokens.append(_Token("number", number, match.start(1)))
        elif symbol is not None:
            tokens.append(_Token("op", symbol, match.start(2)))
        position = match.end()
    tokens.append(_Token("end", "", length))
    return tokens


class _ExpressionParser:
    """Recursive-descent evaluator for ``+ - * / %`` and parentheses.

    Grammar::

        expr    := term (('+' | '-') term)*
        term    := unary (('*' | '/' | '%') unary)*
        unary   := ('+' | '-') unary | primary
        primary := NUMBER | '(' expr ')'
    """

    def __init__(self, tokens: list[_Token], max_depth: int) -> None:
        self._tokens = tokens
        self._index = 0
        self._depth = 0
        self._max_depth = max_depth

    def parse(self) -> float:
        value = self._expr()
        token = self._peek()
        if token.kind != "end":
            raise InvalidExpressionError(f"Unexpected '{token.text}' at position {token.position + 1}.")
        return value

    def _peek(self) -> _Token:
        return self._tokens[self._index]

    def _advance(self) -> _Token:
        token = self._tokens[self._index]
        self._index += 1
        return token

    def _enter(self) -> None:
        self._depth += 1
        if self._depth > self._max_depth:
            raise InvalidExpressionError(f"Expression nesting exceeds {self._max_depth} levels.")

    def _leave(self) -> None:
        self._depth -= 1

    def _expr(self) -> float:
        value = self._term()
        while self._peek().kind == "op" and self._peek().text in "+-":
            symbol = self._advance().text
            value = self._apply(symbol, value, self._term())
        return value

    def _term(self) -> float:
        value = self._unary()
        while self._peek().kind == "op" and self._peek().text in "*/%":
            symbol = self._advance().text
            value = self._apply(symbol, value, self._unary())
        return value

    def _unary(self) -> float:
        token = self._peek()
        if token.kind == "op" and token.text in "+-":
            self._advance()
            self._enter()
            try:
                operand = self._unary()
            finally:
                self._leave()
            return -operand if token.text == "-" else operand
        return self._primary()

    def _primary(self) -> float:
        token = self._advance()
        if token.kind == "number":
            return float(token.text)
        if token.kind == "op" and token.text == "(":
            self._enter()
            try:
                value = self._expr()
            finally:
                self._leave()
            closing = self._advance()
            if closing.text != ")":
                raise InvalidExpressionError(f"Missing ')' at position {closing.position + 1}.")
            return value
        if token.kind == "end":
            raise InvalidExpressionError("Unexpected end of expression.")
        raise InvalidExpressionError(f"Unexpected '{token.text}' at position {token.position + 1}.")

    @staticmethod
    def _apply(symbol: str, left: float, right: float) -> float:
        if symbol in "/%" and right == 0:
            raise InvalidExpressionError("Division by zero is not allowed.")
        return _BINARY_OPERATORS[symbol](left, right)


class ArithmeticService:
    def __init__(self, max_expression_length: int | None = None, max_depth: int | None = None) -> None:
        settings = get_settings()
        self.max_expression_length = max_expression_length or settings.max_expression_length
        self.max_depth = max_depth or settings.max_expression_depth

    def apply(self, a: float, b: float, operator_code: str) -> ArithmeticResult:
        received = {"a": a, "b": b, "operator": operator_code}
        symbol = _OPERATOR_ALIASES.get(normalize_code(operator_code))
        if symbol is None:
            raise InvalidOperatorError(f"Invalid operator '{operator_code}'.", received=received)
        if symbol == "/" and b == 0:
            raise InvalidInputError("Division by zero is not allowed.", received=received)

        value = ensure_finite(
            float(_BINARY_OPERATORS[symbol](a, b)),
            "Result is not a finite number.",
            received=received,
        )
        logger.debug("arithmetic.applied", extra={"operator": symbol})
        return ArithmeticResult(
            expression=f"{format_number(a)} {symbol} {format_number(b)}",
            result=as_number(value),
            a=a,
            b=b,
            operator=symbol,
        )

    def evaluate(self, expression: str) -> ArithmeticResult:
        received = {"expression": expression}
        cleaned = expression.strip()
        if not cleaned:
            raise InvalidExpressionError("Expression cannot be empty.", received=received)

        if len(cleaned) > self.max_expression_length:
            raise InvalidExpressionError(
                f"Expression exceeds {self.max_expression_length} characters.", received=received
            )

        if not _ALLOWED_CHARACTERS.match(cleaned):
            raise InvalidExpressionError("Expression contains unsupported characters.", received=received)

        parser = _ExpressionParser(_tokenize(cleaned), self.max_depth)
        try:
            value = parser.parse()
        except InvalidExpressionError as exc:
            exc.received = received
            raise
        except (ValueError, OverflowError) as exc:
            raise InvalidExpressionError("Invalid arithmetic expression.", received=received) from exc

        if not math.isfinite(value):
            raise InvalidExpressionError("Expression does not evaluate to a finite number.", received=received)

        logger.debug("arithmetic.evaluated", extra={"length": len(cleaned)})
        return ArithmeticResult(expression=expression, result=as_number(value))
