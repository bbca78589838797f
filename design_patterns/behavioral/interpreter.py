"""
Interpreter Pattern - Arithmetic
================================

Core Design: Represent an arithmetic sentence as a tree of expression
objects, each of which knows how to interpret itself.

Grammar:
- expression := number | expression expression operator
- operator   := "+" | "-" | "*" | "/"

Sentences are written in postfix (reverse Polish) notation, e.g.
"10 4 -" or "2 3 4 * +". Division by zero raises ZeroDivisionError.
"""

import re
from abc import ABC, abstractmethod
from typing import Dict, List, Type, Union

Number = Union[int, float]


class Expression(ABC):

    @abstractmethod
    def interpret(self) -> Number:
        pass


class NumberExpression(Expression):

    def __init__(self, value: Number):
        self.value = value

    def interpret(self) -> Number:
        return self.value

    def __repr__(self):
        return f"NumberExpression({self.value!r})"


class BinaryExpression(Expression):
    symbol = "?"

    def __init__(self, left: Expression, right: Expression):
        self.left = left
        self.right = right

    def __repr__(self):
        return f"({self.left!r} {self.symbol} {self.right!r})"


class AddExpression(BinaryExpression):
    symbol = "+"

    def interpret(self) -> Number:
        return self.left.interpret() + self.right.interpret()


class SubtractExpression(BinaryExpression):
    symbol = "-"

    def interpret(self) -> Number:
        return self.left.interpret() - self.right.interpret()


class MultiplyExpression(BinaryExpression):
    symbol = "*"

    def interpret(self) -> Number:
        return self.left.interpret() * self.right.interpret()


class DivideExpression(BinaryExpression):
    symbol = "/"

    def interpret(self) -> Number:
        divisor = self.right.interpret()
        if divisor == 0:
            raise ZeroDivisionError("Cannot divide by zero")
        return self.left.interpret() / divisor


OPERATORS: Dict[str, Type[BinaryExpression]] = {
    cls.symbol: cls
    for cls in (AddExpression, SubtractExpression, MultiplyExpression, DivideExpression)
}


NUMBER_PATTERN = re.compile(r"-?\d+(\.\d+)?")


def _parse_number(token: str) -> Number:
    # plain decimal numerals only, no nan/inf/underscores/exponents
    match = NUMBER_PATTERN.fullmatch(token)
    if match is None:
        raise ValueError(f"Unknown token: {token!r}")
    return float(token) if match.group(1) else int(token)


def parse(text: str) -> Expression:
    """Build an expression tree from a whitespace separated postfix sentence"""
    stack: List[Expression] = []
    for token in text.split():
        operator = OPERATORS.get(token)
        if operator is None:
            stack.append(NumberExpression(_parse_number(token)))
            continue
        if len(stack) < 2:
            raise ValueError(f"Operator {token!r} needs two operands")
        right = stack.pop()
        left = stack.pop()
        stack.append(operator(left, right))

    if len(stack) != 1:
        raise ValueError(f"Malformed expression: {text!r}")
    return stack[0]


# ==================== DEMONSTRATION ====================

def main():
    print("=" * 60)
    print("INTERPRETER PATTERN DEMONSTRATION")
    print("=" * 60)
    print()

    print("1. Hand-built expression trees:")
    add = AddExpression(NumberExpression(2), NumberExpression(4))
    subtract = SubtractExpression(NumberExpression(10), NumberExpression(4))
    multiply = MultiplyExpression(NumberExpression(2), NumberExpression(4))
    for expression in (add, subtract, multiply):
        print(f"  {expression!r} = {expression.interpret()}")
    print()

    print("2. Parsed postfix sentences:")
    for sentence in ("2 3 4 * +", "20 4 / 1 -"):
        print(f"  {sentence} = {parse(sentence).interpret()}")
    print()

    print("3. Divide-by-zero guard:")
    try:
        parse("1 0 /").interpret()
    except ZeroDivisionError as exc:
        print(f"  Error: {exc}")
    print()

    print("=" * 60)


if __name__ == "__main__":
    main()
