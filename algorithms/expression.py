"""
Two-stack evaluator for fully parenthesized arithmetic expressions.

Grammar
-------
    expr := "(" expr op expr ")" | number
    op   := "+" | "-" | "*" | "/"

Tokens must be separated by whitespace, e.g. ``"( ( 2 * ( 3 + 5 ) ) / 4 )"``.
A number is any token `float()` accepts, so ``1e3``, ``1_000``, ``inf`` and
``nan`` are valid operands.

Algorithm
---------
Scan tokens left to right with an operator stack and a value stack:

- ``(``      not pushed as a value; it opens a nesting level that records the
             value stack size, so each level is checked to hold exactly
             ``operand op operand``
- operator   pushed on the operator stack
- number     pushed on the value stack
- ``)``      pop an operator, pop the right then the left operand, push
             ``left op right``

Invariant: the value stack holds the results of every fully reduced
sub-expression seen so far, and each operator waiting on the operator stack
already has its left operand on the value stack. Θ(n) in the token count.

Division follows IEEE-754: dividing by zero gives ``inf``, ``-inf`` or
``nan`` rather than raising.
"""

import numpy as np

from structures.linked_stack import LinkedStack


OPEN, CLOSE, OPERATOR, OPERAND = "(", ")", "op", "operand"

OPERATORS = {
    "+": np.add,
    "-": np.subtract,
    "*": np.multiply,
    "/": np.divide,
}


class MalformedExpressionError(ValueError):
  """The expression does not follow the fully parenthesized grammar."""


def _is_number(token):
  try:
    float(token)
  except ValueError:
    return False
  return True


def tokenize(expression):
  """Split `expression` on whitespace and classify every token.

  Returns
  -------
  list[tuple[str, str]]
      ``(kind, text)`` pairs where kind is one of ``"("``, ``")"``, ``"op"``,
      ``"operand"``.

  Raises
  ------
  MalformedExpressionError
      On a token that is neither a parenthesis, an operator nor a number.
  """
  tokens = []
  for text in expression.split():
    if text == OPEN or text == CLOSE:
      tokens.append((text, text))
    elif text in OPERATORS:
      tokens.append((OPERATOR, text))
    elif _is_number(text):
      tokens.append((OPERAND, text))
    else:
      raise MalformedExpressionError(f"unrecognized token {text!r}")
  return tokens


def apply_operator(op, left, right):
  """Return ``left op right`` as a float with IEEE-754 division."""
  with np.errstate(divide="ignore", invalid="ignore", over="ignore"):
    return float(OPERATORS[op](np.float64(left), np.float64(right)))


def evaluate(expression):
  """Evaluate a fully parenthesized infix expression.

  >>> evaluate("( ( 2 * ( 3 + 5 ) ) / 4 )")
  4.0

  Raises
  ------
  MalformedExpressionError
      On an empty expression, unknown tokens, unbalanced parentheses, an
      operator that is not between exactly two operands (prefix or postfix
      forms), or leftover values.
  """
  tokens = tokenize(expression)
  if not tokens:
    raise MalformedExpressionError("empty expression")

  ops = LinkedStack()
  vals = LinkedStack()
  # One [base, has_operator] entry per open "(": `base` is vals.size() when
  # it opened, so vals.size() - base counts the operands of that level.
  levels = LinkedStack()

  for kind, text in tokens:
    if kind == OPEN or kind == OPERAND:
      # A "(" starts a value, just like a number does
      if levels.is_empty():
        if not vals.is_empty():
          raise MalformedExpressionError(f"unexpected {text!r} after a complete expression")
      else:
        base, has_operator = levels.peek()
        if vals.size() - base != (1 if has_operator else 0):
          raise MalformedExpressionError(f"unexpected operand {text!r}")
      if kind == OPEN:
        levels.push([vals.size(), False])
      else:
        vals.push(float(text))

    elif kind == OPERATOR:
      if levels.is_empty():
        raise MalformedExpressionError(f"operator {text!r} outside parentheses")
      level = levels.peek()
      if level[1] or vals.size() - level[0] != 1:
        raise MalformedExpressionError(f"operator {text!r} needs exactly one left operand")
      level[1] = True
      ops.push(text)

    else:
      if levels.is_empty():
        raise MalformedExpressionError("unbalanced ')'")
      base, has_operator = levels.pop()
      if not has_operator:
        raise MalformedExpressionError("')' without a pending operator")
      if vals.size() - base != 2:
        raise MalformedExpressionError(
            f"operator {ops.peek()!r} is missing an operand")
      op = ops.pop()
      right = vals.pop()
      left = vals.pop()
      vals.push(apply_operator(op, left, right))

  if not levels.is_empty():
    raise MalformedExpressionError(f"{levels.size()} unclosed '('")
  # Each level holds at most one operator and reduces it at ")", so once
  # every "(" is closed the operator stack is empty too.
  if vals.size() != 1:
    raise MalformedExpressionError(
        f"expected a single result, found {vals.size()} values")
  return vals.pop()
