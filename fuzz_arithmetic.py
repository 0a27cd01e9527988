"""Differential fuzzer: compares the calculator with Python's own expression parser.

Run from the project root; prints every mismatch it finds until interrupted.
"""
import ast
import random
import string
from typing import Optional

from calculator.runtime import calculate
from calculator.utils import div_toward_zero

ALPHABET = string.digits + "()+-*/ "


class Unsupported(Exception):
    pass


def _eval_py_node(node: ast.AST) -> int:
    if isinstance(node, ast.Expression):
        return _eval_py_node(node.body)
    elif isinstance(node, ast.Constant) and type(node.value) is int:
        return node.value
    elif isinstance(node, ast.UnaryOp) and isinstance(node.op, ast.USub):
        return -_eval_py_node(node.operand)
    elif isinstance(node, ast.BinOp):
        left = _eval_py_node(node.left)
        right = _eval_py_node(node.right)
        if isinstance(node.op, ast.Add):
            return left + right
        elif isinstance(node.op, ast.Sub):
            return left - right
        elif isinstance(node.op, ast.Mult):
            return left * right
        elif isinstance(node.op, ast.Div):
            if right == 0:
                raise ZeroDivisionError("division by zero")
            return div_toward_zero(left, right)
    raise Unsupported(ast.dump(node))


def eval_py(code: str) -> Optional[int | str]:
    """Reference result, ``None`` where Python's grammar differs from ours"""
    try:
        tree = ast.parse(code.strip(), mode="eval")
    except SyntaxError as e:
        if str(e).startswith("leading zeros in decimal integer literals are not permitted"):
            return None
        return str(e)
    try:
        return _eval_py_node(tree)
    except Unsupported:
        return None  # unary plus, tuples, calls
    except ZeroDivisionError as e:
        return str(e)


def eval_my(code: str) -> int | str:
    try:
        return calculate(code)
    except Exception as e:
        return str(e)


def generate(rng: random.Random, length: int) -> str:
    code = "".join(rng.choices(ALPHABET, k=length))
    # ** and // are operators of their own in Python
    while "**" in code or "//" in code:
        code = code.replace("**", "*").replace("//", "/")
    return code


def find_mismatches(rng: random.Random, iterations: int, length: int = 10) -> list[tuple[str, int | str, int | str]]:
    mismatches = []
    for _ in range(iterations):
        code = generate(rng, length)
        res_py = eval_py(code)
        if res_py is None:
            continue
        res_my = eval_my(code)
        if isinstance(res_py, int) and isinstance(res_my, int) and res_py == res_my:
            continue
        if isinstance(res_py, str) and isinstance(res_my, str):
            continue
        mismatches.append((code, res_py, res_my))
    return mismatches


if __name__ == "__main__":
    rng = random.Random()
    while True:
        for code, res_py, res_my in find_mismatches(rng, iterations=1000):
            print(f"{code!r}\npy: {res_py}\nmy: {res_my}\n\n")
