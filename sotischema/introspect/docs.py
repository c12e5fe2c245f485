"""Documentation comments for fields and constructor parameters.

Two source conventions are recognized: ``#:`` comment lines directly above a
field or parameter, and an attribute docstring (a string literal statement
directly below a field). Declarations whose source cannot be retrieved have no
documentation comments.
"""

from __future__ import annotations

import ast
import inspect
import textwrap


def _source_tree(obj: object) -> tuple[ast.Module, list[str]] | None:
    try:
        source = textwrap.dedent(inspect.getsource(obj))
        tree = ast.parse(source)
    except (OSError, TypeError, SyntaxError):
        return None
    return tree, source.splitlines()


def _leading_comment(lines: list[str], lineno: int) -> str | None:
    collected = []
    index = lineno - 2
    while index >= 0 and lines[index].strip().startswith("#:"):
        collected.append(lines[index].strip())
        index -= 1
    if not collected:
        return None
    return "\n".join(reversed(collected))


def _target_name(stmt: ast.stmt) -> str | None:
    if isinstance(stmt, ast.AnnAssign) and isinstance(stmt.target, ast.Name):
        return stmt.target.id
    if (
        isinstance(stmt, ast.Assign)
        and len(stmt.targets) == 1
        and isinstance(stmt.targets[0], ast.Name)
    ):
        return stmt.targets[0].id
    return None


def _docstring(stmt: ast.stmt | None) -> str | None:
    if (
        isinstance(stmt, ast.Expr)
        and isinstance(stmt.value, ast.Constant)
        and isinstance(stmt.value.value, str)
    ):
        return inspect.cleandoc(stmt.value.value)
    return None


def _class_attribute_docs(cls: type) -> dict[str, str]:
    parsed = _source_tree(cls)
    if parsed is None:
        return {}
    tree, lines = parsed
    class_def = next((node for node in tree.body if isinstance(node, ast.ClassDef)), None)
    if class_def is None:
        return {}

    docs: dict[str, str] = {}
    body = class_def.body
    for index, stmt in enumerate(body):
        name = _target_name(stmt)
        if name is None:
            continue
        following = body[index + 1] if index + 1 < len(body) else None
        doc = _leading_comment(lines, stmt.lineno) or _docstring(following)
        if doc:
            docs[name] = doc
    return docs


def attribute_docs(cls: type) -> dict[str, str]:
    """Return documentation comments for class-level fields, bases first."""

    docs: dict[str, str] = {}
    for klass in reversed(cls.__mro__):
        if klass is object:
            continue
        docs.update(_class_attribute_docs(klass))
    return docs


def parameter_docs(cls: type, init: object) -> dict[str, str]:
    """Return documentation comments for the parameters of `init`.

    Generated constructors (dataclasses) have no source of their own; their
    parameters fall back to the documentation of the matching fields.
    """

    parsed = _source_tree(init)
    if parsed is None:
        return attribute_docs(cls)
    tree, lines = parsed
    func_def = next(
        (
            node
            for node in tree.body
            if isinstance(node, (ast.FunctionDef, ast.AsyncFunctionDef))
        ),
        None,
    )
    if func_def is None:
        return {}

    docs: dict[str, str] = {}
    arguments = func_def.args
    for arg in [*arguments.posonlyargs, *arguments.args, *arguments.kwonlyargs]:
        # Comments above the def line belong to the method.
        if arg.lineno == func_def.lineno:
            continue
        doc = _leading_comment(lines, arg.lineno)
        if doc:
            docs[arg.arg] = doc
    return docs
