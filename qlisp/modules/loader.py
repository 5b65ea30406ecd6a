from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional, Protocol

from qlisp import Value
from qlisp.config import MODULE_SUFFIX, get_module_roots, get_prelude_file
from qlisp.errors import QLispLexError, QLispSyntaxError, ImportFailure
from qlisp.types.node import Expression
from qlisp.types.environment import Environment
from qlisp.types.error import Error
from qlisp.evaluation.evaluator import evaluate

logger = logging.getLogger(__name__)


class _HasLoad(Protocol):
    env: Environment

    def load(self, path: Path) -> Value: ...


# Map a module name such as "lib/math" to lib/math.lisp underneath a set of roots

def _module_relpath(name: str) -> Path:
    return Path(f"{name}{MODULE_SUFFIX}")


def resolve_module(name: str) -> Optional[Path]:
    rel = _module_relpath(name)
    if rel.is_absolute():
        return rel if rel.is_file() else None
    for root in get_module_roots():
        candidate = root / rel
        if candidate.is_file():
            return candidate
    return None


def load_file(env: Environment, path: Path) -> Value:
    """Evaluate every top-level form of `path` in `env`.

    Raises ImportFailure if the file cannot be read or does not parse.
    """
    try:
        code = path.read_text(encoding='utf-8')
    except (OSError, UnicodeDecodeError) as e:
        raise ImportFailure(path, str(e)) from e
    try:
        return evaluate(env, code, multi_statement=True)
    except (QLispLexError, QLispSyntaxError) as e:
        raise ImportFailure(path, str(e)) from e


def import_module(env: Environment, name: str) -> Value:
    """Load module `name` if it can be found; a missing module is a no-op."""
    path = resolve_module(name)
    if path is None:
        logger.debug("module %r not found on %s, skipping", name, get_module_roots())
        return Expression.sexpr()
    logger.debug("importing %r from %s", name, path)
    result = load_file(env, path)
    if isinstance(result, Error):
        logger.warning("error while importing %s: %s", path, result.message)
    return result


# Prelude convenience loader

def load_prelude(itp: _HasLoad) -> Value:
    std = get_prelude_file()
    if not std.exists():
        raise FileNotFoundError(f"Cannot find prelude at {std}")
    logger.debug("loading prelude from %s", std)
    return itp.load(std)
