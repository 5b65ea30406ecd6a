from __future__ import annotations

import logging
from pathlib import Path
from typing import Literal

from qlisp import Value
from qlisp.builtins import register
from qlisp.evaluation.evaluator import evaluate
from qlisp.modules.loader import load_file, load_prelude
from qlisp.types.environment import Environment
from qlisp.types.error import Error

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates reading and evaluating qlisp code.
    Owns the root Environment (builtins + prelude) across calls.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        self.env: Environment = Environment()
        register(self.env)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            try:
                result = load_prelude(self)
            except FileNotFoundError:
                # Be permissive: no prelude found -> proceed
                logger.debug("no prelude found, continuing without one")
            else:
                if isinstance(result, Error):
                    logger.warning("prelude failed to load: %s", result.message)
        elif prelude:
            self.eval_prelude(prelude)

    def eval_prelude(self, code: str) -> Value:
        """Evaluate a string of qlisp definitions, one form after another."""
        return evaluate(self.env, code, multi_statement=True)

    def load(self, path: str | Path) -> Value:
        """Evaluate every form of the file at `path`.

        Raises ImportFailure if it cannot be read or parsed.
        """
        return load_file(self.env, Path(path))

    def eval(self, code: str) -> Value:
        """Evaluate one line of input as a single S-expression.

        Raises QLispLexError / QLispSyntaxError on malformed input; runtime
        failures come back as Error values.
        """
        return evaluate(self.env, code)
