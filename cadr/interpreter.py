from __future__ import annotations

import logging
import sys
from typing import Literal

from cadr.builtin.env_builtin import register
from cadr.config import get_prelude_path, get_recursion_limit
from cadr.errors import CadrRecursionError
from cadr.evaluation.evaluator import evaluate
from cadr.reader.lexer import lex
from cadr.reader.parser import Parser
from cadr.types.environment import Environment
from cadr.types.nil import Nil
from cadr.types.node import Node

logger = logging.getLogger(__name__)


class Interpreter:
    """
    One interpreter session. Owns the root Environment, which persists across
    `run` calls: names defined by earlier calls stay visible to later ones,
    even when a later call fails partway through.

    When CADR_RECURSION_LIMIT is set, constructing a session raises the host
    recursion limit with sys.setrecursionlimit. That limit is process-wide: it
    applies to every session and all other code in the process, and it is never
    lowered again.
    """

    def __init__(self, prelude: str | None | Literal['auto'] = 'auto'):
        self.env: Environment = Environment()
        register(self.env)

        limit = get_recursion_limit()
        if limit is not None and limit > sys.getrecursionlimit():
            logger.debug(
                "raising process-wide recursion limit from %s to %s",
                sys.getrecursionlimit(), limit,
            )
            sys.setrecursionlimit(limit)

        if prelude is None:
            pass  # explicit: no prelude
        elif prelude == 'auto':
            path = get_prelude_path()
            if path.is_file():
                logger.debug("loading prelude %s", path)
                self.run(path.read_text(encoding='utf-8'))
            else:
                logger.debug("no prelude at %s", path)
        else:
            self.run(prelude)

    def run(self, text: str) -> Node:
        """Parse and evaluate every form in `text`; return the last value, or Nil."""
        parser = Parser(lex(text))
        result: Node = Nil
        try:
            while not parser.at_end():
                expr = parser.parse_expr()
                logger.debug("parsed: %s", expr)
                result = evaluate(expr, self.env)
                logger.debug("evaluated: %s", result)
        except RecursionError:
            raise CadrRecursionError("Maximum recursion depth exceeded during evaluation") from None
        return result
