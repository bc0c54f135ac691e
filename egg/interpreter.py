from __future__ import annotations

import logging
from pathlib import Path
from typing import Mapping, TextIO

from egg import EggValue
from egg.reader.parser import parse
from egg.types.environment import Environment
from egg.evaluation.evaluator import evaluate
from egg.evaluation.special_forms import SPECIAL_FORMS
from egg.builtin.env_builtin import register

logger = logging.getLogger(__name__)


class Interpreter:
    """
    Orchestrates parsing and evaluating Egg programs.

    The global frame is built once per interpreter. `run` evaluates each
    program in a fresh child of the global frame, so programs do not see each
    other's definitions; `eval` shares one session frame across calls.
    """

    def __init__(
        self,
        special_forms: Mapping | None = None,
        output: TextIO | None = None,
    ):
        self.special_forms: Mapping = special_forms if special_forms is not None else SPECIAL_FORMS
        self.global_env: Environment = register(Environment(), output)
        self.session_env: Environment = Environment(outer=self.global_env)

    def evaluate(self, source: str, env: Environment) -> EggValue:
        expr = parse(source)
        logger.debug("Evaluating program in frame at depth %d", env.depth())
        return evaluate(expr, env, self.special_forms)

    def run(self, *lines: str) -> EggValue:
        """Join `lines` with newlines and evaluate them as one program."""
        program = "\n".join(lines)
        return self.evaluate(program, Environment(outer=self.global_env))

    def eval(self, code: str) -> EggValue:
        """Evaluate `code` in the session frame; definitions persist across calls."""
        return self.evaluate(code, self.session_env)

    def run_file(self, path: str | Path) -> EggValue:
        logger.debug("Running %s", path)
        return self.run(Path(path).read_text(encoding="utf-8"))


_default: Interpreter | None = None


def run(*lines: str) -> EggValue:
    """Run a program with a process-wide default interpreter."""
    global _default
    if _default is None:
        _default = Interpreter()
    return _default.run(*lines)
