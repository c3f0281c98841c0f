import pytest

from tinylisp.builtin.env_builtin import make_global_environment
from tinylisp.evaluation.evaluator import evaluate
from tinylisp.reader.parser import read_program


class FakeConsole:
    """Console double: serves queued input lines and records everything written."""

    def __init__(self, lines=()):
        self.lines = list(lines)
        self.prompts = []
        self.output = []

    def read_line(self, prompt=""):
        self.prompts.append(prompt)
        if not self.lines:
            return None
        return self.lines.pop(0)

    def write(self, text):
        self.output.append(text)

    @property
    def text(self):
        return "".join(self.output)


@pytest.fixture
def console():
    return FakeConsole()


@pytest.fixture
def env(console):
    """Fresh global environment with builtins and constants loaded."""
    return make_global_environment(console)


@pytest.fixture
def run(env):
    """Evaluate every top-level expression of `source`; return the last value."""
    def _run(source):
        result = None
        for expr in read_program(source):
            result = evaluate(expr, env)
        return result
    return _run
