"""Benchmark fixtures and configuration."""

from __future__ import annotations

import pytest

from lexis import Classification, Scanner


class ExprScanner(Scanner):
    """Arithmetic expressions with identifiers and line comments."""

    NUMBER = "number"
    NAME = "name"
    OPERATOR = "operator"

    def catchable_patterns(self):
        return [r"[0-9]+(?:\.[0-9]+)?", r"[a-z_][a-z0-9_]*", r"[-+*/()=]"]

    def non_catchable_patterns(self):
        return [r"\s+", r"#[^\n]*"]

    def classify(self, value):
        if value[0].isdigit():
            return Classification(self.NUMBER, float(value))
        if value[0].isalpha() or value[0] == "_":
            return self.NAME
        return self.OPERATOR


@pytest.fixture
def scanner() -> ExprScanner:
    return ExprScanner()


@pytest.fixture
def small_source() -> str:
    """A single short statement."""
    return "total = (price + 1.5) * qty"


@pytest.fixture
def large_source() -> str:
    """Generate a large source (~100KB) of statements and comments."""
    lines = []
    for i in range(2000):
        lines.append(f"# step {i}")
        lines.append(f"value_{i} = (value_{i - 1} + {i}.25) * factor / {i + 1}")
    return "\n".join(lines)
