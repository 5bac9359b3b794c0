"""Tests for function composition helpers."""

from fpkit.core.function import constant, flow, identity, pipe


def test_identity():
    marker = object()
    assert identity(marker) is marker


def test_constant():
    always = constant(5)
    assert always() == 5
    assert always(1, 2, key="ignored") == 5


def test_pipe():
    assert pipe(1) == 1
    assert pipe(1, lambda n: n + 1, lambda n: n * 10) == 20
    assert pipe("a", str.upper, lambda s: s + "b") == "Ab"


def test_flow():
    add = lambda x, y: x + y
    assert flow(add, str)(1, 2) == "3"
    assert flow()(4) == 4
    assert flow(str.strip, len)("  ab  ") == 2
