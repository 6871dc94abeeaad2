import io

import pytest

from boundedds.deque import CAPACITY as DEQUE_CAPACITY
from boundedds.reverse import (
    backward_deque,
    backward_jump_in,
    backward_stack,
    forward_deque,
    forward_jump_in,
    forward_stack,
    main,
)
from boundedds.stack import CAPACITY as STACK_CAPACITY

SHORT = "hello"
LONG = "abcdefghijklmnopqrstuvwxyz"


@pytest.mark.parametrize("forward", [forward_stack, forward_deque, forward_jump_in])
def test_forward_keeps_order(forward):
    assert forward(SHORT) == SHORT


@pytest.mark.parametrize(
    "backward", [backward_stack, backward_deque, backward_jump_in]
)
def test_backward_reverses(backward):
    assert backward(SHORT) == SHORT[::-1]


@pytest.mark.parametrize(
    "func",
    [
        forward_stack,
        backward_stack,
        forward_deque,
        backward_deque,
        forward_jump_in,
        backward_jump_in,
    ],
)
def test_empty_message(func):
    assert func("") == ""


def test_stack_truncates_to_capacity():
    assert forward_stack(LONG) == LONG[:STACK_CAPACITY]
    assert backward_stack(LONG) == LONG[:STACK_CAPACITY][::-1]


def test_deque_keeps_one_slot_free():
    kept = LONG[: DEQUE_CAPACITY - 1]
    assert forward_deque(LONG) == kept
    assert backward_deque(LONG) == kept[::-1]
    assert forward_jump_in(LONG) == kept
    assert backward_jump_in(LONG) == kept[::-1]


def test_main_stack_mode(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("abc\n\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert " Forward: abc\n" in out
    assert "Backward: cba\n" in out
    assert out.endswith("\nBye, ...\n")


def test_main_jump_in_mode_stops_at_eof(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("xyz\n"))
    assert main(["--mode", "jump-in"]) == 0
    out = capsys.readouterr().out
    assert " Forward: xyz\n" in out
    assert "Backward: zyx\n" in out
    assert out.count("Message ? ") == 2