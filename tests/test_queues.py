import io

import pytest

from boundedds.queues import (
    CircularQueue,
    LinearQueue,
    ResetQueue,
    ShiftQueue,
    TagQueue,
    main,
)
from boundedds.stack import EmptyError, FullError


def test_fifo_order():
    queues = [
        LinearQueue(10),
        ResetQueue(10),
        ShiftQueue(10),
        CircularQueue(10),
        TagQueue(10),
    ]
    for queue in queues:
        for item in (4, 5, 6):
            queue.add(item)
        assert [queue.delete() for _ in range(3)] == [4, 5, 6]
        assert queue.is_empty()


def test_delete_from_empty_raises():
    queues = [LinearQueue(5), ResetQueue(5), ShiftQueue(5), CircularQueue(5), TagQueue(5)]
    for queue in queues:
        with pytest.raises(EmptyError):
            queue.delete()


def test_invalid_capacity_rejected():
    with pytest.raises(ValueError):
        LinearQueue(0)
    with pytest.raises(ValueError):
        ResetQueue(0)
    with pytest.raises(ValueError):
        ShiftQueue(0)
    with pytest.raises(ValueError):
        CircularQueue(0)
    with pytest.raises(ValueError):
        TagQueue(0)


@pytest.mark.parametrize(
    "kind, held",
    [(LinearQueue, 5), (ResetQueue, 5), (ShiftQueue, 5), (TagQueue, 5), (CircularQueue, 4)],
)
def test_holds_items_until_full(kind, held):
    queue = kind(5)
    for item in range(held):
        queue.add(item)
    assert queue.is_full()
    assert len(queue) == held
    with pytest.raises(FullError):
        queue.add(held)


def _fill_and_drain(queue, count):
    for item in range(count):
        queue.add(item)
    for _ in range(count):
        queue.delete()


def test_linear_does_not_reuse_drained_slots():
    queue = LinearQueue(3)
    _fill_and_drain(queue, 3)
    assert queue.is_empty()
    assert queue.is_full()
    with pytest.raises(FullError):
        queue.add(9)


def test_reset_rewinds_when_drained():
    queue = ResetQueue(3)
    _fill_and_drain(queue, 3)
    queue.add(9)
    assert queue.delete() == 9


def test_reset_stays_full_when_partly_drained():
    queue = ResetQueue(3)
    for item in range(3):
        queue.add(item)
    queue.delete()
    with pytest.raises(FullError):
        queue.add(9)
    assert len(queue) == 2


def test_shift_reuses_freed_front_slots():
    queue = ShiftQueue(4)
    for item in (1, 2, 3, 4):
        queue.add(item)
    assert queue.delete() == 1
    queue.add(5)
    assert len(queue) == 4
    assert [queue.delete() for _ in range(4)] == [2, 3, 4, 5]


def test_shift_render_starts_at_zero_after_shift():
    queue = ShiftQueue(3)
    for item in (1, 2, 3):
        queue.add(item)
    queue.delete()
    queue.add(4)
    assert queue.render().startswith("--0---1---2---\n")


def test_circular_wraps_around():
    queue = CircularQueue(4)
    out = []
    for item in range(10):
        queue.add(item)
        out.append(queue.delete())
    assert out == list(range(10))
    assert queue.is_empty()


def test_tag_wraps_around_and_fills_every_slot():
    queue = TagQueue(3)
    queue.add(1)
    queue.add(2)
    queue.delete()
    queue.add(3)
    queue.add(4)
    assert queue.is_full()
    assert [queue.delete() for _ in range(3)] == [2, 3, 4]


def test_circular_render():
    queue = CircularQueue(10)
    queue.add(7)
    assert queue.render() == "--1---\n  7 \n------\n\n"


def test_linear_render_after_delete():
    queue = LinearQueue(10)
    queue.add(1)
    queue.add(22)
    queue.delete()
    assert queue.render() == "--1---\n 22 \n------\n\n"


def test_tag_render_lists_all_items_when_full():
    queue = TagQueue(2)
    queue.add(8)
    queue.add(9)
    assert queue.render().splitlines()[1].split() == ["8", "9"]


@pytest.mark.parametrize(
    "argv, text, expected",
    [
        (
            ["--kind", "tag"],
            "3 4 -1 -1 -1 -2\n",
            ["3 is inserted", "4 is deleted", "***** Queue is empty. *****"],
        ),
        (
            ["--kind", "circular", "--capacity", "3"],
            "1 2 3 -5\n",
            ["2 is inserted", "***** Queue is full. *****"],
        ),
    ],
)
def test_main(monkeypatch, capsys, argv, text, expected):
    monkeypatch.setattr("sys.stdin", io.StringIO(text))
    assert main(argv) == 0
    out = capsys.readouterr().out
    for message in expected:
        assert message in out