import pytest

from hlsdsp.sliding_window import SlidingWindow


def test_first_window_starts_with_zeros():
    window = SlidingWindow(8)
    assert window.push_block([1, 2, 3, 4]) == [0, 0, 0, 0, 1, 2, 3, 4]


def test_windows_overlap_by_half():
    window = SlidingWindow(8)
    blocks = [[1, 2, 3, 4], [5, 6, 7, 8], [9, 10, 11, 12]]
    outputs = [window.push_block(b) for b in blocks]
    for previous, current, out in zip(blocks, blocks[1:], outputs[1:]):
        assert out == previous + current


def test_window_length():
    window = SlidingWindow(1024)
    out = window.push_block([0.5] * 512)
    assert len(out) == 1024


def test_wrong_block_length():
    window = SlidingWindow(8)
    with pytest.raises(ValueError):
        window.push_block([1, 2, 3])


@pytest.mark.parametrize("length", [0, 1, 7])
def test_invalid_length(length):
    with pytest.raises(ValueError):
        SlidingWindow(length)