import logging

import numpy as np
import pytest

from shingles import (
    ElementShingles2D,
    InvalidShingleParameters,
    TextShingles2D,
    windowed_2d,
    windowed_2d_with_step,
)
from shingles.types import RowOffsets, ScalarOffset, Uninitialized
from shingles.utils.text import split_rows


def as_lists(windows):
    return [[list(part) for part in w] for w in windows]


def as_strs(windows):
    return [[str(part) for part in w] for w in windows]


def test_shingles_2d_empty_str():
    assert list(windowed_2d(["", ""], [2, 2])) == []


def test_shingles_2d_num():
    a = list(range(1, 9))
    v = [a[0:4], a[4:8]]
    expected = [
        [[1, 2], [5, 6]],
        [[2, 3], [6, 7]],
        [[3, 4], [7, 8]],
    ]
    assert as_lists(windowed_2d(v, [2, 2])) == expected


def test_shingles_2d_num_with_step():
    v = [[1, 2, 3, 4], [5, 6, 7, 8]]
    expected = [
        [[1, 2], [5, 6]],
        [[3, 4], [7, 8]],
    ]
    assert as_lists(windowed_2d_with_step(v, [2, 2], [2, 2])) == expected


def test_shingles_2d_str():
    v = split_rows("abcd\nefgh\nijkl")
    expected = [
        ["abc", "efg", "ijk"],
        ["bcd", "fgh", "jkl"],
    ]
    assert as_strs(windowed_2d(v, [3, 3])) == expected


def test_shingles_2d_str_with_step():
    v = split_rows("abcd\nefgh")
    expected = [
        ["ab", "ef"],
        ["cd", "gh"],
    ]
    assert as_strs(windowed_2d_with_step(v, [2, 2], [2, 2])) == expected


def test_row_blocks_move_down():
    rows = [[1, 2, 3], [4, 5, 6], [7, 8, 9]]
    expected = [
        [[1, 2], [4, 5]],
        [[2, 3], [5, 6]],
        [[4, 5], [7, 8]],
        [[5, 6], [8, 9]],
    ]
    assert as_lists(windowed_2d(rows, [2, 2])) == expected


def test_uneven_rows_need_one_full_row():
    rows = [[1, 2, 3, 4], [5]]
    expected = [
        [[1, 2], [5]],
        [[2, 3], []],
        [[3, 4], []],
    ]
    assert as_lists(windowed_2d(rows, [2, 2])) == expected


def test_uneven_text_rows():
    rows = ["привет", "ok"]
    expected = [
        ["при", "ok"],
        ["рив", "k"],
        ["иве", ""],
        ["вет", ""],
    ]
    assert as_strs(windowed_2d(rows, [3, 2])) == expected


def test_text_rows_keep_separate_byte_cursors():
    rows = ["ab€d", "€€€€"]
    sh = windowed_2d(rows, [2, 2])
    first = next(sh)
    assert as_strs([first]) == [["ab", "€€"]]
    second = next(sh)
    assert as_strs([second]) == [["b€", "€€"]]
    assert isinstance(sh.cursor, RowOffsets)
    assert sh.cursor.offsets == (2, 6)


def test_cursor_variants():
    sh = windowed_2d([[1, 2, 3], [4, 5, 6]], [2, 2])
    assert isinstance(sh.cursor, Uninitialized)
    next(sh)
    assert sh.cursor == ScalarOffset(1)

    text = windowed_2d(["abc", "def"], [2, 2])
    assert isinstance(text, TextShingles2D)
    next(text)
    assert text.cursor == RowOffsets((1, 1))


def test_grid_smaller_than_window():
    assert list(windowed_2d([[1, 2, 3]], [2, 2])) == []
    assert list(windowed_2d([], [1, 1])) == []
    assert list(windowed_2d(["abc"], [4, 1])) == []


def test_not_restartable():
    sh = windowed_2d(["abcd", "efgh"], [2, 2])
    assert len(list(sh)) == 3
    assert list(sh) == []


def test_numpy_grid():
    grid = np.arange(12).reshape(3, 4)
    sh = windowed_2d_with_step(grid, [2, 3], [2, 1])
    assert isinstance(sh, ElementShingles2D)
    windows = list(sh)
    assert as_lists(windows) == [
        [[0, 1], [4, 5], [8, 9]],
        [[2, 3], [6, 7], [10, 11]],
    ]
    assert np.shares_memory(windows[0][1].to_numpy(), grid)


def test_size_and_step_properties():
    sh = windowed_2d_with_step(["ab"], (2, 1), (1, 3))
    assert sh.size == (2, 1)
    assert sh.step == (1, 3)


@pytest.mark.parametrize(
    "size,step",
    [([0, 1], [1, 1]), ([1, 0], [1, 1]), ([1, 1], [0, 1]), ([1, 1], [1, 0]), ([1], [1, 1]), ([1, 1], [1, 1, 1])],
)
def test_invalid_parameters(size, step):
    with pytest.raises(InvalidShingleParameters):
        windowed_2d_with_step([[1, 2]], size, step)
    with pytest.raises(InvalidShingleParameters):
        windowed_2d_with_step(["ab"], size, step)


def test_logs_row_block_moves(caplog):
    with caplog.at_level(logging.DEBUG, logger="shingles.core.shingles_2d"):
        list(windowed_2d([[1, 2], [3, 4], [5, 6]], [2, 2]))
    messages = [r.getMessage() for r in caplog.records]
    assert any("moving to row 1" in m for m in messages)
    assert any("exhausted" in m for m in messages)


def test_text_row_blocks_reset_cursors():
    rows = ["abc", "дежз", "ийкл", "mnop"]
    sh = windowed_2d_with_step(rows, [3, 2], [1, 2])
    first_block = [next(sh), next(sh)]
    assert sh.cursor == RowOffsets((2, 4))
    second_block = list(sh)
    assert as_strs(first_block + second_block) == [
        ["abc", "деж"],
        ["bc", "ежз"],
        ["ийк", "mno"],
        ["йкл", "nop"],
    ]
    assert second_block[0][0].start == 0 and second_block[0][1].start == 0


def test_element_row_blocks_step_by_several_rows():
    rows = [[1, 2, 3], [4, 5, 6, 7], [8, 9, 10, 11], [12, 13, 14, 15]]
    assert as_lists(windowed_2d_with_step(rows, [3, 2], [1, 2])) == [
        [[1, 2, 3], [4, 5, 6]],
        [[2, 3], [5, 6, 7]],
        [[8, 9, 10], [12, 13, 14]],
        [[9, 10, 11], [13, 14, 15]],
    ]
