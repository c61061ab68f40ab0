import pytest

from parity_pyramid.errors import EmptyInputError, InvalidStateError, MalformedRowError
from parity_pyramid.triangle import (
    Cell, Choice, build_rows, build_triangle, iter_rows, parse_row, read_triangle_lines, split_lines,
)


# ---------- parse_row ----------
def test_parse_row_collapses_spaces_and_tabs():
    cells = parse_row("  4 \t\t 5   6\t", 3)
    assert [c.value for c in cells] == [4, 5, 6]
    assert all(c.status is Choice.UNVISITED and c.best_sum is None for c in cells)


def test_parse_row_accepts_leading_zeros_and_signs():
    cells = parse_row("017 -3 +4 034", 4)
    assert [c.value for c in cells] == [17, -3, 4, 34]


def test_parse_row_wrong_count():
    with pytest.raises(MalformedRowError) as err:
        parse_row("1 2 3", 2)
    assert err.value.expected == 2
    assert err.value.actual == 3
    assert "1 2 3" in str(err.value)


@pytest.mark.parametrize("token", ["1x", "abc", "1_000", "3.5", "--2"])
def test_parse_row_bad_token_is_named(token):
    line = f"7 {token}"
    with pytest.raises(MalformedRowError) as err:
        parse_row(line, 2)
    assert err.value.token == token
    assert token in str(err.value)
    assert line in str(err.value)


def test_parse_row_32bit_bounds():
    assert parse_row("2147483647 -2147483648", 2)[0].value == 2147483647
    with pytest.raises(MalformedRowError) as err:
        parse_row("2147483648", 1)
    assert err.value.token == "2147483648"


# ---------- line source ----------
def test_split_lines_skips_blank_lines():
    text = "\n1\n   \n\t\n2 3\r\n\n"
    assert split_lines(text) == ["1", "2 3"]


@pytest.mark.parametrize("sep", ["\x0b", "\x0c", "\x1c", "\u2028"])
def test_split_lines_breaks_only_on_newline(sep):
    lines = split_lines(f"1\n2{sep}3\r\n")
    assert lines == ["1", f"2{sep}3"]
    with pytest.raises(MalformedRowError):
        build_triangle(lines)


def test_read_triangle_lines(tmp_path):
    p = tmp_path / "tri.txt"
    p.write_text("\n1\n\n2 3\n", encoding="utf-8")
    assert read_triangle_lines(p) == ["1", "2 3"]


def test_read_triangle_lines_missing_file(tmp_path):
    with pytest.raises(FileNotFoundError):
        read_triangle_lines(tmp_path / "nope.txt")


# ---------- build_rows / build_triangle ----------
def test_build_rows_links_shared_children(small_rows):
    assert [len(r) for r in small_rows] == [1, 2, 3]
    root = small_rows[0][0]
    assert root.below is small_rows[1][0]
    assert root.diagonal_right is small_rows[1][1]
    # neighbouring cells share a child
    assert small_rows[1][0].diagonal_right is small_rows[1][1].below
    assert small_rows[1][0].diagonal_right is small_rows[2][1]


def test_bottom_row_has_no_children(small_rows):
    assert all(c.is_bottom for c in small_rows[-1])
    for row in small_rows[:-1]:
        assert all(c.below is not None and c.diagonal_right is not None for c in row)


def test_empty_input():
    with pytest.raises(EmptyInputError):
        build_triangle([])
    with pytest.raises(EmptyInputError):
        build_triangle(split_lines("\n   \n"))


def test_first_row_must_have_one_number():
    with pytest.raises(MalformedRowError):
        build_triangle(["1 2"])


@pytest.mark.parametrize("text", [
    "1\n2 3\n4 5",        # short row
    "1\n2 3\n4 5 6 7",    # long row
    "1\n2 3\n4 5 6\n7 8 9",
])
def test_rows_must_grow_by_one(text):
    with pytest.raises(MalformedRowError):
        build_triangle(split_lines(text))


def test_bad_token_aborts_build():
    with pytest.raises(MalformedRowError) as err:
        build_triangle(split_lines("1\n2 x3"))
    assert err.value.token == "x3"


def test_iter_rows_matches_build_rows(small_rows):
    walked = list(iter_rows(small_rows[0][0]))
    assert len(walked) == len(small_rows)
    for got, expected in zip(walked, small_rows):
        assert all(a is b for a, b in zip(got, expected))


def test_single_row():
    root = build_triangle(["42"])
    assert root.value == 42
    assert root.is_bottom
    assert [len(r) for r in iter_rows(root)] == [1]


# ---------- Cell.record ----------
def test_record_is_write_once():
    cell = Cell(3)
    assert cell.record(Choice.BELOW, 3) == 3
    with pytest.raises(InvalidStateError):
        cell.record(Choice.DIAGONAL_RIGHT, 10)
    assert cell.status is Choice.BELOW
    assert cell.best_sum == 3


def test_record_rejects_inconsistent_sum():
    with pytest.raises(InvalidStateError):
        Cell(1).record(Choice.INFEASIBLE, 5)
    with pytest.raises(InvalidStateError):
        Cell(1).record(Choice.BELOW)
    with pytest.raises(InvalidStateError):
        Cell(1).record(Choice.UNVISITED)


def test_cells_compare_by_identity():
    a, b = Cell(5), Cell(5)
    assert a != b
    assert len({a, b}) == 2
