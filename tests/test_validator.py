import pytest

from slab_client.core.errors import ValidationError
from slab_client.core.models import CutPiece, StockUnit, parse_numeric
from slab_client.core.validator import (
    NO_VALID_PIECE, NO_VALID_SLAB, RowKind, can_submit, ensure_submittable,
    is_valid_row, submit_diagnostic,
)

from conftest import make_inventory, make_pieces


def _slab(width, length):
    return StockUnit("S1", parse_numeric(width), parse_numeric(length))


def _piece(width, length, quantity):
    return CutPiece("P1", parse_numeric(width), parse_numeric(length), parse_numeric(quantity, integral=True))


def test_stock_row_validity():
    assert is_valid_row(_slab("10", "20"))
    assert not is_valid_row(_slab("0", "20"))
    assert not is_valid_row(_slab("", "20"))
    assert not is_valid_row(_slab("x", "20"))


def test_piece_row_requires_quantity():
    assert is_valid_row(_piece("5", "5", "1"), RowKind.PIECE)
    assert not is_valid_row(_piece("5", "5", "0"), RowKind.PIECE)
    assert not is_valid_row(_piece("5", "5", ""), RowKind.PIECE)
    assert not is_valid_row(_piece("5", "5", "0.5"), RowKind.PIECE)


def test_cannot_submit_with_empty_sides(inventory, pieces):
    assert not can_submit([], pieces)
    assert not can_submit(inventory, [])
    assert can_submit(inventory, pieces)


def test_slab_diagnostic_takes_precedence():
    inventory = make_inventory(("", "10"))
    pieces = make_pieces(("", "", ""))

    assert submit_diagnostic(inventory, pieces) == NO_VALID_SLAB
    assert "valid slab" in submit_diagnostic([], [])


def test_piece_diagnostic_when_stock_is_valid(inventory):
    pieces = make_pieces(("10", "10", "0"))

    assert submit_diagnostic(inventory, pieces) == NO_VALID_PIECE


def test_invalid_rows_do_not_block_valid_ones():
    inventory = make_inventory(("abc", "10"), ("30", "30"))
    pieces = make_pieces(("5", "5", "1"), ("", "", ""))

    assert submit_diagnostic(inventory, pieces) is None


def test_ensure_submittable_raises_with_diagnostic(pieces):
    with pytest.raises(ValidationError, match="valid slab"):
        ensure_submittable([], pieces)


def test_mismatched_row_kind_is_rejected():
    with pytest.raises(TypeError):
        is_valid_row(_slab(10, 10), RowKind.PIECE)
