import random

import pytest

from slab_client.core.input_collection import InputCollection
from slab_client.core.models import CutPiece, StockUnit


def test_new_collection_holds_one_labelled_row():
    inventory = InputCollection.of(StockUnit, "S")

    assert len(inventory) == 1
    assert inventory[0].id == "S1"


def test_add_appends_blank_rows_with_sequential_labels():
    pieces = InputCollection.of(CutPiece, "P")
    pieces.add()
    pieces.add()

    assert [row.id for row in pieces] == ["P1", "P2", "P3"]
    assert pieces[2].width.is_empty


def test_remove_last_row_is_rejected():
    inventory = InputCollection.of(StockUnit, "S")

    assert inventory.remove(0) is False
    assert len(inventory) == 1


def test_remove_preserves_order_and_labels():
    inventory = InputCollection.of(StockUnit, "S")
    inventory.add()
    inventory.add()

    assert inventory.remove(1) is True
    assert [row.id for row in inventory] == ["S1", "S3"]


def test_labels_are_not_reused_after_removal():
    inventory = InputCollection.of(StockUnit, "S")
    inventory.add()
    inventory.add()
    inventory.remove(2)
    inventory.add()

    assert [row.id for row in inventory] == ["S1", "S2", "S4"]


def test_remove_out_of_range_is_noop():
    inventory = InputCollection.of(StockUnit, "S")
    inventory.add()

    assert inventory.remove(5) is False
    assert len(inventory) == 2


def test_length_never_drops_below_one():
    rng = random.Random(7)
    pieces = InputCollection.of(CutPiece, "P")
    for _ in range(500):
        if rng.random() < 0.4:
            pieces.add()
        else:
            pieces.remove(rng.randrange(0, len(pieces) + 1))
        assert len(pieces) >= 1


def test_update_empty_string_yields_empty():
    inventory = InputCollection.of(StockUnit, "S")
    inventory.update(0, "width", "40")

    assert inventory.update(0, "width", "").is_empty
    assert inventory[0].width.is_empty


def test_update_malformed_text_does_not_corrupt_rows():
    inventory = InputCollection.of(StockUnit, "S")
    inventory.add()
    inventory.update(1, "length", "30")

    value = inventory.update(0, "width", "wide")

    assert value.is_invalid
    assert inventory[0].width.is_invalid
    assert inventory[1].length.value == 30
    assert [row.id for row in inventory] == ["S1", "S2"]


def test_update_quantity_truncates_to_integer():
    pieces = InputCollection.of(CutPiece, "P")

    assert pieces.update(0, "quantity", "2.7").value == 2
    assert pieces.update(0, "width", "2.7").value == 2.7


def test_update_unknown_field_or_index_raises():
    inventory = InputCollection.of(StockUnit, "S")

    with pytest.raises(KeyError):
        inventory.update(0, "quantity", "3")
    with pytest.raises(IndexError):
        inventory.update(3, "width", "3")


def test_valid_rows_filters_in_order():
    inventory = InputCollection.of(StockUnit, "S")
    inventory.add()
    inventory.add()
    inventory.update(0, "width", "10")
    inventory.update(0, "length", "10")
    inventory.update(2, "width", "5")
    inventory.update(2, "length", "7")

    rows = inventory.valid_rows(lambda row: row.width.is_positive() and row.length.is_positive())

    assert [row.id for row in rows] == ["S1", "S3"]
