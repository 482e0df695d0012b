import pytest

from slab_client.core.input_collection import InputCollection
from slab_client.core.models import CutPiece, StockUnit

API_URL = "http://optimizer.test/api/slab"


class DeferredRunner:
    """Holds the outbound call until the test releases it."""

    def __init__(self):
        self.jobs = []

    def __call__(self, work, on_done):
        self.jobs.append((work, on_done))

    def release(self):
        work, on_done = self.jobs.pop(0)
        on_done(work())


def make_inventory(*sizes):
    inventory = InputCollection.of(StockUnit, "S")
    for index, (width, length) in enumerate(sizes):
        if index > 0:
            inventory.add()
        inventory.update(index, "width", width)
        inventory.update(index, "length", length)
    return inventory


def make_pieces(*sizes):
    pieces = InputCollection.of(CutPiece, "P")
    for index, (width, length, quantity) in enumerate(sizes):
        if index > 0:
            pieces.add()
        pieces.update(index, "width", width)
        pieces.update(index, "length", length)
        pieces.update(index, "quantity", quantity)
    return pieces


@pytest.fixture
def deferred_runner():
    return DeferredRunner()


@pytest.fixture
def inventory():
    return make_inventory(("50", "50"))


@pytest.fixture
def pieces():
    return make_pieces(("10", "10", "2"))
