from slab_client.core.data_manager import DataManager
from slab_client.core.orchestrator import run_inline
from slab_client.core.schemas import OptimizationResult


def _transport(request):
    return OptimizationResult.model_validate({"slabUsed": 1, "unfittedPieceId": ["P2"], "image": []})


def _manager():
    return DataManager(api_url="http://optimizer.test/api/slab", timeout=5, runner=run_inline, transport=_transport)


def test_starts_with_one_row_per_collection():
    manager = _manager()

    assert [row.id for row in manager.inventory] == ["S1"]
    assert [row.id for row in manager.pieces] == ["P1"]
    assert manager.state.is_editing
    assert manager.result_model is None


def test_collection_signals_fire_on_add_and_remove():
    manager = _manager()
    events = []
    manager.inventory_changed_signal.connect(lambda: events.append("inventory"))
    manager.pieces_changed_signal.connect(lambda: events.append("pieces"))

    manager.add_inventory()
    manager.remove_inventory(0)
    manager.remove_inventory(0)
    manager.add_piece()

    assert events == ["inventory", "inventory", "pieces"]
    assert len(manager.inventory) == 1


def test_run_optimization_emits_states_and_exposes_result_model():
    manager = _manager()
    states = []
    manager.state_changed_signal.connect(states.append)

    manager.update_inventory(0, "width", "100")
    manager.update_inventory(0, "length", "60")
    manager.update_piece(0, "width", "20")
    manager.update_piece(0, "length", "20")
    manager.update_piece(0, "quantity", "4")

    assert manager.run_optimization() is True

    assert [state.phase.value for state in states] == ["pending", "success"]
    assert manager.has_optimization_result()
    assert manager.result_model.unfit_count == 1
    assert manager.clear_results() is True
    assert manager.result_model is None


def test_configure_updates_connection():
    manager = _manager()

    manager.configure("http://other.test/api/slab", 15)

    assert manager.api_url == "http://other.test/api/slab"
    assert manager.timeout == 15
