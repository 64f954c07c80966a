"""
Tests for the Store: the public calculator surface and its Qt signals.
"""
import pytest

from strategycalc.app.state import Store
from strategycalc.model.results import SummaryStatus
from strategycalc.model.slots import Category, CellKey

M = Category.MILITARY
E = Category.ECONOMY


class TestInitialState:
    def test_defaults(self, store):
        assert store.days == 3
        assert store.sync_pair is False
        assert store.sync_all_slots is False
        assert len(store.slots(M)) == 1
        assert len(store.slots(E)) == 1
        assert store.results == []
        assert store.summary_status is SummaryStatus.NOT_GENERATED
        assert store.summary_text == "Not generated"
        assert store.initial_total(M) == 0

    def test_accepts_category_strings(self, store):
        store.add_slot("economy")
        assert len(store.slots("economy")) == 2


class TestStructure:
    def test_add_and_remove_emit_slots_changed(self, store, recorder):
        rec = recorder(store.slots_changed)
        store.add_slot(M)
        store.remove_slot(E)
        store.remove_slot(E)
        assert rec.calls == [("military",), ("economy",)]

    def test_days_property_clamps(self, store, recorder):
        rec = recorder(store.days_changed)
        store.days = 0
        assert store.days == 1
        store.days = 1
        assert rec.calls == [(1,)]
        assert all(s.day_count == 1 for s in store.slots(M) + store.slots(E))


class TestCells:
    def test_pair_sync_via_store(self, store, recorder):
        store.set_sync_pair_mode(True)
        rec = recorder(store.cells_changed)

        store.set_cell_value(M, 0, 1, 20.0)

        assert store.cell_value(E, 0, 1) == 20.0
        assert rec.calls == [([CellKey(M, 0, 1), CellKey(E, 0, 1)],)]

    def test_global_sync_supersedes_pair(self, store):
        store.add_slot(M)
        store.add_slot(E)
        store.add_slot(E)
        store.set_sync_pair_mode(True)
        store.set_sync_global_mode(True)

        store.set_cell_value(E, 2, 2, 33.0)

        for category in Category:
            for slot in store.slots(category):
                assert slot.cells == [0.0, 0.0, 33.0]

    def test_enabling_global_sync_uses_first_military_slot(self, store, recorder):
        store.add_slot(E)
        store.set_cell_value(M, 0, 0, 10.0)
        store.set_cell_value(E, 1, 0, 70.0)
        rec = recorder(store.sync_modes_changed)

        store.set_sync_global_mode(True)

        assert rec.calls == [(False, True)]
        assert store.cell_value(E, 0, 0) == 10.0
        assert store.cell_value(E, 1, 0) == 10.0

    def test_toggle_same_value_is_noop(self, store, recorder):
        rec = recorder(store.sync_modes_changed)
        store.set_sync_pair_mode(False)
        assert rec.count == 0

    def test_edit_out_of_range_is_ignored(self, store, recorder):
        rec = recorder(store.cells_changed)
        store.set_cell_value(M, 5, 0, 1.0)
        store.set_cell_value(M, 0, 9, 1.0)
        assert rec.count == 0

    def test_unrelated_edit_still_propagates_after_toggles(self, store):
        store.set_sync_global_mode(True)
        store.set_cell_value(M, 0, 0, 5.0)
        store.set_sync_global_mode(False)
        store.set_sync_pair_mode(True)

        store.set_cell_value(E, 0, 2, -12.5)

        assert store.cell_value(M, 0, 2) == -12.5
        assert store.cell_value(M, 0, 0) == 5.0


class TestParameters:
    def test_set_slot_param(self, store, recorder):
        rec = recorder(store.slot_param_changed)
        store.set_slot_param(M, 0, "max_value", 6)
        store.set_slot_param(M, 0, "use_sign", False)
        store.set_slot_param(M, 0, "use_sign", False)

        slot = store.slots(M)[0]
        assert slot.max_value == 6
        assert slot.use_sign is False
        assert rec.calls == [("military", 0, "max_value"), ("military", 0, "use_sign")]

    def test_max_value_not_clamped_until_generate(self, store):
        store.set_slot_param(E, 0, "max_value", -3)
        assert store.slots(E)[0].max_value == -3
        store.generate()
        assert store.slots(E)[0].max_value == 1

    def test_unknown_param_raises(self, store):
        with pytest.raises(ValueError):
            store.set_slot_param(M, 0, "colour", 1)

    def test_missing_slot_is_ignored(self, store):
        store.set_slot_param(M, 3, "max_value", 5)
        assert [s.max_value for s in store.slots(M)] == [100]

    def test_initial_total(self, store, recorder):
        rec = recorder(store.initial_totals_changed)
        store.set_initial_total(E, 40)
        store.set_initial_total(E, 40)
        assert store.initial_total(E) == 40
        assert rec.count == 1


class TestGenerateAndSum:
    def test_sum_before_generate(self, store, recorder):
        rec = recorder(store.summary_changed)
        assert store.sum_all() is None
        assert store.summary_status is SummaryStatus.MUST_GENERATE
        assert rec.calls == [("Generate first",)]

    def test_generate_then_sum(self, store, recorder):
        results_rec = recorder(store.results_changed)
        store.add_slot(M)
        store.set_initial_total(M, 50)
        store.set_initial_total(E, -10)

        store.generate()
        assert store.summary_status is SummaryStatus.GENERATED
        assert results_rec.count == 1
        assert len(store.results) == 3

        report = store.sum_all()
        military = sum(v for r in store.results for v in r.military_values)
        economy = sum(v for r in store.results for v in r.economy_values)
        assert report.military.final == 50 + military
        assert report.economy.final == -10 + economy
        assert store.summary_status is SummaryStatus.SUMMED
        assert store.summary_text == report.text

    def test_reset_scope(self, store):
        store.add_slot(E)
        store.days = 5
        store.set_sync_pair_mode(True)
        store.generate()
        store.sum_all()

        store.reset()

        assert store.results == []
        assert store.summary_status is SummaryStatus.NOT_GENERATED
        assert store.days == 5
        assert len(store.slots(E)) == 2
        assert store.sync_pair is True
        assert store.sum_all() is None

    def test_results_sequence_is_a_copy(self, store):
        store.generate()
        store.results.clear()
        assert len(store.results) == 3


def test_store_without_default_slots(qapp):
    store = Store(with_default_slots=False)
    assert store.slots(M) == []
    store.remove_slot(M)
    assert store.slots(M) == []


class TestRobustness:
    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_non_finite_cell_edit_is_ignored(self, store, recorder, value):
        rec = recorder(store.cells_changed)
        store.set_cell_value(M, 0, 0, value)
        assert rec.count == 0
        assert store.cell_value(M, 0, 0) == 0.0

    def test_huge_y_generates(self, store):
        store.set_cell_value(M, 0, 0, 1e30)
        store.generate()
        assert store.summary_status is SummaryStatus.GENERATED
        assert store.sum_all() is not None

    def test_failed_generate_keeps_consistent_state(self, store, monkeypatch):
        store.generate()
        before = store.results

        def broken_draw(slot, day_index):
            raise RuntimeError("draw failed")

        monkeypatch.setattr(store.engine, "draw", broken_draw)
        with pytest.raises(RuntimeError):
            store.generate()

        assert store.results == before
        assert store.summary_status is SummaryStatus.GENERATED
        assert store.sum_all() is not None

    @pytest.mark.parametrize("value", ["false", 0, 1, None])
    def test_bool_params_reject_non_bool(self, store, value):
        with pytest.raises(ValueError):
            store.set_slot_param(M, 0, "use_sign", value)
        assert store.slots(M)[0].use_sign is True
