"""Tests for the plate / weight-stack loading helper."""

import pytest

from app.planner.loading import PlateLoading, StackLoading, loading_for, plate_breakdown, stack_pin


def _as_pairs(loading: PlateLoading) -> list[tuple[float, int]]:
    return [(p.plate_kg, p.count) for p in loading.plates]


class TestPlateBreakdown:

    def test_single_side(self):
        loading = plate_breakdown(57.5)
        assert _as_pairs(loading) == [(25.0, 2), (5.0, 1), (2.5, 1)]
        assert loading.loaded_kg == 57.5

    def test_split_sides_with_base(self):
        loading = plate_breakdown(100.0, base_kg=20.0, split_sides=True)
        assert loading.per_side_kg == 40.0
        assert _as_pairs(loading) == [(25.0, 1), (15.0, 1)]
        assert loading.loaded_kg == 100.0

    def test_target_below_base(self):
        loading = plate_breakdown(15.0, base_kg=20.0)
        assert loading.per_side_kg == 0.0
        assert loading.plates == []

    def test_unmatched_remainder_is_dropped(self):
        loading = plate_breakdown(6.0)
        assert _as_pairs(loading) == [(5.0, 1)]
        assert loading.loaded_kg == 5.0


class TestStackPin:

    def test_exact_slot(self):
        loading = stack_pin(50.0, 5.0)
        assert loading.slot == 10
        assert loading.use_micro_plate is False
        assert loading.actual_kg == 50.0

    def test_micro_plate_on_coarse_stack(self):
        loading = stack_pin(52.5, 5.0)
        assert loading.slot == 10
        assert loading.use_micro_plate is True
        assert loading.actual_kg == 52.5

    def test_fine_stack_has_no_micro_plate(self):
        loading = stack_pin(51.25, 2.5)
        assert loading.use_micro_plate is False
        # Tie between 50 and 52.5 keeps the lower slot.
        assert loading.slot == 20
        assert loading.actual_kg == 50.0

    def test_zero_target(self):
        loading = stack_pin(0.0, 5.0)
        assert loading.slot == 0
        assert loading.use_micro_plate is False
        assert loading.actual_kg == 0.0

    def test_invalid_increment(self):
        with pytest.raises(ValueError):
            stack_pin(50.0, 0.0)


class TestLoadingFor:

    def test_plate_loaded_machine(self):
        assert isinstance(loading_for("Leg Press", 80.0, base_kg=20.0, split_sides=True), PlateLoading)

    def test_stack_machine_uses_its_increment(self):
        loading = loading_for("Lateral Raise", 12.5)
        assert isinstance(loading, StackLoading)
        assert loading.increment_kg == 2.5
        assert loading.slot == 5

    def test_unknown_machine(self):
        assert loading_for("Mystery", 50.0) is None
