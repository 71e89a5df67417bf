"""Tests for the machine catalog."""

import pytest
from pydantic import ValidationError

from app.catalog import machine_catalog
from app.catalog.machine_catalog import (
    DEFAULT_ICON,
    MACHINE_CATALOG,
    all_machines,
    description_for,
    display_name_for,
    english_name_for,
    equivalents_for,
    get_machine,
    group_for,
    icon_for,
    register_machine,
)
from app.catalog.machine_profile import LoadScheme, MachineInfo
from app.schemas.workout import PrimaryGroup


class TestCatalogContents:
    """Verify the built-in machine catalog is well-formed."""

    def test_catalog_size(self):
        assert len(MACHINE_CATALOG) == 23

    def test_registration_order_is_stable(self):
        ids = [m.machine_id for m in all_machines()]
        assert ids[0] == "Chest Press"
        assert ids[-1] == "Ab Crunch"

    def test_machine_id_matches_key(self):
        for key, info in MACHINE_CATALOG.items():
            assert info.machine_id == key

    def test_no_duplicate_display_names(self):
        names = [m.display_name for m in all_machines()]
        assert len(names) == len(set(names))

    def test_every_group_is_covered(self):
        groups = {m.group for m in all_machines()}
        assert groups == set(PrimaryGroup)

    def test_plate_loaded_machines_have_no_increment(self):
        for info in all_machines():
            if info.load_scheme == LoadScheme.PLATE_LOADED:
                assert info.stack_increment_kg is None, info.machine_id
            else:
                assert info.stack_increment_kg and info.stack_increment_kg > 0, info.machine_id

    @pytest.mark.parametrize("machine_id,increment", [
        ("Cable Fly", 2.5),
        ("Lateral Raise", 2.5),
        ("Cable Pushdown", 2.5),
        ("Chest Press", 5.0),
    ])
    def test_stack_increments(self, machine_id, increment):
        assert get_machine(machine_id).stack_increment_kg == increment

    @pytest.mark.parametrize("machine_id", ["High Row", "Leg Press", "Glute Bridge", "Calf Raise"])
    def test_plate_loaded_machines(self, machine_id):
        assert get_machine(machine_id).load_scheme == LoadScheme.PLATE_LOADED


class TestMachineInfo:

    def test_stack_machine_requires_increment(self):
        with pytest.raises(ValidationError):
            MachineInfo(
                machine_id="Broken", display_name="Broken", english_name="Broken",
                icon_name="x", group=PrimaryGroup.CHEST,
                load_scheme=LoadScheme.STACK, stack_increment_kg=None,
            )

    def test_plate_loaded_drops_increment(self):
        info = MachineInfo(
            machine_id="Sled", display_name="Sled", english_name="Sled",
            icon_name="x", group=PrimaryGroup.LEGS,
            load_scheme=LoadScheme.PLATE_LOADED, stack_increment_kg=5.0,
        )
        assert info.stack_increment_kg is None


class TestLookups:

    def test_get_unknown_machine(self):
        assert get_machine("Smith Machine") is None

    def test_equivalents_share_group_and_include_self(self):
        equivalents = equivalents_for("Leg Press")
        ids = [m.machine_id for m in equivalents]
        assert "Leg Press" in ids
        assert len(ids) == 6
        assert all(m.group == PrimaryGroup.LEGS for m in equivalents)

    def test_equivalents_of_unknown_machine(self):
        assert equivalents_for("Smith Machine") == []

    def test_known_machine_fields(self):
        assert display_name_for("Leg Press") == "腿举"
        assert english_name_for("Leg Press") == "Leg Press"
        assert description_for("Leg Press") != ""
        assert icon_for("Leg Press") == "MachineIcons/Leg_Press"
        assert group_for("Leg Press") == PrimaryGroup.LEGS

    def test_unknown_machine_fallbacks(self):
        assert display_name_for("Mystery") == "Mystery"
        assert english_name_for("Mystery") == "Mystery"
        assert description_for("Mystery") == ""
        assert icon_for("Mystery") == DEFAULT_ICON
        assert group_for("Mystery") == PrimaryGroup.CHEST


class TestRegisterMachine:

    def test_register_appends_to_catalog(self, monkeypatch):
        monkeypatch.setattr(machine_catalog, "MACHINE_CATALOG", dict(MACHINE_CATALOG))
        register_machine(MachineInfo(
            machine_id="Hack Squat", display_name="哈克深蹲", english_name="Hack Squat",
            icon_name="MachineIcons/Hack_Squat", group=PrimaryGroup.LEGS,
            load_scheme=LoadScheme.PLATE_LOADED,
        ))
        assert machine_catalog.all_machines()[-1].machine_id == "Hack Squat"
        assert "Hack Squat" in [m.machine_id for m in machine_catalog.equivalents_for("Leg Press")]
