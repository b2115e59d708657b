"""Tests for weapon models and generation."""

import pytest

from herokit.dice import DiceRoller
from herokit.engine import weapon_forge
from herokit.engine.weapon_forge import forge_weapon, roll_name
from herokit.exceptions import ConfigurationError
from herokit.models import STARTER_WEAPON_TYPE, WEAPON_NAMES, ItemRarity, ItemType, Weapon, WeaponType


class TestWeaponNames:
    """Test suite for the weapon name tables."""

    def test_every_type_has_names(self):
        """Test each weapon type has a non-empty table."""
        for weapon_type in WeaponType:
            assert len(weapon_type.candidate_names) > 0

    def test_tables_are_disjoint(self):
        """Test no name appears in two tables."""
        all_names = [name for names in WEAPON_NAMES.values() for name in names]
        assert len(all_names) == len(set(all_names))

    def test_every_type_has_description(self):
        """Test each weapon type has flavor text."""
        for weapon_type in WeaponType:
            assert weapon_type.description


class TestForgeWeapon:
    """Test suite for forge_weapon."""

    @pytest.mark.parametrize("weapon_type", list(WeaponType))
    def test_name_in_table(self, weapon_type):
        """Test forged names always belong to the type's table."""
        roller = DiceRoller(seed=42)
        for _ in range(30):
            weapon = forge_weapon(weapon_type, rng=roller)
            assert weapon.weapon_type == weapon_type
            assert weapon.name in WEAPON_NAMES[weapon_type]
            assert weapon.rarity in set(ItemRarity)
            assert 0 <= weapon.weapon_id <= 255

    def test_default_is_starter(self, roller):
        """Test the default weapon type is the starter bow."""
        weapon = forge_weapon(rng=roller)
        assert STARTER_WEAPON_TYPE == WeaponType.BOW
        assert weapon.weapon_type == WeaponType.BOW

    def test_seeded_forge_is_deterministic(self):
        """Test the same seed forges the same weapon."""
        first = forge_weapon(WeaponType.DAGGERS, rng=DiceRoller(seed=99))
        second = forge_weapon(WeaponType.DAGGERS, rng=DiceRoller(seed=99))
        assert first == second

    def test_all_rarities_reachable(self):
        """Test every rarity shows up over many rolls."""
        roller = DiceRoller(seed=0)
        seen = {forge_weapon(rng=roller).rarity for _ in range(200)}
        assert seen == set(ItemRarity)

    def test_weapon_create_delegates(self, roller):
        """Test Weapon.create rolls a weapon of the requested type."""
        weapon = Weapon.create(WeaponType.ROD, rng=roller)
        assert weapon.weapon_type == WeaponType.ROD
        assert weapon.name in WeaponType.ROD.candidate_names

    def test_missing_table_raises(self, monkeypatch):
        """Test a type without names raises ConfigurationError."""
        monkeypatch.setitem(WEAPON_NAMES, WeaponType.CLAW, ())
        with pytest.raises(ConfigurationError):
            roll_name(WeaponType.CLAW, DiceRoller(seed=1))
        with pytest.raises(ConfigurationError):
            weapon_forge.forge_weapon(WeaponType.CLAW, rng=DiceRoller(seed=1))


class TestWeaponModel:
    """Test suite for the Weapon model."""

    def test_rejects_foreign_name(self):
        """Test a name from another type's table is rejected."""
        with pytest.raises(ValueError):
            Weapon(weapon_type=WeaponType.BOW, rarity=ItemRarity.RARE, name="Katana", weapon_id=1)

    def test_rejects_out_of_range_id(self):
        """Test ids must fit in a byte."""
        with pytest.raises(ValueError):
            Weapon(weapon_type=WeaponType.BOW, rarity=ItemRarity.RARE, name="Scream", weapon_id=256)

    def test_is_immutable(self, roller):
        """Test weapons cannot be modified after creation."""
        weapon = forge_weapon(rng=roller)
        with pytest.raises(ValueError):
            weapon.name = "Hope"

    def test_item_type_and_str(self):
        """Test item type and display format."""
        weapon = Weapon(weapon_type=WeaponType.MACE, rarity=ItemRarity.EXOTIC, name="Hydras", weapon_id=7)
        assert weapon.item_type == ItemType.WEAPON
        assert weapon.description == WeaponType.MACE.description
        assert str(weapon) == "Weapon(name: Hydras, id: 7, type: Mace)"

    def test_dump_round_trip(self, roller):
        """Test a dumped weapon validates back to an equal weapon."""
        weapon = forge_weapon(WeaponType.CLAW, rng=roller)
        data = weapon.model_dump()
        assert data["item_type"] == ItemType.WEAPON
        assert Weapon.model_validate(data) == weapon
