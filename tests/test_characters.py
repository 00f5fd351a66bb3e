import pytest

from arenaforge.characters import (
    Barbarian,
    Character,
    Conjurer,
    Gladiator,
    Knight,
    Mercenary,
    Necromancer,
    Paladin,
    Sorcerer,
    Witcher,
)
from arenaforge.weapons import Amulet, Sword


class _FixedRandom:
    def __init__(self, value):
        self.value = value

    def random(self):
        return self.value


def _target(hp=10_000.0):
    return Barbarian("Target", hp, 0.0, 0.0)


def _sword():
    return Sword(80.0, 5.0, 0.7, "Sword")


def test_character_is_abstract():
    with pytest.raises(TypeError):
        Character("x", 1.0, 1.0, 1.0)


@pytest.mark.parametrize("hp, strength, defense", [(-1.0, 1.0, 1.0), (1.0, -1.0, 1.0), (1.0, 1.0, -1.0)])
def test_negative_stats_rejected(hp, strength, defense):
    with pytest.raises(ValueError):
        Barbarian("B", hp, strength, defense)


def test_attack_strength_by_slot():
    knight = Knight("Knight", 100.0, 80.0, 70.0)
    sword = _sword()
    knight.add_principal_weapon(sword)
    assert knight.attack_strength(0) == knight.strength
    assert knight.attack_strength(1) == knight.strength + sword.damage
    with pytest.raises(ValueError):
        knight.attack_strength(2)
    with pytest.raises(ValueError):
        knight.attack_strength(3)


def test_secondary_weapon_slot():
    wizard = Conjurer("Conjurer", 100.0, 80.0, 30.0)
    amulet = Amulet(100.0, 5.0, "Amulet", 30.0, 150.0)
    wizard.add_secondary_weapon(amulet)
    assert wizard.attack_strength(2) == wizard.strength + amulet.damage
    assert wizard.secondary_weapon_name() == "Amulet"
    wizard.remove_secondary_weapon()
    assert wizard.secondary_weapon_name() == "No secondary weapon"


def test_weapon_slot_rules():
    paladin = Paladin("Paladin", 100.0, 100.0, 50.0, 50.0)
    assert paladin.principal_weapon_name() == "No principal weapon"
    paladin.add_principal_weapon(_sword())
    assert paladin.principal_weapon_name() == "Sword"
    with pytest.raises(ValueError):
        paladin.add_principal_weapon(_sword())
    with pytest.raises(ValueError):
        paladin.add_secondary_weapon(None)
    paladin.remove_principal_weapon()
    assert paladin.principal_weapon_name() == "No principal weapon"


def test_base_take_damage_subtracts_defense():
    gladiator = Gladiator("Gladiator", 100.0, 90.0, 60.0)
    gladiator.take_damage(70.0)
    assert gladiator.hp == 100.0 - (70.0 - 60.0)
    assert gladiator.events == []


def test_death_is_recorded():
    gladiator = Gladiator("Gladiator", 10.0, 90.0, 0.0)
    gladiator.take_damage(20.0)
    assert not gladiator.is_alive()
    assert gladiator.events == ["Gladiator died"]


def test_warrior_dies_at_zero_fixed_damage():
    warrior = Barbarian("Barbarian", 10.0, 1.0, 1.0)
    warrior.take_fixed_damage(10)
    assert warrior.hp == 0
    assert warrior.events == ["Barbarian died"]


def test_wizard_fixed_damage_to_zero_records_nothing():
    wizard = Conjurer("Conjurer", 10.0, 1.0, 1.0)
    wizard.take_fixed_damage(10)
    assert not wizard.is_alive()
    assert wizard.events == []
    wizard.take_fixed_damage(10)
    assert wizard.events == ["Conjurer died"]


def test_normal_attack_deals_strength():
    attacker = Knight("Knight", 100.0, 80.0, 70.0)
    target = _target()
    before = target.hp
    dealt = attacker.normal_attack(target, 0)
    assert dealt == attacker.strength
    assert before - target.hp == dealt


def test_normal_attack_rejects_bad_arguments():
    attacker = Knight("Knight", 100.0, 80.0, 70.0)
    with pytest.raises(ValueError):
        attacker.normal_attack(None, 0)
    with pytest.raises(ValueError):
        attacker.normal_attack(_target(), -1)


def test_barbarian_rage_builds_and_releases():
    barbarian = Barbarian("Barbarian", 100.0, 110.0, 40.0)
    target = _target()
    assert barbarian.rage_attack(target) == barbarian.strength
    assert barbarian.rage_attack(target) == barbarian.strength + 10
    barbarian.rage_bar = 100
    assert barbarian.rage_attack(target) == barbarian.strength + 2 * 100
    assert barbarian.rage_bar == 0


def test_gladiator_instinct():
    gladiator = Gladiator("Gladiator", 100.0, 90.0, 60.0)
    target = _target()
    assert gladiator.gladiator_attack(target, 0) == gladiator.strength
    assert gladiator.survival_instinct == 90
    gladiator.survival_instinct = 0
    before = target.hp
    dealt = gladiator.gladiator_attack(target, 0)
    assert dealt == gladiator.strength * 3 + gladiator.strength
    assert before - target.hp == dealt


def test_knight_guardian_angel_saves():
    knight = Knight("Knight", 10.0, 80.0, 0.0)
    knight.guardian_angel_bar = 110
    knight.take_damage(20.0)
    assert knight.hp == 10.0 - 20.0 + 100
    assert knight.guardian_angel_bar == 0
    assert knight.events == ["Knight has been saved by a guardian angel"]


def test_knight_dies_without_angel():
    knight = Knight("Knight", 10.0, 80.0, 0.0)
    target = _target()
    knight.angel_attack(target)
    assert knight.guardian_angel_bar == 10
    knight.take_damage(20.0)
    assert knight.events == ["Knight died"]


@pytest.mark.parametrize("luck", [-0.1, 0.8])
def test_mercenary_luck_bounds(luck):
    with pytest.raises(ValueError):
        Mercenary("Mercenary", 100.0, 100.0, 20.0, luck)


def test_mercenary_dodges_with_low_roll():
    mercenary = Mercenary("Mercenary", 100.0, 100.0, 20.0, 0.5, rng=_FixedRandom(0.1))
    mercenary.take_damage(50.0)
    assert mercenary.hp == 100.0
    assert mercenary.events == ["Mercenary dodged the attack"]


def test_mercenary_hit_with_high_roll():
    mercenary = Mercenary("Mercenary", 100.0, 100.0, 20.0, 0.5, rng=_FixedRandom(0.9))
    mercenary.take_damage(50.0)
    assert mercenary.hp == 100.0 - (50.0 - 20.0)


@pytest.mark.parametrize("protection", [0.5, 101.0])
def test_paladin_protection_bounds(protection):
    with pytest.raises(ValueError):
        Paladin("Paladin", 100.0, 100.0, 50.0, protection)


def test_paladin_scaled_defense():
    paladin = Paladin("Paladin", 100.0, 100.0, 50.0, 50.0)
    paladin.take_damage(75.0)
    assert paladin.hp == 100.0 - (75.0 - 50.0 * 50.0 / 100)


def test_conjurer_mana_overflow():
    conjurer = Conjurer("Conjurer", 100.0, 80.0, 30.0)
    target = _target()
    assert conjurer.magic_attack(target, 0) == conjurer.strength
    assert conjurer.mana == 10
    conjurer.mana = 110
    assert conjurer.magic_attack(target, 0) == conjurer.strength * 3
    assert conjurer.mana == 0


def test_necromancer_steals_life():
    necromancer = Necromancer("Necromancer", 100.0, 70.0, 20.0, 40.0)
    target = _target()
    before_target, before_self = target.hp, necromancer.hp
    stolen = necromancer.life_steal(target)
    assert stolen == necromancer.strength * necromancer.vampirism / 100
    assert before_target - target.hp == stolen
    assert necromancer.hp - before_self == stolen


def test_necromancer_vampirism_bounds():
    with pytest.raises(ValueError):
        Necromancer("Necromancer", 100.0, 70.0, 20.0, 101.0)


def test_sorcerer_spell():
    sorcerer = Sorcerer("Sorcerer", 100.0, 90.0, 25.0, 40.0)
    target = _target()
    assert sorcerer.magic_attack(target, 0) == sorcerer.strength * sorcerer.magic_power * 0.5
    with pytest.raises(ValueError):
        Sorcerer("Sorcerer", 100.0, 90.0, 25.0, -1.0)


def test_witcher_magic_protection():
    witcher = Witcher("Witcher", 100.0, 100.0, 30.0, 50.0)
    witcher.take_damage(40.0)
    assert witcher.hp == 100.0 - (40.0 - 30.0 * 50.0 / 100)
    with pytest.raises(ValueError):
        Witcher("Witcher", 100.0, 100.0, 30.0, 0.0)


def test_describe_lists_stats():
    mercenary = Mercenary("Mercenary", 100.0, 100.0, 20.0, 0.5)
    lines = mercenary.describe().splitlines()
    assert lines[0] == "Name: Mercenary"
    assert lines[-1] == "Luck: 0.5"
    assert len(lines) == 5