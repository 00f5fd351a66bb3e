"""Playable characters: warriors and wizards with their special abilities."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Protocol

from arenaforge.weapons import Weapon


class _RandomSource(Protocol):
    def random(self) -> float: ...


_SLOT_NAMES = {1: "principal", 2: "secondary"}


class Character(ABC):
    """Common state and behaviour of every character.

    Notable happenings (deaths, dodges, rescues) are appended to ``events``.
    """

    def __init__(self, name: str, hp: float, strength: float, defense: float) -> None:
        if hp < 0 or strength < 0 or defense < 0:
            raise ValueError("All numeric arguments must be positive or equal to 0")
        self.name = name
        self.hp = hp
        self.strength = strength
        self.defense = defense
        self.principal_weapon: Weapon | None = None
        self.secondary_weapon: Weapon | None = None
        self.events: list[str] = []

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, hp={self.hp!r})"

    def _record(self, message: str) -> None:
        self.events.append(message)

    def _report_death_if(self, dead: bool) -> None:
        if dead:
            self._record(f"{self.name} died")

    def attack_strength(self, weapon: int = 0) -> float:
        """Strength bare-handed (0), with the principal (1) or secondary (2) weapon."""
        if weapon not in (0, 1, 2):
            raise ValueError("Not a valid weapon slot")
        if weapon == 0:
            return self.strength
        held = self.principal_weapon if weapon == 1 else self.secondary_weapon
        if held is None:
            raise ValueError(f"{self.name} has no {_SLOT_NAMES[weapon]} weapon")
        return self.strength + held.damage

    def is_alive(self) -> bool:
        return self.hp > 0

    def add_principal_weapon(self, weapon: Weapon) -> None:
        if weapon is None:
            raise ValueError("You did not pass a valid weapon")
        if self.principal_weapon is not None:
            raise ValueError(f"{self.name} already has a principal weapon")
        self.principal_weapon = weapon

    def remove_principal_weapon(self) -> None:
        self.principal_weapon = None

    def add_secondary_weapon(self, weapon: Weapon) -> None:
        if weapon is None:
            raise ValueError("You did not pass a valid weapon")
        if self.secondary_weapon is not None:
            raise ValueError(f"{self.name} already has a secondary weapon")
        self.secondary_weapon = weapon

    def remove_secondary_weapon(self) -> None:
        self.secondary_weapon = None

    def take_damage(self, damage: float) -> None:
        """Lose ``damage`` reduced by defense."""
        self.hp -= damage - self.defense
        self._report_death_if(self.hp < 0)

    @abstractmethod
    def take_fixed_damage(self, damage: int) -> None:
        """Lose exactly ``damage`` hit points, ignoring defense."""

    @staticmethod
    def _check_attack(enemy: Character | None, weapon: int) -> None:
        if enemy is None or weapon not in (0, 1, 2):
            raise ValueError("invalid argument")

    def normal_attack(self, enemy: Character, weapon: int = 0) -> float:
        """Hit ``enemy`` with the chosen slot; return the damage dealt."""
        self._check_attack(enemy, weapon)
        amount = self.attack_strength(weapon)
        enemy.take_damage(amount)
        return amount

    def principal_weapon_name(self) -> str:
        if self.principal_weapon is None:
            return "No principal weapon"
        return self.principal_weapon.name

    def secondary_weapon_name(self) -> str:
        if self.secondary_weapon is None:
            return "No secondary weapon"
        return self.secondary_weapon.name

    def _extra_lines(self) -> list[str]:
        return []

    def describe(self) -> str:
        lines = [
            f"Name: {self.name}",
            f"Hp: {self.hp:g}",
            f"Strength: {self.strength:g}",
            f"Defense: {self.defense:g}",
            *self._extra_lines(),
        ]
        return "\n".join(lines)


class Warrior(Character):
    """A fighter; dies as soon as fixed damage brings hp to zero."""

    def take_fixed_damage(self, damage: int) -> None:
        self.hp -= damage
        self._report_death_if(self.hp <= 0)


class Wizard(Character):
    """A spell caster; dies only once fixed damage pushes hp below zero."""

    def take_fixed_damage(self, damage: int) -> None:
        self.hp -= damage
        self._report_death_if(self.hp < 0)


class Barbarian(Warrior):
    """A warrior whose attacks grow with a rage bar."""

    def __init__(self, name: str, hp: float, strength: float, defense: float) -> None:
        super().__init__(name, hp, strength, defense)
        self.rage_bar: float = 0

    def rage_attack(self, enemy: Character, weapon: int = 0) -> float:
        self._check_attack(enemy, weapon)
        if self.rage_bar == 100:
            amount = self.attack_strength(weapon) + 2 * self.rage_bar
            self.rage_bar = 0
        else:
            amount = self.attack_strength(weapon) + self.rage_bar
            self.rage_bar += 10
        enemy.take_damage(amount)
        return amount

    def _extra_lines(self) -> list[str]:
        return [f"Rage bar: {self.rage_bar:g}"]

    def describe(self) -> str:
        return super().describe()


class Gladiator(Warrior):
    """A warrior who strikes extra hard once the survival instinct runs out."""

    def __init__(self, name: str, hp: float, strength: float, defense: float) -> None:
        super().__init__(name, hp, strength, defense)
        self.survival_instinct: float = 100

    def gladiator_attack(self, enemy: Character, weapon: int = 0) -> float:
        self._check_attack(enemy, weapon)
        strength = self.attack_strength(weapon)
        dealt = 0.0
        if self.survival_instinct == 0:
            enemy.take_damage(strength * 3)
            dealt += strength * 3
        enemy.take_damage(strength)
        dealt += strength
        self.survival_instinct -= 10
        return dealt

    def _extra_lines(self) -> list[str]:
        return [f"Survival instinct: {self.survival_instinct:g}"]

    def describe(self) -> str:
        return super().describe()


class Knight(Warrior):
    """A warrior a guardian angel may rescue from a fatal blow."""

    def __init__(self, name: str, hp: float, strength: float, defense: float) -> None:
        super().__init__(name, hp, strength, defense)
        self.guardian_angel_bar = 0

    def angel_attack(self, enemy: Character, weapon: int = 0) -> float:
        self._check_attack(enemy, weapon)
        amount = self.attack_strength(weapon)
        enemy.take_damage(amount)
        self.guardian_angel_bar += 10
        return amount

    def take_damage(self, damage: float) -> None:
        self.hp -= damage - self.defense
        if self.hp >= 0:
            return
        if self.guardian_angel_bar > 100:
            self.hp += 100
            self.guardian_angel_bar = 0
            self._record(f"{self.name} has been saved by a guardian angel")
            return
        self._record(f"{self.name} died")

    def _extra_lines(self) -> list[str]:
        return [f"Guardian angel bar: {self.guardian_angel_bar}"]

    def describe(self) -> str:
        return super().describe()


class Mercenary(Warrior):
    """A warrior who may dodge incoming blows by luck."""

    def __init__(
        self,
        name: str,
        hp: float,
        strength: float,
        defense: float,
        luck: float,
        rng: _RandomSource | None = None,
    ) -> None:
        super().__init__(name, hp, strength, defense)
        if not 0 <= luck <= 0.7:
            raise ValueError("The luck must be positive and not greater than 0.7")
        self.luck = luck
        self._rng: _RandomSource = rng if rng is not None else random

    def take_damage(self, damage: float) -> None:
        if self._rng.random() <= self.luck:
            self._record(f"{self.name} dodged the attack")
            return
        super().take_damage(damage)

    def _extra_lines(self) -> list[str]:
        return [f"Luck: {self.luck:g}"]

    def describe(self) -> str:
        return super().describe()


class Paladin(Warrior):
    """A warrior whose defense is scaled by a protection percentage."""

    def __init__(
        self, name: str, hp: float, strength: float, defense: float, protection_plus: float
    ) -> None:
        super().__init__(name, hp, strength, defense)
        if not 1 <= protection_plus <= 100:
            raise ValueError("The protection_plus parameter must be between 1 and 100")
        self.protection_plus = protection_plus

    def take_damage(self, damage: float) -> None:
        self.hp -= damage - (self.defense * self.protection_plus) / 100
        self._report_death_if(self.hp < 0)

    def _extra_lines(self) -> list[str]:
        return [f"Protection plus: {self.protection_plus:g}"]

    def describe(self) -> str:
        return super().describe()


class Conjurer(Wizard):
    """A wizard who unleashes a triple-damage spell once mana overflows."""

    def __init__(self, name: str, hp: float, strength: float, defense: float) -> None:
        super().__init__(name, hp, strength, defense)
        self.mana: float = 0

    def magic_attack(self, enemy: Character, weapon: int = 0) -> float:
        self._check_attack(enemy, weapon)
        if self.mana > 100:
            amount = self.attack_strength(weapon) * 3
            self.mana = 0
        else:
            amount = self.attack_strength(weapon)
            self.mana += 10
        enemy.take_damage(amount)
        return amount

    def _extra_lines(self) -> list[str]:
        return [f"Mana: {self.mana:g}"]

    def describe(self) -> str:
        return super().describe()


class Necromancer(Wizard):
    """A wizard who steals life from the enemy."""

    def __init__(
        self, name: str, hp: float, strength: float, defense: float, vampirism: float
    ) -> None:
        super().__init__(name, hp, strength, defense)
        if not 0 <= vampirism <= 100:
            raise ValueError("The vampirism argument must be between 0 and 100")
        self.vampirism = vampirism

    def life_steal(self, enemy: Character, weapon: int = 0) -> float:
        self._check_attack(enemy, weapon)
        amount = self.attack_strength(weapon) * self.vampirism / 100
        enemy.take_damage(amount)
        self.hp += amount
        return amount

    def _extra_lines(self) -> list[str]:
        return [f"Vampirism: {self.vampirism:g}"]

    def describe(self) -> str:
        return super().describe()


class Sorcerer(Wizard):
    """A wizard whose spells scale with magic power."""

    def __init__(
        self, name: str, hp: float, strength: float, defense: float, magic_power: float
    ) -> None:
        super().__init__(name, hp, strength, defense)
        if magic_power < 0:
            raise ValueError("The magic_power argument must be positive")
        self.magic_power = magic_power

    def magic_attack(self, enemy: Character, weapon: int = 0) -> float:
        self._check_attack(enemy, weapon)
        amount = self.attack_strength(weapon) * self.magic_power * 0.5
        enemy.take_damage(amount)
        return amount

    def _extra_lines(self) -> list[str]:
        return [f"Magic power: {self.magic_power:g}"]

    def describe(self) -> str:
        return super().describe()


class Witcher(Wizard):
    """A wizard whose defense is scaled by magic protection."""

    def __init__(
        self, name: str, hp: float, strength: float, defense: float, magic_protection: float
    ) -> None:
        super().__init__(name, hp, strength, defense)
        if magic_protection <= 0:
            raise ValueError("The magic_protection argument must be positive")
        self.magic_protection = magic_protection

    def take_damage(self, damage: float) -> None:
        self.hp -= damage - (self.defense * self.magic_protection) / 100
        self._report_death_if(self.hp < 0)

    def _extra_lines(self) -> list[str]:
        return [f"Magic protection: {self.magic_protection:g}"]

    def describe(self) -> str:
        return super().describe()