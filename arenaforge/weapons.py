"""Combat and magic weapons that characters can carry."""

from __future__ import annotations

import random
from abc import ABC, abstractmethod
from typing import Protocol


class _RandomSource(Protocol):
    def random(self) -> float: ...


def _source(rng: _RandomSource | None) -> _RandomSource:
    return rng if rng is not None else random


class Weapon(ABC):
    """Anything a character can wield."""

    damage: float
    level: float
    name: str

    @abstractmethod
    def normal_attack(self) -> float:
        """Damage dealt by a plain attack."""

    @abstractmethod
    def describe(self) -> str:
        """Multi-line description of the weapon's statistics."""

    def __repr__(self) -> str:
        return f"{type(self).__name__}(name={self.name!r}, damage={self.damage!r}, level={self.level!r})"


class CombatWeapon(Weapon):
    """A physical weapon that may make its target bleed."""

    def __init__(self, damage: float, level: float, bleeding: float, name: str = "Unknown") -> None:
        if not 0 <= bleeding <= 1:
            raise ValueError("the bleeding argument must be between 0 and 1")
        if damage < 0:
            raise ValueError("the damage argument must be positive or equal to 0")
        if level < 0:
            raise ValueError("the level argument must be positive or equal to 0")
        self.damage = damage
        self.level = level
        self.bleeding = bleeding
        self.name = name

    def normal_attack(self) -> float:
        return self.damage * self.level

    def bleeding_possibility(self, rng: _RandomSource | None = None) -> bool:
        """Roll for bleeding; true when the roll does not exceed the bleeding chance."""
        return _source(rng).random() <= self.bleeding

    def _with_bleeding(self, message: str, rng: _RandomSource | None) -> str:
        if self.bleeding_possibility(rng):
            message += (
                f"\nThe {self.name} caused bleeding: 10 damage per second for 20 seconds"
            )
        return message

    def _base_lines(self) -> list[str]:
        return [
            f"Damage: {self.damage:g}",
            f"Level: {self.level:g}",
            f"Name: {self.name}",
            f"Bleeding possibility: {self.bleeding:g}",
        ]


class Club(CombatWeapon):
    """A heavy club whose blows scale with its weight."""

    def __init__(self, damage: float, level: float, bleeding: float, name: str, weight: float) -> None:
        super().__init__(damage, level, bleeding, name)
        if weight <= 0:
            raise ValueError("The weight must be positive")
        self.weight = weight

    def heavy_blow(self, rng: _RandomSource | None = None) -> str:
        amount = self.normal_attack() * self.weight
        return self._with_bleeding(
            f"The {self.name} makes a heavy blow dealing {amount:g} damage", rng
        )

    def describe(self) -> str:
        return "\n".join([*self._base_lines(), f"Weight: {self.weight:g}"])


class DoubleAxe(CombatWeapon):
    """A double axe that dulls with use and can be sharpened."""

    FULL_SHARPNESS = 20

    def __init__(self, damage: float, level: float, bleeding: float, name: str) -> None:
        super().__init__(damage, level, bleeding, name)
        self.sharpness: float = self.FULL_SHARPNESS

    def normal_attack(self) -> float:
        return self.damage * self.level + self.sharpness

    def double_attack(self, rng: _RandomSource | None = None) -> str:
        amount = self.normal_attack()
        self.sharpness -= 5
        return self._with_bleeding(
            f"The double attack deals {amount:g} damage; the axes got a little dull.", rng
        )

    def sharpen(self) -> str:
        self.sharpness = self.FULL_SHARPNESS
        return "You have just sharpened the axes"

    def describe(self) -> str:
        return "\n".join([*self._base_lines(), f"Sharpness: {self.sharpness:g}"])


class SimpleAxe(CombatWeapon):
    """A single-headed axe with a power attack."""

    def __init__(self, damage: float, level: float, bleeding: float, name: str, power: float) -> None:
        super().__init__(damage, level, bleeding, name)
        self.power = power

    def power_attack(self, rng: _RandomSource | None = None) -> str:
        amount = self.normal_attack() * self.power
        return self._with_bleeding(
            f"The axe makes a power attack dealing {amount:g} damage", rng
        )

    def describe(self) -> str:
        return "\n".join([*self._base_lines(), f"Power: {self.power:g}"])


class Spear(CombatWeapon):
    """A spear whose speed attack grows with the square of its velocity."""

    def __init__(self, damage: float, level: float, bleeding: float, name: str, velocity: float) -> None:
        super().__init__(damage, level, bleeding, name)
        if velocity <= 0:
            raise ValueError("Velocity must be greater than 0")
        self.velocity = velocity

    def speed_attack(self, rng: _RandomSource | None = None) -> str:
        amount = self.normal_attack() * (self.velocity * self.velocity) * 0.5
        return self._with_bleeding(
            "The spear makes a very quick attack, gaining kinetic energy and "
            f"dealing {amount:g} damage",
            rng,
        )

    def describe(self) -> str:
        return "\n".join([*self._base_lines(), f"Velocity: {self.velocity:g}"])


class Sword(CombatWeapon):
    """A sword that builds up to a triple-damage charged attack."""

    FULL_CHARGE = 3

    def __init__(self, damage: float, level: float, bleeding: float, name: str) -> None:
        super().__init__(damage, level, bleeding, name)
        self.charge = self.FULL_CHARGE

    def sword_attack(self, rng: _RandomSource | None = None) -> str:
        if self.charge == 0:
            message = f"The sword makes a charged attack dealing {self.normal_attack() * 3:g} damage"
            self.charge = self.FULL_CHARGE
        else:
            message = f"The sword deals {self.normal_attack():g} damage"
        self.charge -= 1
        return self._with_bleeding(message, rng)

    def describe(self) -> str:
        return "\n".join([*self._base_lines(), f"Charge: {self.charge}"])


class MagicWeapon(Weapon):
    """A magical item that consumes mana when used."""

    def __init__(self, damage: float, level: float, name: str, mana: float) -> None:
        if damage < 0:
            raise ValueError("the damage argument must be positive or equal to 0")
        if level < 0:
            raise ValueError("the level argument must be positive or equal to 0")
        if mana < 0:
            raise ValueError("the mana argument must be positive or equal to 0")
        self.damage = damage
        self.level = level
        self.name = name
        self.mana_consume = mana

    def normal_attack(self) -> float:
        return self.damage * self.level

    def _base_lines(self) -> list[str]:
        return [
            f"Damage: {self.damage:g}",
            f"Level: {self.level:g}",
            f"Name: {self.name}",
            f"Mana consume: {self.mana_consume:g}",
        ]


class MagicStaff(MagicWeapon):
    """A staff whose ancient attack grows with its age."""

    def __init__(self, damage: float, level: float, name: str, mana: float, age: float) -> None:
        super().__init__(damage, level, name, mana)
        if age <= 0:
            raise ValueError("The age must be positive")
        self.age = age

    def ancient_attack(self) -> str:
        amount = self.normal_attack() * (self.age / 10)
        return (
            f"The magic staff, {self.age:g} years old, deals {amount:g} damage "
            f"and consumes {self.mana_consume:g} mana"
        )

    def describe(self) -> str:
        return "\n".join([*self._base_lines(), f"Age: {self.age:g}"])


class MagicBook(MagicWeapon):
    """A spell book amplified by its magic power."""

    def __init__(self, damage: float, level: float, name: str, mana: float, magic_power: float) -> None:
        super().__init__(damage, level, name, mana)
        if magic_power <= 0:
            raise ValueError("The magic_power argument must be positive")
        self.magic_power = magic_power

    def magic_attack(self) -> str:
        amount = self.normal_attack() * self.magic_power
        return (
            f"The magic book deals {amount:g} damage "
            f"and consumes {self.mana_consume:g} mana"
        )

    def describe(self) -> str:
        return "\n".join([*self._base_lines(), f"Magic power: {self.magic_power:g}"])


class Amulet(MagicWeapon):
    """An amulet that absorbs up to its damage value of an incoming injury."""

    def __init__(self, damage: float, level: float, name: str, mana: float, protection_power: float) -> None:
        super().__init__(damage, level, name, mana)
        if protection_power <= 0:
            raise ValueError("The protection_power argument must be positive")
        self.protection_power = protection_power

    def magic_protection(self, injury: float) -> str:
        if injury > self.damage:
            return (
                f"The amulet blocked {self.damage:g} damage and you received "
                f"{injury - self.damage:g} damage, consuming {self.mana_consume:g} mana"
            )
        return (
            f"The amulet blocked all the damage: {injury:g}, "
            f"consuming {self.mana_consume:g} mana"
        )

    def describe(self) -> str:
        return "\n".join([*self._base_lines(), f"Protection power: {self.protection_power:g}"])


class Potion(MagicWeapon):
    """A potion that turns its damage into healing."""

    def __init__(self, damage: float, level: float, name: str, mana: float, healing_power: float) -> None:
        super().__init__(damage, level, name, mana)
        if healing_power <= 0:
            raise ValueError("The healing_power argument must be positive")
        self.healing_power = healing_power

    def heal(self) -> str:
        restored = self.damage / self.healing_power
        return (
            f"The potion turns its damage into healing, restoring {restored:g} hp "
            f"and consuming {self.mana_consume:g} mana"
        )

    def describe(self) -> str:
        return "\n".join([*self._base_lines(), f"Healing power: {self.healing_power:g}"])