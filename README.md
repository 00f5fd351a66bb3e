# arenaforge

The pieces of a small role-playing arena. There are two families of
characters:

- warriors: `Paladin`, `Mercenary`, `Knight`, `Gladiator`, `Barbarian`
- wizards: `Conjurer`, `Necromancer`, `Sorcerer`, `Witcher`

There are also two families of weapons:

- combat weapons: `Club`, `DoubleAxe`, `SimpleAxe`, `Spear`, `Sword`
- magic weapons: `MagicStaff`, `MagicBook`, `Amulet`, `Potion`

Every character can carry two weapons, a principal one and a secondary one.

## Installing

    pip install .

To run the tests:

    pip install .[test]
    pytest

## Weapons

`arenaforge.weapons` holds the weapon classes. Each weapon has a `damage`, a
`level` and a `name`. `normal_attack()` returns the damage of a plain attack,
which is `damage * level`. For a `DoubleAxe` the current sharpness is added
to that. `describe()` returns the weapon's stats as lines of text.

Combat weapons also have a bleeding chance between 0 and 1.
`bleeding_possibility(rng)` rolls for bleeding. Each combat weapon has a
special attack that returns a message. If the bleeding roll succeeds, the
message also says that the weapon caused bleeding. The special attacks are:

- `Club.heavy_blow`
- `DoubleAxe.double_attack`, which dulls the axe by 5. `DoubleAxe.sharpen` restores it.
- `SimpleAxe.power_attack`
- `Spear.speed_attack`
- `Sword.sword_attack`, which deals triple damage once its charge runs out.

Magic weapons have a `mana_consume` value. Their special actions return a
message:

- `MagicStaff.ancient_attack`
- `MagicBook.magic_attack`
- `Amulet.magic_protection(injury)`
- `Potion.heal`

## Characters

`arenaforge.characters` holds `Character`, its two branches `Warrior` and
`Wizard`, and the nine character classes. Each character has these members:

- stats: `name`, `hp`, `strength` and `defense`
- weapon slots: `principal_weapon` and `secondary_weapon`
- `events`: a list of messages about deaths, dodges and guardian-angel rescues

Main methods:

- `add_principal_weapon` / `add_secondary_weapon` raise `ValueError` if the slot is already taken. `remove_principal_weapon` / `remove_secondary_weapon` empty the slot.
- `attack_strength(weapon)` returns the character's strength for slot 0 (bare hands), 1 (principal) or 2 (secondary). For slots 1 and 2 the weapon's damage is added.
- `normal_attack(enemy, weapon)` deals that strength to the enemy through `enemy.take_damage` and returns it.
- `take_damage(damage)` subtracts `damage - defense` from hp. `take_fixed_damage(damage)` subtracts exactly `damage`.
- `is_alive()`, `principal_weapon_name()`, `secondary_weapon_name()` and `describe()`.

Special abilities:

- `Barbarian.rage_attack`: adds the rage bar to the damage.
- `Gladiator.gladiator_attack`: strikes extra hard once the survival instinct reaches 0.
- `Knight.angel_attack`: charges a guardian angel. Once the bar is over 100, the angel restores 100 hp when a blow would kill the knight.
- `Mercenary`: may dodge a blow, depending on its `luck`.
- `Paladin` and `Witcher`: scale their defense by a percentage.
- `Conjurer.magic_attack`: deals triple damage once mana is over 100.
- `Necromancer.life_steal`: heals by the damage it deals.
- `Sorcerer.magic_attack`: scales with magic power.

Constructors check their values and raise `ValueError` for values outside the
allowed ranges. For example, a Mercenary's luck must lie between 0 and 0.7,
and a Paladin's protection bonus between 1 and 100.

Anything that depends on chance takes an object with a `random()` method. This
applies to weapon bleeding and to the Mercenary's dodge. A seeded
`random.Random` gives repeatable results.

## Example

    import random
    from arenaforge.weapons import Sword, Amulet
    from arenaforge.characters import Paladin, Barbarian

    hero = Paladin("Paladin", 100.0, 100.0, 50.0, 50.0)
    hero.add_principal_weapon(Sword(80.0, 5.0, 0.7, "Sword"))
    hero.add_secondary_weapon(Amulet(100.0, 5.0, "Amulet", 30.0, 150.0))
    print(hero.describe())

    foe = Barbarian("Barbarian", 100.0, 110.0, 40.0)
    dealt = hero.normal_attack(foe, 1)   # 180.0
    print(foe.hp, foe.is_alive(), foe.events)

    print(hero.principal_weapon.sword_attack(random.Random(1)))

## What it does not do

This package is a library of characters and weapons only. It does not include:

- a command to run
- a factory that builds ready-made characters by type
- random character generation
- an interactive duel

Programs that use these classes have to build and arm their characters
themselves.