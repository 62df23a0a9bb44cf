import pytest

from tombeau.character import (
    Character,
    StatLimits,
    assemble_line,
    attack,
    fight,
    lockpick,
    roll,
)
from tombeau.errors import ErrorCode, GameError


class _FixedRng:
    """Always draws the same face: 'low' gives the lowest, 'high' the highest."""

    def __init__(self, side):
        self.side = side

    def randint(self, a, b):
        return a if self.side == "low" else b


def test_roll_success_and_failure():
    assert roll(5, 10, _FixedRng("low")) is True
    assert roll(5, 10, _FixedRng("high")) is False
    assert roll(10, 10, _FixedRng("high")) is True


def test_roll_rejects_empty_die():
    with pytest.raises(GameError) as info:
        roll(1, 0)
    assert info.value.code is ErrorCode.ARGUMENT


def test_zero_stats_take_defaults():
    limits = StatLimits()
    hero = Character("moi", limits=limits)
    assert hero.strength == limits.default(limits.strength)
    assert hero.hp == limits.default(limits.hp)
    assert hero.agility == limits.default(limits.agility)


def test_assign_sets_values_and_name():
    hero = Character("x")
    hero.assign(3, 3, 15, 2, 2, 3, "moi")
    assert (hero.strength, hero.intelligence, hero.hp) == (3, 3, 15)
    assert (hero.armour, hero.critical, hero.agility) == (2, 2, 3)
    assert hero.name == "moi"


def test_assign_without_name_keeps_name():
    hero = Character("moi")
    hero.assign(1, 1, 1, 1, 1, 1, None)
    assert hero.name == "moi"


def test_assemble_line_shape():
    for width in (15, 28, 30, 40):
        line = assemble_line("PV", 7, width, " -")
        assert line.startswith("\t- PV")
        assert line.endswith("-> : 7\n")
        assert line.index("-> :") == width - 10


def test_assemble_line_truncates_label():
    line = assemble_line("Intelligence", 1, 15, " -")
    assert line.startswith("\t- In")
    assert "Intelligence" not in line


def test_describe_header_and_lines():
    hero = Character("moi")
    text = hero.describe(None, 30)
    lines = text.splitlines()
    assert lines[0] == "Le personnage moi à comme statistique :"
    assert len(lines) == 7
    assert all(line.startswith("\t- ") for line in lines[1:])


def test_describe_clamps_values():
    limits = StatLimits()
    hero = Character("moi", hp=limits.hp * 3, limits=limits)
    first = hero.describe("Attaquant", 28).splitlines()[1]
    assert first.endswith(f"-> : {limits.hp}")


def test_describe_minimum_width():
    hero = Character("moi")
    assert hero.describe(None, 1) == hero.describe(None, 15)


def test_attack_dodged_leaves_defender_untouched():
    a, d = Character("a", strength=5), Character("d", hp=10)
    assert attack(a, d, rng=_FixedRng("low")) is None
    assert d.hp == 10


def test_attack_hits():
    a = Character("a", strength=8)
    d = Character("d", hp=20, armour=3)
    damage = attack(a, d, rng=_FixedRng("high"))
    assert damage == a.strength - d.armour
    assert d.hp == 20 - damage


def test_attack_never_heals():
    a = Character("a", strength=1)
    d = Character("d", hp=5, armour=9)
    assert attack(a, d, rng=_FixedRng("high")) == 0
    assert d.hp == 5


def test_fight_player_wins_and_reports():
    messages = []
    player = Character("hero", strength=9, hp=20)
    enemy = Character("gob", strength=1, hp=3)
    assert fight(player, enemy, rng=_FixedRng("high"), report=messages.append) is True
    assert enemy.hp <= 0
    assert messages and messages[0].startswith("hero a mis ")


def test_fight_player_loses():
    player = Character("hero", strength=1, hp=2)
    enemy = Character("ogre", strength=9, hp=50)
    assert fight(player, enemy, rng=_FixedRng("high")) is False
    assert player.hp <= 0


def test_lockpick():
    hero = Character("moi", agility=3)
    assert lockpick(hero, rng=_FixedRng("low")) is True
    assert lockpick(hero, rng=_FixedRng("high")) is False