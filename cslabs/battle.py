"""Party battles between warriors, elves and wizards."""

from __future__ import annotations

import sys
from abc import ABC, abstractmethod
from collections import deque
from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass, field
from enum import Enum

MAX_HEALTH = 100.0
MAX_ATTACK = 10
MAX_LEVEL = 10
PARTY_ATTACK_LIMIT = 40


class CharType(Enum):
    """The class a character fights as."""

    WARRIOR = "Warrior"
    ELF = "Elf"
    WIZARD = "Wizard"


class Character(ABC):
    """A fighter with a name, health and attack strength."""

    char_type: CharType

    def __init__(self, name: str, health: float, strength: float) -> None:
        self.name = name
        self.health = float(health)
        self.strength = float(strength)

    @property
    def whole_health(self) -> int:
        """Health truncated to a whole number."""
        return int(self.health)

    @property
    def whole_strength(self) -> int:
        """Attack strength truncated to a whole number."""
        return int(self.strength)

    def is_alive(self) -> bool:
        """Return True while the whole health is above zero."""
        return self.whole_health > 0

    def _hit(self, enemy: Character, damage: float, verb: str) -> list[str]:
        enemy.health = enemy.whole_health - damage
        return [
            f"{self.char_type.value} {self.name} {verb} {enemy.name}",
            f"{enemy.name} takes {damage:g} damage.",
        ]

    @abstractmethod
    def attack(self, enemy: Character) -> list[str]:
        """Attack ``enemy`` and return the lines describing what happened."""


class Warrior(Character):
    """A warrior who never attacks warriors of the same allegiance."""

    char_type = CharType.WARRIOR

    def __init__(self, name: str, health: float, strength: float, ties: str) -> None:
        super().__init__(name, health, strength)
        self.ties = ties

    def attack(self, enemy: Character) -> list[str]:
        if isinstance(enemy, Warrior) and enemy.ties == self.ties:
            return [
                f"Warrior {self.name} does not attack Warrior {enemy.name}.",
                f"They share an allegiance with {self.ties}.",
            ]
        damage = self.strength * self.health / MAX_HEALTH
        return self._hit(enemy, damage, "attacks") and [
            f"Warrior {self.name} attacks {enemy.name} --- SLASH!!",
            f"{enemy.name} takes {damage:g} damage.",
        ]


class Elf(Character):
    """An elf who never attacks elves of the same family."""

    char_type = CharType.ELF

    def __init__(self, name: str, health: float, strength: float, family: str) -> None:
        super().__init__(name, health, strength)
        self.family = family

    def attack(self, enemy: Character) -> list[str]:
        if isinstance(enemy, Elf) and enemy.family == self.family:
            return [
                f"Elf {self.name} does not attack Elf {enemy.name}.",
                f"They are both members of the {self.family} family.",
            ]
        damage = self.strength * self.health / MAX_HEALTH
        enemy.health = enemy.whole_health - damage
        return [
            f"Elf {self.name} shoots an arrow at {enemy.name} --- TWANG!!",
            f"{enemy.name} takes {damage:g} damage.",
        ]


class Wizard(Character):
    """A wizard whose damage against other wizards scales with rank."""

    char_type = CharType.WIZARD

    def __init__(self, name: str, health: float, strength: float, rank: int) -> None:
        super().__init__(name, health, strength)
        self.rank = rank

    def attack(self, enemy: Character) -> list[str]:
        damage = self.strength
        if isinstance(enemy, Wizard):
            damage = self.strength * self.rank / enemy.rank
        enemy.health = enemy.whole_health - damage
        return [
            f"Wizard {self.name} attacks {enemy.name} --- POOF!!",
            f"{enemy.name} takes {damage:g} damage.",
        ]


def sum_of_attack(party: Iterable[Character]) -> int:
    """Return the sum of the whole attack strengths of a party."""
    return sum(member.whole_strength for member in party)


@dataclass
class FightResult:
    """The winning player (1 or 2, None if nobody fought) and the battle log."""

    winner: int | None
    log: list[str] = field(default_factory=list)


def fight(party1: Sequence[Character], party2: Sequence[Character]) -> FightResult:
    """Let the front fighters of two parties trade blows until one party falls.

    Raises RuntimeError if a full round changes nothing, since the battle
    could then never end.
    """
    first: deque[Character] = deque(party1)
    second: deque[Character] = deque(party2)
    log: list[str] = []

    while first and second:
        before = sum(c.health for c in (*first, *second))
        sizes = (len(first), len(second))

        log.extend(first[0].attack(second[0]))
        if not second[0].is_alive():
            log.append(f"{second[0].name} has fallen!")
            second.popleft()
        if not second:
            log.append("Congratulations! Player 1 wins!")
            return FightResult(1, log)

        log.extend(second[0].attack(first[0]))
        if not first[0].is_alive():
            log.append(f"{first[0].name} has fallen!")
            first.popleft()
        if not first:
            log.append("Congratulations! Player 2 wins!")
            return FightResult(2, log)

        after = sum(c.health for c in (*first, *second))
        if after == before and sizes == (len(first), len(second)):
            raise RuntimeError("stalemate: no fighter can hurt the other")

    return FightResult(None, log)


def _tokens(stream) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read(tokens: Iterator[str]) -> str:
    try:
        return next(tokens)
    except StopIteration:
        raise EOFError("unexpected end of input") from None


def _read_int(tokens: Iterator[str]) -> int:
    word = _read(tokens)
    try:
        return int(word)
    except ValueError:
        raise ValueError(f"expected a whole number, got {word!r}") from None


def _ask_attack(tokens: Iterator[str], party: list[Character] | None = None) -> int:
    print("How strong will your character be? (Max attack is 10)")
    attack = _read_int(tokens)
    while attack > MAX_ATTACK and (
        party is None or sum_of_attack(party) <= PARTY_ATTACK_LIMIT
    ):
        print("Invalid attack. Input again: ", end="")
        attack = _read_int(tokens)
    return attack


def _build_party(number: int, tokens: Iterator[str]) -> list[Character]:
    prefix = f"Player {number}: "
    party: list[Character] = []

    print(f"{prefix}Create a Warrior.")
    print("Name of Warrior: ", end="")
    name = _read(tokens)
    attack = _ask_attack(tokens)
    print("And to whom does he pledge his allegiance?")
    party.append(Warrior(name, MAX_HEALTH, attack, _read(tokens)))

    print(f"{prefix}Create an Elf.")
    print("Name of Elf: ", end="")
    name = _read(tokens)
    attack = _ask_attack(tokens)
    print(f"{prefix}And to which family does he belong?")
    party.append(Elf(name, MAX_HEALTH, attack, _read(tokens)))

    print(f"{prefix}Create a Wizard.")
    print("Name of Wizard: ", end="")
    name = _read(tokens)
    attack = _ask_attack(tokens)
    print(f"{prefix}What level is your wizard?")
    party.append(Wizard(name, MAX_HEALTH, attack, _read_int(tokens)))

    while True:
        print(f"{prefix}Choose your character's class. (Either Elf, Warrior, or Wizard)")
        kind = _read(tokens)
        print(f"{prefix}Name your character")
        name = _read(tokens)
        attack = _ask_attack(tokens, party)
        if kind == CharType.WARRIOR.value:
            print("And to whom does he pledge his allegiance?")
            party.append(Warrior(name, MAX_HEALTH, attack, _read(tokens)))
        elif kind == CharType.ELF.value:
            print(f"{prefix}And to which family does he belong?")
            party.append(Elf(name, MAX_HEALTH, attack, _read(tokens)))
        else:
            print(f"{prefix}What level is your wizard? (Max level is 10)")
            level = _read_int(tokens)
            while level > MAX_LEVEL:
                print("Invalid level. Input again: ", end="")
                level = _read_int(tokens)
            party.append(Wizard(name, MAX_HEALTH, attack, level))
        if sum_of_attack(party) >= PARTY_ATTACK_LIMIT:
            return party


def main(argv: list[str] | None = None) -> int:
    """Build two parties from standard input and let them fight."""
    tokens = _tokens(sys.stdin)
    try:
        party1 = _build_party(1, tokens)
        party2 = _build_party(2, tokens)
        result = fight(party1, party2)
    except (EOFError, ValueError, RuntimeError, ZeroDivisionError) as error:
        print(error)
        return 1
    for line in result.log:
        print(line)
    return 0