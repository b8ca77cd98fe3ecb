import os
import sys

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.append(project_root)

from abc import ABC, abstractmethod
from common.config import ExampleName
from common.utils import Logger, emit, require_delegate


# Weapon behaviors (the interchangeable algorithms)
class WeaponBehavior(ABC):
    @abstractmethod
    def use_weapon(self) -> None:
        pass

class KnifeBehavior(WeaponBehavior):
    def use_weapon(self) -> None:
        emit("Using a knife!")

class BowAndArrowBehavior(WeaponBehavior):
    def use_weapon(self) -> None:
        emit("Aiming a bow!")

class AxeBehavior(WeaponBehavior):
    def use_weapon(self) -> None:
        emit("Chopping an axe!")

class SwordBehavior(WeaponBehavior):
    def use_weapon(self) -> None:
        emit("Swinging a sword!")

class NoWeapon(WeaponBehavior):
    def use_weapon(self) -> None:
        emit("No weapon exists! Uh oh!")


class Character(ABC):
    """
    A character starts unarmed and can switch weapons at any time.
    """

    def __init__(self):
        self._weapon: WeaponBehavior = NoWeapon()

    def set_weapon(self, weapon: WeaponBehavior) -> None:
        self._weapon = require_delegate(weapon, "Character.set_weapon")

    def use_weapon(self) -> None:
        self._weapon.use_weapon()

    @abstractmethod
    def display(self) -> None:
        pass

class Queen(Character):
    def display(self) -> None:
        emit("I am a queen!")

class King(Character):
    def display(self) -> None:
        emit("I am a king!")

class Troll(Character):
    def display(self) -> None:
        emit("I am a troll!")

class Knight(Character):
    def display(self) -> None:
        emit("I am knight!")


def strategy_example() -> None:
    logger = Logger(ExampleName.STRATEGY)

    emit("Queen")
    queen_character = Queen()
    queen_character.display()
    queen_character.use_weapon()

    emit("King")
    king_character = King()
    king_character.display()
    king_character.use_weapon()

    emit("Queen")
    queen_character.set_weapon(SwordBehavior())
    logger.log("Queen switched to SwordBehavior")
    queen_character.use_weapon()


if __name__ == "__main__":
    strategy_example()
