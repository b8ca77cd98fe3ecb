import os
import sys
from typing import Optional

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.append(project_root)

from abc import ABC, abstractmethod
from common.config import ExampleName
from common.utils import Logger, emit, require_delegate


#region Fly behaviors
class FlyBehavior(ABC):
    @abstractmethod
    def fly(self) -> None:
        pass

class FlyWithWings(FlyBehavior):
    def fly(self) -> None:
        emit("I'm flying!")

class FlyNoWay(FlyBehavior):
    def fly(self) -> None:
        emit("I can't fly!")

class RocketShipFly(FlyBehavior):
    def fly(self) -> None:
        emit("I am faster than a rocket ship flying!")
#endregion

#region Quack behaviors
class QuackBehavior(ABC):
    @abstractmethod
    def quack(self) -> None:
        pass

class Quack(QuackBehavior):
    def quack(self) -> None:
        emit("Quack!")

class CantQuack(QuackBehavior):
    def quack(self) -> None:
        emit("<< Silence >>")

class Squeak(QuackBehavior):
    def quack(self) -> None:
        emit("Squeak Squeak")
#endregion


class Duck(ABC):
    """
    Parent duck. Flying and quacking are delegated to behavior objects that can be swapped at runtime.
    """

    def __init__(self, fly_behavior: Optional[FlyBehavior] = None,
                 quack_behavior: Optional[QuackBehavior] = None):
        """
        :param fly_behavior: How this duck flies. Defaults to FlyNoWay.
        :param quack_behavior: How this duck quacks. Defaults to CantQuack.
        """
        self._fly_behavior: FlyBehavior = fly_behavior if fly_behavior is not None else FlyNoWay()
        self._quack_behavior: QuackBehavior = quack_behavior if quack_behavior is not None else CantQuack()

    @abstractmethod
    def display(self) -> None:
        pass

    def perform_fly(self) -> None:
        self._fly_behavior.fly()

    def perform_quack(self) -> None:
        self._quack_behavior.quack()

    def float_in_water(self) -> None:
        emit("All ducks can float!")

    def set_fly_behavior(self, fly_behavior: FlyBehavior) -> None:
        self._fly_behavior = require_delegate(fly_behavior, "Duck.set_fly_behavior")

    def set_quack_behavior(self, quack_behavior: QuackBehavior) -> None:
        self._quack_behavior = require_delegate(quack_behavior, "Duck.set_quack_behavior")


class SillyDuck(Duck):
    """Can fly, can't quack."""
    def __init__(self):
        super().__init__(FlyWithWings(), CantQuack())

    def display(self) -> None:
        emit("I am a silly duck!")

class RocketDuck(Duck):
    def __init__(self):
        super().__init__(RocketShipFly(), Squeak())

    def display(self) -> None:
        emit("I am a rocket powered duck!")


def strategy_ducks_example() -> None:
    logger = Logger(ExampleName.STRATEGY_DUCKS)

    emit("Silly Duck")
    silly_duck = SillyDuck()
    silly_duck.display()
    silly_duck.perform_fly()
    silly_duck.perform_quack()

    emit("Rocket Duck")
    rocket_duck = RocketDuck()
    rocket_duck.display()
    rocket_duck.perform_fly()
    rocket_duck.perform_quack()

    # Change the rocket duck's quack at runtime
    rocket_duck.set_quack_behavior(Quack())
    logger.log("Rocket duck switched to Quack")
    rocket_duck.perform_quack()


if __name__ == "__main__":
    strategy_ducks_example()
