import os
import sys

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.append(project_root)

from abc import ABC, abstractmethod
from common.config import ExampleName
from common.utils import Logger, emit, require_delegate


# region Target interface
class Duck(ABC):
    """
    The interface client code expects. The adapter below translates a Turkey into it.
    """
    @abstractmethod
    def quack(self) -> None:
        pass

    @abstractmethod
    def fly(self) -> None:
        pass

class FluffyDuck(Duck):
    def quack(self) -> None:
        emit("Fluffy Duck Quacking!")

    def fly(self) -> None:
        emit("Its so FLUFFY!!! (That fluffy duck flying!)")
# endregion

# region Adaptee
class Turkey(ABC):
    @abstractmethod
    def gobble(self) -> None:
        pass

    @abstractmethod
    def fly(self) -> None:
        pass

class CookedThanksgivingTurkey(Turkey):
    def gobble(self) -> None:
        emit("Did you just hear something in the oven?!")

    def fly(self) -> None:
        emit("Turkey flying away!!")
# endregion


class TurkeyToDuckAdapter(Duck):
    """
    Presents a Turkey through the Duck interface. Each Duck call becomes exactly one Turkey call.
    The adapter delegates to the turkey but does not own it.
    """

    def __init__(self, turkey: Turkey):
        self._turkey: Turkey = require_delegate(turkey, "TurkeyToDuckAdapter")

    def quack(self) -> None:
        self._turkey.gobble()

    def fly(self) -> None:
        self._turkey.fly()


def test_duck(duck: Duck) -> None:
    """
    Client code written against the Duck interface only.
    :param duck: Any Duck, including adapted turkeys.
    """
    duck.fly()
    duck.quack()


def adapter_example() -> None:
    logger = Logger(ExampleName.ADAPTER)

    fluffy_duck = FluffyDuck()
    yummy_turkey = CookedThanksgivingTurkey()
    converted_yummy_turkey = TurkeyToDuckAdapter(yummy_turkey)

    logger.log("Testing a real duck")
    test_duck(fluffy_duck)
    logger.log("Testing a turkey adapted to the Duck interface")
    test_duck(converted_yummy_turkey)


if __name__ == "__main__":
    adapter_example()
