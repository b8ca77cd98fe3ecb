import os
import sys
from decimal import Decimal

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.append(project_root)

from abc import ABC, abstractmethod
from common.config import Cost, Description, ExampleName, SECTION_SEPARATOR
from common.utils import Logger, emit, require_delegate


class Consumable(ABC):
    """
    Anything that can be ordered: it has a description and a cost.
    Decorators implement this same interface so they can wrap each other in any order.
    """

    def __init__(self):
        self._description: str = Description.DEFAULT
        self._cost: Decimal = Cost.DEFAULT

    @abstractmethod
    def get_description(self) -> str:
        pass

    @abstractmethod
    def get_cost(self) -> Decimal:
        pass


# region Beverages
class Espresso(Consumable):
    def __init__(self):
        super().__init__()
        self._description = Description.ESPRESSO
        self._cost = Cost.ESPRESSO

    def get_description(self) -> str:
        return self._description

    def get_cost(self) -> Decimal:
        return self._cost

class HouseBlend(Consumable):
    def __init__(self):
        super().__init__()
        self._description = Description.HOUSE_BLEND
        self._cost = Cost.HOUSE_BLEND

    def get_description(self) -> str:
        return self._description

    def get_cost(self) -> Decimal:
        return self._cost
# endregion


# region Decorators
class ConsumableDecorator(Consumable):
    """
    Wraps another Consumable and adds one fixed suffix and one fixed cost on top of it.
    :param consumable: The wrapped item. It is owned by this decorator for the rest of the chain.
    """
    suffix: str = ""
    increment: Decimal = Cost.DEFAULT

    def __init__(self, consumable: Consumable):
        if not self.suffix:
            raise TypeError(f"{type(self).__name__} must define a suffix to be used as a layer")
        super().__init__()
        self._consumable: Consumable = require_delegate(consumable, type(self).__name__)
        self._description = self.suffix
        self._cost = self.increment

    def get_description(self) -> str:
        return self._consumable.get_description() + self._description

    def get_cost(self) -> Decimal:
        return self._consumable.get_cost() + self._cost

class SprinklesDecorator(ConsumableDecorator):
    suffix = Description.SPRINKLES
    increment = Cost.SPRINKLES

class WhippedCreamDecorator(ConsumableDecorator):
    suffix = Description.WHIPPED_CREAM
    increment = Cost.WHIPPED_CREAM

class CherryDecorator(ConsumableDecorator):
    suffix = Description.CHERRY
    increment = Cost.CHERRY
# endregion


def print_consumable(consumable: Consumable) -> None:
    emit(consumable.get_description())
    emit(consumable.get_cost())


def decorator_example() -> None:
    logger = Logger(ExampleName.DECORATOR)

    # Basic beverage
    coffee = HouseBlend()
    print_consumable(coffee)
    emit(f"\n{SECTION_SEPARATOR}\n")

    # Each layer wraps the previous one
    for decorator in (SprinklesDecorator, WhippedCreamDecorator, CherryDecorator):
        coffee = decorator(coffee)
        logger.log(f"Added {decorator.__name__}: {coffee.get_description()}")
        print_consumable(coffee)
        emit(f"\n{SECTION_SEPARATOR}\n")

    # Simple coffee with whipped cream
    espresso_with_whipped_cream = WhippedCreamDecorator(Espresso())
    print_consumable(espresso_with_whipped_cream)
    logger.log(f"Final order total: {coffee.get_cost() + espresso_with_whipped_cream.get_cost()}")


if __name__ == "__main__":
    decorator_example()
