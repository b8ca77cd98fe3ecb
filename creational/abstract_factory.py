import os
import sys
from typing import Tuple

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.append(project_root)

from abc import ABC, abstractmethod
from common.config import ExampleName, FurnitureStyle
from common.utils import Logger, emit


# Product interface 1
class Chair(ABC):
    style: str

    @abstractmethod
    def sit(self) -> None:
        pass

class VictorianChair(Chair):
    style = FurnitureStyle.VICTORIAN

    def sit(self) -> None:
        emit("Sitting on a Victorian chair")

class ModernChair(Chair):
    style = FurnitureStyle.MODERN

    def sit(self) -> None:
        emit("Sitting on a Modern chair")


# Product interface 2
class CoffeeTable(ABC):
    style: str

    @abstractmethod
    def eat(self) -> None:
        pass

class VictorianCoffeeTable(CoffeeTable):
    style = FurnitureStyle.VICTORIAN

    def eat(self) -> None:
        emit("Eating at Victorian coffee table")

class ModernCoffeeTable(CoffeeTable):
    style = FurnitureStyle.MODERN

    def eat(self) -> None:
        emit("Eating at Modern coffee table")


class FurnitureFactory(ABC):
    """
    Produces a family of furniture. Every product from one factory shares the same style.
    """
    @abstractmethod
    def create_chair(self) -> Chair:
        pass

    @abstractmethod
    def create_coffee_table(self) -> CoffeeTable:
        pass

class VictorianFurnitureFactory(FurnitureFactory):
    def create_chair(self) -> Chair:
        return VictorianChair()

    def create_coffee_table(self) -> CoffeeTable:
        return VictorianCoffeeTable()

class ModernFurnitureFactory(FurnitureFactory):
    def create_chair(self) -> Chair:
        return ModernChair()

    def create_coffee_table(self) -> CoffeeTable:
        return ModernCoffeeTable()


def furnish_room(furniture_factory: FurnitureFactory) -> Tuple[Chair, CoffeeTable]:
    """
    Client code: only talks to the abstract factory and the abstract products.
    :param furniture_factory: Factory for the style of the room.
    :return: The chair and coffee table that were created.
    """
    new_chair = furniture_factory.create_chair()
    new_coffee_table = furniture_factory.create_coffee_table()

    new_chair.sit()
    new_coffee_table.eat()
    return new_chair, new_coffee_table


def abstract_factory_example() -> None:
    logger = Logger(ExampleName.ABSTRACT_FACTORY)

    for furniture_factory in (VictorianFurnitureFactory(), ModernFurnitureFactory()):
        chair, coffee_table = furnish_room(furniture_factory)
        logger.log(f"{type(furniture_factory).__name__} built a {chair.style} chair and a {coffee_table.style} table")


if __name__ == "__main__":
    abstract_factory_example()
