import os
import sys

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.append(project_root)

from abc import ABC, abstractmethod
from common.config import ExampleName
from common.patterns import SealedSkeleton
from common.utils import Logger, emit


class CaffeineDrink(SealedSkeleton, ABC):
    """
    Defines the recipe outline. Subclasses supply brew() and add_condiments(),
    and may answer the customer_wants_condiments() hook. The order of the steps is fixed.
    """
    _sealed_methods = ("prepare_recipe",)

    def prepare_recipe(self) -> None:
        self._boil_water()
        self.brew()
        self._pour_in_cup()

        if self.customer_wants_condiments():
            self.add_condiments()

    def _boil_water(self) -> None:
        emit("Boiling water")

    def _pour_in_cup(self) -> None:
        emit("Pouring into cup")

    # hook
    def customer_wants_condiments(self) -> bool:
        return True

    @abstractmethod
    def brew(self) -> None:
        pass

    @abstractmethod
    def add_condiments(self) -> None:
        pass


class Tea(CaffeineDrink):
    # Keeps the default hook, so condiments are always added
    def brew(self) -> None:
        emit("Brewing the tea")

    def add_condiments(self) -> None:
        emit("Adding lemon to tea")


class Coffee(CaffeineDrink):
    def brew(self) -> None:
        emit("Dripping coffee through filter")

    def add_condiments(self) -> None:
        emit("Adding sugar and cream")

    def customer_wants_condiments(self) -> bool:
        return False


def template_method_example() -> None:
    logger = Logger(ExampleName.TEMPLATE_METHOD)

    for index, drink in enumerate((Tea(), Coffee())):
        if index:
            emit("\n")
        logger.log(f"Preparing {type(drink).__name__}")
        drink.prepare_recipe()


if __name__ == "__main__":
    template_method_example()
