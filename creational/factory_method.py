import os
import sys

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.append(project_root)

from abc import ABC, abstractmethod
from common.config import ExampleName
from common.patterns import SealedSkeleton
from common.utils import Logger, emit


class Transport(ABC):
    @abstractmethod
    def deliver(self) -> None:
        pass

class Truck(Transport):
    def deliver(self) -> None:
        emit("Delivering by truck")

class Boat(Transport):
    def deliver(self) -> None:
        emit("Delivering by boat")


class TransportCreator(SealedSkeleton, ABC):
    """
    Creator: the create-then-test skeleton lives here once. Subclasses only pick the product type.
    """
    _sealed_methods = ("create_and_test_transportation",)

    def create_and_test_transportation(self) -> Transport:
        """
        Build a transport through the factory method and run it once.
        :return: The created transport.
        """
        transport = self.create_transportation()
        transport.deliver()
        return transport

    @abstractmethod
    def create_transportation(self) -> Transport:
        pass

class TruckCreator(TransportCreator):
    def create_transportation(self) -> Transport:
        return Truck()

class BoatCreator(TransportCreator):
    def create_transportation(self) -> Transport:
        return Boat()


def factory_method_example() -> None:
    logger = Logger(ExampleName.FACTORY_METHOD)

    truck = TruckCreator().create_and_test_transportation()
    boat = BoatCreator().create_and_test_transportation()
    logger.log(f"Created {type(truck).__name__} and {type(boat).__name__}")


if __name__ == "__main__":
    factory_method_example()
