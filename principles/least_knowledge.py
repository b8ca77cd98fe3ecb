import os
import sys

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.append(project_root)

from common.config import ExampleName
from common.utils import Logger, emit


class Engine:
    def start(self) -> None:
        emit("Starting car")

class Doors:
    def lock(self) -> None:
        emit("Locking doors")

class Key:
    def key_turned_to_on(self) -> bool:
        emit("Turning key")
        return True


class Car:
    """
    start_car() only calls methods on itself, on its own engine, on the key it was given
    and on the doors it builds. It never reaches through one object to call another.
    """

    def __init__(self):
        self._engine = Engine()

    def start_car(self, key: Key) -> None:
        doors = Doors()  # built here
        key_is_on = key.key_turned_to_on()  # parameter
        if key_is_on:
            self._engine.start()  # component
            self._turn_dashboard_on()  # own method
            doors.lock()

    def _turn_dashboard_on(self) -> None:
        emit("Turning dashboard on")


def least_knowledge_example() -> None:
    logger = Logger(ExampleName.LEAST_KNOWLEDGE)

    car = Car()
    key = Key()
    car.start_car(key)
    logger.log("Car started")


if __name__ == "__main__":
    least_knowledge_example()
