import os
import sys
from typing import Optional

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.append(project_root)

from common.config import ExampleName
from common.utils import Logger, emit

_CREATION_TOKEN = object()


class NamedSingleton:
    """
    Process-wide single instance. Created lazily by the first get_instance() call and kept
    for the rest of the process; later calls return it unchanged and ignore their name argument.
    """
    _instance: Optional["NamedSingleton"] = None

    def __init__(self, name: str, _token: object = None):
        if _token is not _CREATION_TOKEN:
            raise TypeError("NamedSingleton cannot be constructed directly, use get_instance()")
        self._singleton_name = name

    @classmethod
    def get_instance(cls, name: str) -> "NamedSingleton":
        """
        :param name: Name used only when the instance does not exist yet.
        :return: The single instance.
        """
        if cls._instance is None:
            cls._instance = cls(name, _token=_CREATION_TOKEN)
        return cls._instance

    def see_name(self) -> None:
        emit(self._singleton_name)

    @property
    def name(self) -> str:
        return self._singleton_name

    def __copy__(self):
        raise TypeError("NamedSingleton cannot be copied")

    def __deepcopy__(self, memo):
        raise TypeError("NamedSingleton cannot be copied")


def singleton_example() -> None:
    logger = Logger(ExampleName.SINGLETON)

    my_singleton_object = NamedSingleton.get_instance("Comet")
    my_singleton_object.see_name()

    my_singleton_object = NamedSingleton.get_instance("Halley")
    my_singleton_object.see_name()
    logger.log(f"Singleton name after 2 calls: {my_singleton_object.name}")


if __name__ == "__main__":
    singleton_example()
