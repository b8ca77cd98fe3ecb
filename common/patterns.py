from abc import ABC, abstractmethod

from common.utils import require_delegate


# Observer pattern
class Observer(ABC):
    @abstractmethod
    def update(self) -> None:
        """
        Called by the subject after its state changed. Observers pull what they need from the subject.
        """
        pass

class Subject:
    def __init__(self):
        self._observers = []

    def register_observer(self, observer):
        require_delegate(observer, "Subject.register_observer")
        self._observers.append(observer)

    def remove_observer(self, observer):
        if observer in self._observers:
            self._observers.remove(observer)

    def notify_observers(self):
        # Snapshot: observers may register or remove others while being notified
        for observer in list(self._observers):
            observer.update()

class DisplayElement(ABC):
    @abstractmethod
    def display(self) -> None:
        pass

# Command pattern
class Command(ABC):
    @abstractmethod
    def execute(self) -> None:
        pass

# Template method support
class SealedSkeleton:
    """
    Base for classes that define an algorithm skeleton subclasses must not replace.
    Names listed in _sealed_methods can be defined once, by the class that introduces them.
    Every later subclass must resolve each name to that same function, whether it overrides
    the name itself or inherits a replacement from a mixin.
    """
    _sealed_methods: tuple = ()
    _sealed_impls: dict = {}

    def __init_subclass__(cls, **kwargs):
        super().__init_subclass__(**kwargs)
        sealed_impls = dict(cls._sealed_impls)
        for name in cls._sealed_methods:
            impl = getattr(cls, name, None)
            if name not in sealed_impls:
                if impl is not None:
                    sealed_impls[name] = impl
            elif impl is not sealed_impls[name]:
                raise TypeError(f"{cls.__name__} cannot override sealed method '{name}'")
        cls._sealed_impls = sealed_impls
