from unittest.mock import MagicMock

import pytest

from common.patterns import Command, DisplayElement, Observer, SealedSkeleton, Subject


def test_subject_register_and_notify_observer():
    subject = Subject()
    observer = MagicMock(spec=Observer)

    subject.register_observer(observer)

    assert observer in subject._observers

    subject.notify_observers()

    observer.update.assert_called_once_with()

def test_subject_remove_observer():
    subject = Subject()
    observer = MagicMock(spec=Observer)

    subject.register_observer(observer)
    subject.remove_observer(observer)

    assert observer not in subject._observers

    subject.notify_observers()

    observer.update.assert_not_called()

def test_subject_remove_unknown_observer_is_noop():
    subject = Subject()
    subject.remove_observer(MagicMock(spec=Observer))
    assert subject._observers == []

def test_subject_keeps_duplicate_registrations():
    subject = Subject()
    observer = MagicMock(spec=Observer)

    subject.register_observer(observer)
    subject.register_observer(observer)
    assert subject._observers.count(observer) == 2

    # remove only drops the first match
    subject.remove_observer(observer)
    assert subject._observers.count(observer) == 1

def test_subject_notifies_in_registration_order():
    subject = Subject()
    calls = []
    for name in ("first", "second", "third"):
        observer = MagicMock(spec=Observer)
        observer.update.side_effect = lambda name=name: calls.append(name)
        subject.register_observer(observer)

    subject.notify_observers()

    assert calls == ["first", "second", "third"]

def test_subject_rejects_none_observer():
    with pytest.raises(ValueError):
        Subject().register_observer(None)

def test_observer_removing_itself_during_notify():
    subject = Subject()
    second = MagicMock(spec=Observer)

    class OneShot(Observer):
        def __init__(self):
            self.calls = 0

        def update(self):
            self.calls += 1
            subject.remove_observer(self)

    one_shot = OneShot()
    subject.register_observer(one_shot)
    subject.register_observer(second)

    subject.notify_observers()
    subject.notify_observers()

    assert one_shot.calls == 1
    assert second.update.call_count == 2

def test_roles_are_abstract():
    for role in (Observer, DisplayElement, Command):
        with pytest.raises(TypeError):
            role()

def test_sealed_skeleton_rejects_override():
    class Base(SealedSkeleton):
        _sealed_methods = ("run",)

        def run(self):
            return "base"

    class Allowed(Base):
        pass

    assert Allowed().run() == "base"

    with pytest.raises(TypeError, match="cannot override sealed method 'run'"):
        class NotAllowed(Base):
            def run(self):
                return "changed"

def test_sealed_skeleton_rejects_mixin_override():
    class Base(SealedSkeleton):
        _sealed_methods = ("run",)

        def run(self):
            return "base"

    class Child(Base):
        pass

    class Shortcut:
        def run(self):
            return "shortcut"

    with pytest.raises(TypeError, match="cannot override sealed method 'run'"):
        class Mixed(Shortcut, Child):
            pass

    class Sibling(SealedSkeleton):
        _sealed_methods = ("run",)

        def run(self):
            return "sibling"

    assert Child().run() == "base"
    assert Sibling().run() == "sibling"
