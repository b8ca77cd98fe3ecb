from unittest.mock import MagicMock, patch

from principles.least_knowledge import Car, Engine, Key, least_knowledge_example


def test_start_car_output(capsys):
    Car().start_car(Key())

    assert capsys.readouterr().out.splitlines() == [
        "Turning key",
        "Starting car",
        "Turning dashboard on",
        "Locking doors",
    ]

def test_key_turned_to_on_returns_true():
    assert Key().key_turned_to_on() is True

def test_car_does_nothing_when_key_is_off(capsys):
    key = MagicMock(spec=Key)
    key.key_turned_to_on.return_value = False
    car = Car()
    car._engine = MagicMock(spec=Engine)

    car.start_car(key)

    key.key_turned_to_on.assert_called_once_with()
    car._engine.start.assert_not_called()
    assert capsys.readouterr().out == ""

def test_car_builds_its_own_doors():
    with patch("principles.least_knowledge.Doors") as mock_doors:
        Car().start_car(Key())

    mock_doors.assert_called_once_with()
    mock_doors.return_value.lock.assert_called_once_with()

def test_least_knowledge_example_output(capsys):
    least_knowledge_example()

    assert capsys.readouterr().out.splitlines() == [
        "Turning key",
        "Starting car",
        "Turning dashboard on",
        "Locking doors",
    ]
