from unittest.mock import MagicMock

import pytest

from behavioral.command import (
    GarageDoor,
    GarageDoorCloseCommand,
    GarageDoorOpenCommand,
    Light,
    LightOnCommand,
    NoCommand,
    RemoteControl,
    command_example,
)
from common.patterns import Command


def test_remote_starts_with_no_command(capsys):
    remote_control = RemoteControl()

    assert isinstance(remote_control._command_slot, NoCommand)
    remote_control.press_button()
    assert capsys.readouterr().out == "No command assigned\n"

def test_press_button_executes_once():
    remote_control = RemoteControl()
    command = MagicMock(spec=Command)

    remote_control.set_command(command)
    remote_control.press_button()

    command.execute.assert_called_once_with()

def test_set_command_replaces_previous():
    remote_control = RemoteControl()
    first = MagicMock(spec=Command)
    second = MagicMock(spec=Command)

    remote_control.set_command(first)
    remote_control.set_command(second)
    remote_control.press_button()

    first.execute.assert_not_called()
    second.execute.assert_called_once_with()

def test_set_command_rejects_none():
    with pytest.raises(ValueError):
        RemoteControl().set_command(None)

def test_commands_call_their_receiver():
    light = MagicMock(spec=Light)
    garage_door = MagicMock(spec=GarageDoor)

    LightOnCommand(light).execute()
    GarageDoorOpenCommand(garage_door).execute()
    GarageDoorCloseCommand(garage_door).execute()

    light.turn_on.assert_called_once_with()
    garage_door.open.assert_called_once_with()
    garage_door.close.assert_called_once_with()

@pytest.mark.parametrize("command_class", [LightOnCommand, GarageDoorOpenCommand, GarageDoorCloseCommand])
def test_commands_reject_missing_receiver(command_class):
    with pytest.raises(ValueError):
        command_class(None)

def test_command_example_output(capsys):
    command_example()

    assert capsys.readouterr().out.splitlines() == [
        "Turning light on",
        "Garage door opening",
        "Garage door closing",
    ]
