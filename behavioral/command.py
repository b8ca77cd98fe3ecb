import os
import sys

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.append(project_root)

from common.config import ExampleName
from common.patterns import Command
from common.utils import Logger, emit, require_delegate


# region Receivers
class Light:
    """Receiver: knows how to actually turn the light on."""
    def turn_on(self) -> None:
        emit("Turning light on")

class GarageDoor:
    def open(self) -> None:
        emit("Garage door opening")

    def close(self) -> None:
        emit("Garage door closing")
# endregion


# region Commands
class NoCommand(Command):
    """Placeholder held by an empty slot."""
    def execute(self) -> None:
        emit("No command assigned")

class LightOnCommand(Command):
    def __init__(self, light: Light):
        self._light = require_delegate(light, "LightOnCommand")

    def execute(self) -> None:
        self._light.turn_on()

class GarageDoorOpenCommand(Command):
    def __init__(self, garage_door: GarageDoor):
        self._garage_door = require_delegate(garage_door, "GarageDoorOpenCommand")

    def execute(self) -> None:
        self._garage_door.open()

class GarageDoorCloseCommand(Command):
    def __init__(self, garage_door: GarageDoor):
        self._garage_door = require_delegate(garage_door, "GarageDoorCloseCommand")

    def execute(self) -> None:
        self._garage_door.close()
# endregion


class RemoteControl:
    """
    Invoker: holds one command slot and runs whatever is in it, without knowing what the command does.
    """

    def __init__(self):
        self._command_slot: Command = NoCommand()

    def set_command(self, command: Command) -> None:
        """
        Replace the command in the slot. The previous command is dropped.
        :param command: Command to run on the next button press.
        """
        self._command_slot = require_delegate(command, "RemoteControl.set_command")

    def press_button(self) -> None:
        self._command_slot.execute()


def command_example() -> None:
    logger = Logger(ExampleName.COMMAND)

    # Invoker
    remote_control = RemoteControl()

    # Receivers wrapped in commands, one at a time in the same slot
    light = Light()
    remote_control.set_command(LightOnCommand(light))
    remote_control.press_button()

    garage_door = GarageDoor()
    remote_control.set_command(GarageDoorOpenCommand(garage_door))
    remote_control.press_button()

    remote_control.set_command(GarageDoorCloseCommand(garage_door))
    remote_control.press_button()
    logger.log("Pressed the remote button 3 times")


if __name__ == "__main__":
    command_example()
