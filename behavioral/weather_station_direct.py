import os
import sys

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.append(project_root)

from common.config import ExampleName, ForecastOffset
from common.patterns import DisplayElement, Observer, Subject
from common.utils import Logger, emit, require_delegate
from behavioral.weather_station import WeatherDataFromDB, WeatherDataGetter


class WeatherDataSubject(Subject):
    """
    Weather subject that copies the getter's readings as soon as it is built.
    """

    def __init__(self, weather_data_getter: WeatherDataGetter):
        super().__init__()
        self._weather_data_getter = require_delegate(weather_data_getter, "WeatherDataSubject")
        self._temperature: float = weather_data_getter.get_temperature()
        self._humidity: float = weather_data_getter.get_humidity()
        self._pressure: float = weather_data_getter.get_pressure()

    def set_measurements(self) -> None:
        self._temperature = self._weather_data_getter.get_temperature()
        self._humidity = self._weather_data_getter.get_humidity()
        self._pressure = self._weather_data_getter.get_pressure()
        self.notify_observers()

    def get_temperature(self) -> float:
        return self._temperature

    def get_humidity(self) -> float:
        return self._humidity

    def get_pressure(self) -> float:
        return self._pressure


class CurrentConditionsDisplay(Observer, DisplayElement):
    def __init__(self, weather_data_subject: WeatherDataSubject):
        self._subject = require_delegate(weather_data_subject, "CurrentConditionsDisplay")
        self._temperature: float = weather_data_subject.get_temperature()
        self._pressure: float = weather_data_subject.get_pressure()
        self._humidity: float = weather_data_subject.get_humidity()

    def display(self) -> None:
        emit(f"Temperature: {self._temperature:f}")
        emit(f"Humidity: {self._humidity:f}")
        emit(f"Pressure: {self._pressure:f}")

    def update(self) -> None:
        self._temperature = self._subject.get_temperature()
        self._humidity = self._subject.get_humidity()
        self._pressure = self._subject.get_pressure()


class FutureConditionsDisplay(Observer, DisplayElement):
    """Shows zeros until the first update."""

    def __init__(self, weather_data_subject: WeatherDataSubject):
        self._subject = require_delegate(weather_data_subject, "FutureConditionsDisplay")
        self._temperature: float = 0.0
        self._pressure: float = 0.0
        self._humidity: float = 0.0

    def update(self) -> None:
        self._temperature = self._subject.get_temperature()
        self._pressure = self._subject.get_pressure()
        self._humidity = self._subject.get_humidity()

    def display(self) -> None:
        emit("Future forecast")
        emit(f"Forecast Temperature: {self._temperature + ForecastOffset.TEMPERATURE:f}")
        emit(f"Forecast Humidity: {self._humidity + ForecastOffset.HUMIDITY:f}")
        emit(f"Forecast Pressure: {self._pressure + ForecastOffset.PRESSURE:f}")


def show_display(display_element: DisplayElement) -> None:
    display_element.display()


def weather_station_direct_example() -> None:
    logger = Logger(ExampleName.WEATHER_STATION_DIRECT)

    weather_data_subject = WeatherDataSubject(WeatherDataFromDB())

    current_conditions_display = CurrentConditionsDisplay(weather_data_subject)
    future_conditions_display = FutureConditionsDisplay(weather_data_subject)
    weather_data_subject.register_observer(current_conditions_display)
    weather_data_subject.register_observer(future_conditions_display)
    logger.log("Registered 2 displays")

    # Update weather and notify all observers
    weather_data_subject.set_measurements()

    show_display(current_conditions_display)
    show_display(future_conditions_display)


if __name__ == "__main__":
    weather_station_direct_example()
