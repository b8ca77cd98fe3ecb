import os
import sys
from typing import List

project_root = os.path.dirname(os.path.dirname(os.path.abspath(__file__)))
sys.path.append(project_root)

from abc import ABC, abstractmethod
from common.config import DISPLAY_SEPARATOR, ExampleName, ForecastOffset, WeatherReading
from common.patterns import DisplayElement, Observer, Subject
from common.utils import Logger, emit, require_delegate


class WeatherDataGetter(ABC):
    """
    Source of raw weather readings.
    """
    @abstractmethod
    def get_temperature(self) -> float:
        pass

    @abstractmethod
    def get_humidity(self) -> float:
        pass

    @abstractmethod
    def get_pressure(self) -> float:
        pass

class WeatherDataFromDB(WeatherDataGetter):
    def get_temperature(self) -> float:
        return WeatherReading.TEMPERATURE

    def get_humidity(self) -> float:
        return WeatherReading.HUMIDITY

    def get_pressure(self) -> float:
        return WeatherReading.PRESSURE


class WeatherDataSubject(Subject):
    """
    The "one" in the one-to-many relationship. Readings start at zero until set_measurements() is called.
    """

    def __init__(self, weather_getter: WeatherDataGetter):
        super().__init__()
        self._weather_getter: WeatherDataGetter = require_delegate(weather_getter, "WeatherDataSubject")
        self._temperature: float = 0.0
        self._humidity: float = 0.0
        self._pressure: float = 0.0

    def set_measurements(self) -> None:
        """
        Pull fresh readings from the getter, then notify observers once all three are stored.
        :return: None
        """
        self._temperature = self._weather_getter.get_temperature()
        self._humidity = self._weather_getter.get_humidity()
        self._pressure = self._weather_getter.get_pressure()
        self.notify_observers()

    def get_temperature(self) -> float:
        return self._temperature

    def get_humidity(self) -> float:
        return self._humidity

    def get_pressure(self) -> float:
        return self._pressure


class ConditionsDisplay(Observer, DisplayElement, ABC):
    """
    An observer that keeps a copy of the subject's readings. Construction does not register it;
    call register_self() once the display is built.
    """

    def __init__(self, weather_data_subject: WeatherDataSubject):
        self._subject: WeatherDataSubject = require_delegate(weather_data_subject, type(self).__name__)
        self._temperature: float = weather_data_subject.get_temperature()
        self._humidity: float = weather_data_subject.get_humidity()
        self._pressure: float = weather_data_subject.get_pressure()

    def register_self(self) -> None:
        self._subject.register_observer(self)

    def update(self) -> None:
        self._temperature = self._subject.get_temperature()
        self._humidity = self._subject.get_humidity()
        self._pressure = self._subject.get_pressure()

class CurrentConditionsDisplay(ConditionsDisplay):
    def display(self) -> None:
        emit(f"Temperature: {self._temperature:f}")
        emit(f"Humidity: {self._humidity:f}")
        emit(f"Pressure: {self._pressure:f}")

class ForecastConditionsDisplay(ConditionsDisplay):
    def display(self) -> None:
        emit(f"Forecast Temperature: {self._temperature + ForecastOffset.TEMPERATURE:f}")
        emit(f"Forecast Humidity: {self._humidity + ForecastOffset.HUMIDITY:f}")
        emit(f"Forecast Pressure: {self._pressure + ForecastOffset.PRESSURE:f}")


def display_weather_observer(display_elements: List[DisplayElement]) -> None:
    for element in display_elements:
        element.display()
        emit(DISPLAY_SEPARATOR)


def weather_station_example() -> None:
    logger = Logger(ExampleName.WEATHER_STATION)

    weather_data_subject = WeatherDataSubject(WeatherDataFromDB())

    # Build first, then register
    current_conditions_display = CurrentConditionsDisplay(weather_data_subject)
    current_conditions_display.register_self()
    forecast_conditions_display = ForecastConditionsDisplay(weather_data_subject)
    forecast_conditions_display.register_self()

    # Get weather data and notify all observers
    weather_data_subject.set_measurements()
    logger.log(
        f"Measurements set: {weather_data_subject.get_temperature()}, "
        f"{weather_data_subject.get_humidity()}, {weather_data_subject.get_pressure()}"
    )

    display_weather_observer([current_conditions_display, forecast_conditions_display])


if __name__ == "__main__":
    weather_station_example()
