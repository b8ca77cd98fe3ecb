from decimal import Decimal

# Constants
LOGS_DIR = "logs"
SECTION_SEPARATOR = "======================="
DISPLAY_SEPARATOR = "----------------"

# Beverage menu (Decorator example)
class Description:
    DEFAULT = "No Description Found"
    ESPRESSO = "Espresso"
    HOUSE_BLEND = "House Blend"
    SPRINKLES = " + Sprinkles"
    WHIPPED_CREAM = " + Whipped Cream"
    CHERRY = " + Cherry"

class Cost:
    DEFAULT = Decimal("0.00")
    ESPRESSO = Decimal("1.99")
    HOUSE_BLEND = Decimal("2.99")
    SPRINKLES = Decimal("0.20")
    WHIPPED_CREAM = Decimal("0.40")
    CHERRY = Decimal("0.10")

# Weather station readings (Observer examples)
class WeatherReading:
    TEMPERATURE = 91.50
    HUMIDITY = 37.45
    PRESSURE = 88.74

class ForecastOffset:
    TEMPERATURE = 5
    HUMIDITY = 1
    PRESSURE = 3

# Furniture families
class FurnitureStyle:
    VICTORIAN = "Victorian"
    MODERN = "Modern"

# Example names
class ExampleName:
    ADAPTER = "adapter"
    DECORATOR = "decorator"
    COMMAND = "command"
    STRATEGY = "strategy"
    STRATEGY_DUCKS = "strategy_ducks"
    WEATHER_STATION = "weather_station"
    WEATHER_STATION_DIRECT = "weather_station_direct"
    TEMPLATE_METHOD = "template_method"
    ABSTRACT_FACTORY = "abstract_factory"
    FACTORY_METHOD = "factory_method"
    SINGLETON = "singleton"
    LEAST_KNOWLEDGE = "least_knowledge"
    CATALOG = "catalog"
