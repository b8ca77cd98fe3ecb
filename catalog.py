import os
import sys
from typing import Callable, Dict, Iterable, List, Optional

project_root = os.path.dirname(os.path.abspath(__file__))
sys.path.append(project_root)

from common.config import ExampleName
from common.utils import Logger, emit, normalize_whitespace
from behavioral.command import command_example
from behavioral.strategy import strategy_example
from behavioral.strategy_ducks import strategy_ducks_example
from behavioral.template_method import template_method_example
from behavioral.weather_station import weather_station_example
from behavioral.weather_station_direct import weather_station_direct_example
from creational.abstract_factory import abstract_factory_example
from creational.factory_method import factory_method_example
from creational.singleton import singleton_example
from principles.least_knowledge import least_knowledge_example
from structural.adapter import adapter_example
from structural.decorator import decorator_example

EXAMPLES: Dict[str, Callable[[], None]] = {
    ExampleName.ADAPTER: adapter_example,
    ExampleName.COMMAND: command_example,
    ExampleName.DECORATOR: decorator_example,
    ExampleName.ABSTRACT_FACTORY: abstract_factory_example,
    ExampleName.FACTORY_METHOD: factory_method_example,
    ExampleName.WEATHER_STATION: weather_station_example,
    ExampleName.WEATHER_STATION_DIRECT: weather_station_direct_example,
    ExampleName.SINGLETON: singleton_example,
    ExampleName.STRATEGY: strategy_example,
    ExampleName.STRATEGY_DUCKS: strategy_ducks_example,
    ExampleName.TEMPLATE_METHOD: template_method_example,
    ExampleName.LEAST_KNOWLEDGE: least_knowledge_example,
}


def run_examples(names: Optional[Iterable[str]] = None) -> List[str]:
    """
    Run the named examples in the given order, or every example when no names are given.
    :param names: Example names (see EXAMPLES).
    :return: The names that were run.
    :raises KeyError: If any name is unknown. Nothing runs in that case.
    """
    names = list(names or [])
    selected = [normalize_whitespace(name).lower() for name in names] if names else list(EXAMPLES)
    for name in selected:
        if name not in EXAMPLES:
            raise KeyError(name)

    for name in selected:
        emit(f"=== {name} ===")
        EXAMPLES[name]()
    return selected


def main(argv: Optional[List[str]] = None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    logger = Logger(ExampleName.CATALOG, is_catalog=True)
    try:
        ran = run_examples(argv)
    except KeyError as e:
        logger.log(f"Unknown example: {e.args[0]}", also_print=True)
        return 1

    logger.log(f"Ran {len(ran)} examples: {', '.join(ran)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
