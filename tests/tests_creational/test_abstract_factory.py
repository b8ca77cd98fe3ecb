import pytest

from common.config import FurnitureStyle
from creational.abstract_factory import (
    FurnitureFactory,
    ModernChair,
    ModernCoffeeTable,
    ModernFurnitureFactory,
    VictorianChair,
    VictorianCoffeeTable,
    VictorianFurnitureFactory,
    abstract_factory_example,
    furnish_room,
)


@pytest.mark.parametrize("factory_class, chair_class, table_class, style", [
    (VictorianFurnitureFactory, VictorianChair, VictorianCoffeeTable, FurnitureStyle.VICTORIAN),
    (ModernFurnitureFactory, ModernChair, ModernCoffeeTable, FurnitureStyle.MODERN),
])
def test_factory_returns_a_matching_family(factory_class, chair_class, table_class, style):
    factory = factory_class()

    for _ in range(3):
        chair = factory.create_chair()
        table = factory.create_coffee_table()
        assert type(chair) is chair_class
        assert type(table) is table_class
        assert chair.style == table.style == style

def test_factory_creates_new_products_each_call():
    factory = ModernFurnitureFactory()
    assert factory.create_chair() is not factory.create_chair()

def test_furniture_factory_is_abstract():
    with pytest.raises(TypeError):
        FurnitureFactory()

def test_furnish_room_output(capsys):
    chair, table = furnish_room(VictorianFurnitureFactory())

    assert isinstance(chair, VictorianChair)
    assert isinstance(table, VictorianCoffeeTable)
    assert capsys.readouterr().out.splitlines() == [
        "Sitting on a Victorian chair",
        "Eating at Victorian coffee table",
    ]

def test_abstract_factory_example_output(capsys):
    abstract_factory_example()

    assert capsys.readouterr().out.splitlines() == [
        "Sitting on a Victorian chair",
        "Eating at Victorian coffee table",
        "Sitting on a Modern chair",
        "Eating at Modern coffee table",
    ]
