import pytest

from patternkit.builder import Car, CarBuilder, CarDirector, ConcreteCarBuilder, main


def test_car_defaults_and_describe():
    car = Car()
    assert car.describe() == "Make: N/A\nModel: N/A"
    assert car.parts == []


def test_describe_uses_make_and_model():
    assert Car("Ford", "Mustang").describe() == "Make: Ford\nModel: Mustang"


def test_take_car_returns_named_car_then_resets_to_default():
    builder = ConcreteCarBuilder("Ford", "Mustang")
    first = builder.take_car()
    assert (first.make, first.model) == ("Ford", "Mustang")
    second = builder.take_car()
    assert (second.make, second.model) == ("N/A", "N/A")
    assert first is not second


def test_create_car_replaces_current_car():
    builder = ConcreteCarBuilder()
    builder.produce_engine()
    builder.create_car("Audi", "A4")
    car = builder.take_car()
    assert car == Car("Audi", "A4")


def test_produce_messages():
    builder = ConcreteCarBuilder()
    assert builder.produce_engine() == "Engine Created! -- Car"
    assert builder.produce_chassis() == "Chassis Created! -- Car"
    assert builder.produce_transmission() == "Transmission Created! -- Car"


def test_director_minimal_recipe():
    builder = ConcreteCarBuilder()
    director = CarDirector(builder)
    steps = director.build_minimal_viable_car()
    assert steps == ["Chassis Created! -- Car"]
    assert builder.take_car().parts == ["chassis"]


def test_director_maximum_recipe_order():
    builder = ConcreteCarBuilder()
    director = CarDirector(builder)
    director.build_maximum_viable_car()
    assert builder.take_car().parts == ["engine", "transmission", "chassis"]


def test_parts_do_not_carry_over_after_take():
    builder = ConcreteCarBuilder()
    director = CarDirector(builder)
    director.build_maximum_viable_car()
    builder.take_car()
    director.build_minimal_viable_car()
    assert builder.take_car().parts == ["chassis"]


def test_director_without_builder_raises():
    director = CarDirector()
    with pytest.raises(RuntimeError):
        director.build_minimal_viable_car()
    with pytest.raises(RuntimeError):
        director.build_maximum_viable_car()


def test_car_builder_is_abstract():
    with pytest.raises(TypeError):
        CarBuilder()


def test_main_builds_named_car(capsys):
    assert main() == 0
    out = capsys.readouterr().out
    assert "Make: Ford\nModel: Mustang" in out
    assert out.startswith("Winter Project Car Built!\n")