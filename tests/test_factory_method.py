import pytest

from patternkit.factory_method import (
    Cow,
    CowCreator,
    Pig,
    PigCreator,
    Sheep,
    SheepCreator,
    animal_sounds,
    create_one_of_each,
    main,
)


@pytest.mark.parametrize(
    "creator, animal_type, sound",
    [
        (CowCreator(), Cow, "Moo!"),
        (SheepCreator(), Sheep, "Baa!"),
        (PigCreator(), Pig, "Oink!"),
    ],
)
def test_creator_makes_its_animal(creator, animal_type, sound):
    animal = creator.create_animal()
    assert type(animal) is animal_type
    assert animal.sound() == sound
    assert animal.name is None


def test_factory_method_passes_name():
    animal = SheepCreator().factory_method("Grant")
    assert animal.name == "Grant"
    assert animal.introduce() == "I'm a sheep, and my name is Grant!"


def test_unnamed_introduction():
    assert Cow().introduce() == "I'm a cow!"


def test_sleeps_and_eats():
    assert Cow().sleeps() == "zzZZzz. Counting cows."
    assert Sheep().eats() == "Starts to eat grass."
    assert Pig().sleeps() == "zzZZZzz. Counting pigs."
    assert Pig().eats() == "Starts to eat slop."


def test_create_one_of_each_order_and_sounds():
    animals = create_one_of_each()
    assert [type(a) for a in animals] == [Cow, Sheep, Pig]
    assert animal_sounds(animals) == ["Moo!", "Baa!", "Oink!"]


def test_create_one_of_each_with_names():
    animals = create_one_of_each(["Daisy", "Grant", "Luigi"])
    assert [a.name for a in animals] == ["Daisy", "Grant", "Luigi"]


def test_create_one_of_each_wrong_name_count():
    with pytest.raises(ValueError):
        create_one_of_each(["Daisy"])


def test_main_prints_sounds(capsys):
    assert main() == 0
    out = capsys.readouterr().out.splitlines()
    assert out.count("Moo!") == 2
    assert "I'm a pig, and my name is Luigi!" in out