import pytest

from patternkit.state import BadMood, Boss, GoodMood, OkMood, main


@pytest.mark.parametrize(
    "mood, help_text, direct_text",
    [
        (BadMood(), "BadMood - Help Me!", "BadMood - Direct Me!"),
        (OkMood(), "OkMood - Help Me!", "OkMood - Direct Me!"),
        (GoodMood(), "GoodMood - Help Me!", "GoodMood - Direct Me!"),
    ],
)
def test_boss_replies_follow_mood(mood, help_text, direct_text):
    boss = Boss(mood)
    assert boss.help_me() == help_text
    assert boss.direct_me() == direct_text


def test_transition_changes_replies():
    boss = Boss(OkMood())
    assert boss.help_me() == "OkMood - Help Me!"
    boss.transition_to(BadMood())
    assert boss.help_me() == "BadMood - Help Me!"
    boss.transition_to(GoodMood())
    assert boss.direct_me() == "GoodMood - Direct Me!"


def test_transition_sets_back_reference():
    boss = Boss()
    mood = GoodMood()
    boss.transition_to(mood)
    assert mood.boss is boss
    assert boss.mood is mood


def test_boss_without_mood_raises():
    boss = Boss()
    with pytest.raises(RuntimeError):
        boss.help_me()
    with pytest.raises(RuntimeError):
        boss.direct_me()


def test_main_prints_each_mood(capsys):
    assert main() == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines == [
        "OkMood - Help Me!",
        "OkMood - Direct Me!",
        "BadMood - Help Me!",
        "BadMood - Direct Me!",
        "GoodMood - Help Me!",
        "GoodMood - Direct Me!",
    ]