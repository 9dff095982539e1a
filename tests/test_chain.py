import pytest

from patternkit.chain import (
    BaseHandler,
    Handler,
    RobotBodyHandler,
    RobotCraniumHandler,
    RobotLimbHandler,
    handle_the_chain,
    main,
)

ALL_RESULTS = [
    "Robot's chest assembled!",
    "Robot's pelvis assembled!",
    "Robot's right arm assembled!",
    "Robot's left arm assembled!",
    "Robot's right leg assembled!",
    "Robot's left leg assembled!",
    "Robot's cranium assembled!",
]


def _full_chain():
    body = RobotBodyHandler(True, True)
    body.set_next(RobotLimbHandler(True, True, True, True)).set_next(
        RobotCraniumHandler(True)
    )
    return body


def test_handler_is_abstract():
    with pytest.raises(TypeError):
        Handler()


def test_full_chain_assembles_every_part():
    assert handle_the_chain(_full_chain()) == ALL_RESULTS


def test_second_pass_assembles_nothing():
    chain = _full_chain()
    handle_the_chain(chain)
    assert handle_the_chain(chain) == [""] * len(ALL_RESULTS)


def test_set_next_returns_given_handler():
    body = RobotBodyHandler()
    limbs = RobotLimbHandler()
    assert body.set_next(limbs) is limbs
    assert body.next_handler is limbs


def test_base_handler_without_next_returns_empty():
    assert BaseHandler().handle("Chest") == ""


def test_unknown_request_falls_through():
    assert _full_chain().handle("Tail") == ""


def test_part_is_used_once():
    cranium = RobotCraniumHandler(True)
    assert cranium.handle("Cranium") == "Robot's cranium assembled!"
    assert cranium.has_cranium is False
    assert cranium.handle("Cranium") == ""


def test_unavailable_part_passes_to_next():
    first = RobotBodyHandler(has_chest=False, has_pelvis=False)
    first.set_next(RobotBodyHandler(has_chest=True))
    assert first.handle("Chest") == "Robot's chest assembled!"
    assert first.handle("Chest") == ""


def test_defaults_have_no_parts():
    limbs = RobotLimbHandler()
    assert [limbs.handle(r) for r in ("Right Arm", "Left Arm", "Right Leg", "Left Leg")] == [""] * 4


def test_main_prints_results(capsys):
    assert main() == 0
    assert capsys.readouterr().out.splitlines() == ALL_RESULTS