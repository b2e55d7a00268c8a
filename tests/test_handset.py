import pytest

from wurfl_handsets.core.exceptions import InvalidChainError
from wurfl_handsets.handsets import NULL_HANDSET, Handset


def test_local_override_shadows_fallback(generic, colorphone):
    assert colorphone.get("color") == "yes"
    assert colorphone.get("screen") == "128x160"
    assert colorphone["color"] == "yes"
    assert generic.get("screen") is None


def test_unset_key_delegates_to_fallback(generic):
    child = Handset("child", "Child/1.0", fallback=generic)

    assert child.get("color") == generic.get("color") == "no"
    assert child.get("missing") is None


def test_get_with_owner_reports_supplying_record(generic, colorphone):
    grandchild = Handset("colorphone_v2", "ColorPhone/2.0", fallback=colorphone)

    assert colorphone.get_with_owner("color") == ("yes", "colorphone")
    assert grandchild.get_with_owner("screen") == ("128x160", "colorphone")
    assert grandchild.get_with_owner("color") == ("yes", "colorphone")
    assert grandchild.get_with_owner("missing") == (None, None)

    grandchild.set("color", "yes")
    assert grandchild.get_with_owner("color") == ("yes", "colorphone_v2")


def test_keys_is_union_of_overrides_and_fallback(generic, colorphone):
    assert colorphone.keys() == {"color", "screen"}
    assert colorphone.keys() == set(colorphone.overrides) | generic.keys()
    assert "screen" in colorphone
    assert "screen" not in generic
    assert len(colorphone) == 2


def test_set_only_touches_local_key(generic, colorphone):
    colorphone.set("screen", "128x160")
    assert colorphone.get("screen") == "128x160"

    before = dict(colorphone.items())
    colorphone["screen"] = "176x220"
    after = dict(colorphone.items())

    assert after.pop("screen") == "176x220"
    before.pop("screen")
    assert before == after
    assert generic.get("screen") is None


def test_items_yields_resolved_values_and_restarts(generic):
    child = Handset("child", "Child/1.0", fallback=generic)
    child.set("screen", "96x64")

    assert dict(child.items()) == {"color": "no", "screen": "96x64"}
    assert dict(child.items()) == dict(child.items())
    assert sorted(child) == ["color", "screen"]


def test_items_goes_through_get_and_keys(generic):
    class UpperHandset(Handset):
        def get(self, key):
            value = super().get(key)
            return value.upper() if value else value

    child = UpperHandset("upper", "Upper/1.0", fallback=generic)
    assert dict(child.items()) == {"color": "NO"}


def test_overrides_view_is_read_only(colorphone):
    assert dict(colorphone.overrides) == {"color": "yes", "screen": "128x160"}
    with pytest.raises(TypeError):
        colorphone.overrides["color"] = "no"
    assert colorphone.is_overridden("color")
    assert not Handset("x", "", fallback=colorphone).is_overridden("color")


def test_none_fallback_becomes_sentinel(generic):
    child = Handset("child", "Child/1.0")
    assert child.fallback is NULL_HANDSET

    child.fallback = generic
    assert child.fallback is generic

    child.fallback = None
    assert child.fallback is NULL_HANDSET
    assert child.keys() == set()


def test_chain_lists_record_and_ancestors(generic, colorphone):
    grandchild = Handset("colorphone_v2", "ColorPhone/2.0", fallback=colorphone)
    assert [h.wurfl_id for h in grandchild.chain()] == ["colorphone_v2", "colorphone", "generic"]


def test_self_fallback_is_rejected():
    handset = Handset("loop", "")
    with pytest.raises(InvalidChainError):
        handset.fallback = handset
    assert handset.fallback is NULL_HANDSET


def test_cycle_through_ancestors_is_rejected(generic, colorphone):
    with pytest.raises(InvalidChainError):
        generic.fallback = colorphone

    # previous fallback kept, chain still terminates
    assert generic.fallback is NULL_HANDSET
    assert colorphone.get("color") == "yes"


def test_cycle_error_is_a_value_error(generic, colorphone):
    with pytest.raises(ValueError):
        generic.fallback = colorphone
