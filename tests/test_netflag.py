import pytest

from gopl.netflag import Flags, is_cast, is_up, main, set_broadcast, turn_down


def test_main_output(capsys):
    assert main([]) == 0
    assert capsys.readouterr().out.splitlines() == [
        "10001 true",
        "10000 false",
        "10010 false",
        "10010 true",
    ]


@pytest.mark.parametrize("value", range(64))
def test_turn_down_clears_only_up(value):
    v = Flags(value)
    down = turn_down(v)
    assert not is_up(down)
    assert int(down) | Flags.UP == int(v) | Flags.UP


@pytest.mark.parametrize("value", range(64))
def test_set_broadcast_makes_cast(value):
    v = set_broadcast(Flags(value))
    assert is_cast(v)
    assert v & Flags.BROADCAST


def test_is_up_and_is_cast():
    assert is_up(Flags.UP | Flags.LOOPBACK)
    assert not is_cast(Flags.UP | Flags.LOOPBACK)
    assert is_cast(Flags.MULTICAST)