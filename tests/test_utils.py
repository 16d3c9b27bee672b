from huekit.utils import is_close_to_zero, round_half_up
from huekit.types.color_types import Channel, is_hue_space, element_to_array

def test_round_half_up():
    assert round_half_up(127.5) == 128
    assert round_half_up(0.5) == 1
    assert round_half_up(2.4999) == 2
    assert round_half_up(-0.5) == 0

def test_is_close_to_zero():
    assert is_close_to_zero(0.00005, 1e-4)
    assert not is_close_to_zero(-0.001, 1e-4)

def test_hue_spaces():
    assert is_hue_space("HSLA")
    assert is_hue_space("hsv")
    assert not is_hue_space("rgb")

def test_channel_order():
    assert [c.name for c in Channel] == ["RED", "GREEN", "BLUE", "ALPHA"]

def test_element_to_array():
    assert element_to_array(3).shape == (1,)
    assert element_to_array((1, 2, 3)).tolist() == [1, 2, 3]
