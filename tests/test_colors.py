import pytest

from notehero.colors import Color, join_rgb, split_rgb


def test_named_values_match_definitions():
    assert split_rgb(Color.RED) == (0xFF, 0x00, 0x00)
    assert split_rgb(Color.ALICE_BLUE) == (0xF0, 0xF8, 0xFF)
    assert split_rgb(Color.YELLOW_GREEN) == (0x9A, 0xCD, 0x32)
    assert Color(0x00FF0000) is Color.RED


def test_aliases_share_members():
    assert Color(0x0000FFFF) is Color.AQUA
    assert Color(0x0000FFFF) is Color.CYAN
    assert Color(0x00FF00FF) is Color.FUCHSIA
    assert Color(0x00FF00FF) is Color.MAGENTA
    assert split_rgb(Color.CYAN) == split_rgb(Color.AQUA)


def test_join_primary_components():
    assert join_rgb(255, 255, 255) == Color.WHITE
    assert join_rgb(0, 0, 255) == Color.BLUE
    assert join_rgb(0, 0, 0) == Color.BLACK


@pytest.mark.parametrize("color", list(Color))
def test_split_join_round_trip(color):
    assert join_rgb(*split_rgb(color)) == color


@pytest.mark.parametrize("color", list(Color))
def test_component_properties_agree_with_split(color):
    assert (color.red, color.green, color.blue) == split_rgb(color)


@pytest.mark.parametrize("rgb", [(1, 2, 3), (200, 100, 50), (255, 0, 128)])
def test_join_split_round_trip(rgb):
    assert split_rgb(join_rgb(*rgb)) == rgb


def test_components_stay_in_byte_range():
    for color in Color:
        assert all(0 <= part <= 255 for part in split_rgb(color))


@pytest.mark.parametrize("value", [-1, 0x01000000])
def test_split_rejects_out_of_range(value):
    with pytest.raises(ValueError):
        split_rgb(value)


@pytest.mark.parametrize("rgb", [(256, 0, 0), (0, -1, 0), (0, 0, 300)])
def test_join_rejects_out_of_range(rgb):
    with pytest.raises(ValueError):
        join_rgb(*rgb)