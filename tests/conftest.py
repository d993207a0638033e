import pytest

from contrastgrid.core.conversions import create_color


@pytest.fixture
def white():
    return create_color("#FFFFFF", "White")


@pytest.fixture
def black():
    return create_color("#000000", "Black")


@pytest.fixture
def gray():
    return create_color("#808080", "Gray")


@pytest.fixture
def rgb_palette():
    return [
        create_color("#FF0000", "Red"),
        create_color("#00FF00", "Green"),
        create_color("#0000FF", "Blue"),
    ]
