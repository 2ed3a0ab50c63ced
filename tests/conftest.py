"""
Pytest configuration and fixtures for accessible scales tests.

Note: Palettes used by several test modules live here; one-off palettes
are defined in the test that needs them.
"""

import pytest

from accessible_scales import INDIGO_SAMPLE_PALETTE, Palette


@pytest.fixture
def indigo_palette():
    """Full 24-step indigo ramp with primary at 600."""
    return INDIGO_SAMPLE_PALETTE


@pytest.fixture
def gray_palette():
    """Neutral ramp from black (200) to white (2500)."""
    steps = {}
    for i, step in enumerate(range(200, 2600, 100)):
        level = round(i * 255 / 23)
        steps[step] = "#{0:02x}{0:02x}{0:02x}".format(level)
    return Palette(name="Gray", steps=steps, primary_step=600)


@pytest.fixture
def low_contrast_palette():
    """
    Mid-gray surface at 1300 whose dark extreme (#2a2a2a) only reaches ~3.2:1.

    No step reaches 4.5:1 against the surface.
    """
    return Palette(steps={200: "#2a2a2a", 1300: "#777777"}, primary_step=600)
