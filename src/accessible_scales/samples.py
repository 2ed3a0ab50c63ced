"""Sample palettes."""

from __future__ import annotations

from .ramp import Palette, RampPosition

# Indigo ramp, dark (200) to light (2500), primary at 600
INDIGO_SAMPLE_PALETTE = Palette(
    name="Sample - Indigo",
    primary_step=RampPosition.STEP_600,
    steps={
        200: "#0b0034",
        300: "#170054",
        400: "#220071",
        500: "#2e008f",
        600: "#3900ad",
        700: "#421ebb",
        800: "#4c31cb",
        900: "#5540d8",
        1000: "#5f50e3",
        1100: "#685dec",
        1200: "#716bf3",
        1300: "#7c78f8",
        1400: "#8584fc",
        1500: "#8e90ff",
        1600: "#989bff",
        1700: "#a3a7ff",
        1800: "#aeb3ff",
        1900: "#b9beff",
        2000: "#c4c9ff",
        2100: "#d0d4ff",
        2200: "#dbdfff",
        2300: "#e7e9ff",
        2400: "#f3f4ff",
        2500: "#ffffff",
    },
)
