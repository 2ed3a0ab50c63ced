"""
Tests for ramp positions, palettes, the palette builder and direction resolution.
"""

import pytest
from pydantic import ValidationError

from accessible_scales import (
    BLACK,
    RAMP,
    WHITE,
    Direction,
    Palette,
    PaletteBuilder,
    PaletteValidationError,
    RampPosition,
    create_default_palette,
    resolve_direction,
)


class TestRampPosition:
    """Tests for the RampPosition enumeration."""

    def test_ramp_is_ordered_200_to_2500(self):
        """Test ramp order and labels."""
        assert RAMP[0] == RampPosition.STEP_200
        assert RAMP[-1] == RampPosition.STEP_2500
        assert [int(p) for p in RAMP] == list(range(200, 2600, 100))

    def test_index_round_trip(self):
        """Test index and from_index agree."""
        for i, position in enumerate(RAMP):
            assert position.index == i
            assert RampPosition.from_index(i) is position

    def test_from_index_out_of_range(self):
        """Test from_index rejects indices outside the ramp."""
        with pytest.raises(IndexError):
            RampPosition.from_index(len(RAMP))
        with pytest.raises(IndexError):
            RampPosition.from_index(-1)

    def test_offset_clamps(self):
        """Test offset clamps to the ramp ends."""
        assert RampPosition.STEP_300.offset(-5) == RampPosition.STEP_200
        assert RampPosition.STEP_2400.offset(3) == RampPosition.STEP_2500
        assert RampPosition.STEP_600.offset(2) == RampPosition.STEP_800

    def test_distance(self):
        """Test distance counts positions in either direction."""
        assert RampPosition.STEP_600.distance(RampPosition.STEP_1000) == 4
        assert RampPosition.STEP_1000.distance(600) == 4

    @pytest.mark.parametrize("value", [600, "600", RampPosition.STEP_600])
    def test_coerce(self, value):
        """Test coercion from labels."""
        assert RampPosition.coerce(value) is RampPosition.STEP_600

    @pytest.mark.parametrize("value", [650, "abc", None, 100, 200.7, "600.0"])
    def test_coerce_rejects_unknown(self, value):
        """Test unknown labels are rejected."""
        with pytest.raises(ValueError, match="Unknown ramp position"):
            RampPosition.coerce(value)

    def test_coerce_accepts_integral_float(self):
        """Test whole-number floats map to their step."""
        assert RampPosition.coerce(600.0) is RampPosition.STEP_600

    def test_extremes(self):
        assert RampPosition.darkest() is RampPosition.STEP_200
        assert RampPosition.lightest() is RampPosition.STEP_2500


class TestPalette:
    """Tests for the Palette model."""

    def test_missing_steps_are_undefined(self):
        """Test every ramp position is present."""
        palette = Palette(steps={200: "#000000"})

        assert set(palette.steps) == set(RAMP)
        assert palette.color_at(RampPosition.STEP_200) == BLACK
        assert palette.color_at(RampPosition.STEP_300) is None

    def test_empty_string_is_undefined(self):
        """Test empty strings count as undefined."""
        palette = Palette(steps={200: ""})

        assert palette.raw_value(RampPosition.STEP_200) is None

    def test_invalid_color_kept_but_unresolved(self):
        """Test malformed colors do not invalidate the palette."""
        palette = Palette(steps={200: "#zzzzzz", 300: "#ffffff"})

        assert palette.raw_value(RampPosition.STEP_200) == "#zzzzzz"
        assert palette.color_at(RampPosition.STEP_200) is None
        assert palette.defined_positions() == [RampPosition.STEP_300]

    def test_unknown_step_rejected(self):
        """Test unknown ramp keys raise a validation error."""
        with pytest.raises(ValidationError):
            Palette(steps={250: "#ffffff"})

    def test_default_primary(self):
        """Test the default primary step is 600."""
        assert Palette().primary_step == RampPosition.STEP_600
        assert Palette(primary_step="1200").primary_step == RampPosition.STEP_1200

    def test_with_step_returns_copy(self):
        """Test with_step leaves the original untouched."""
        palette = Palette(steps={200: "#000000"})

        updated = palette.with_step(2500, WHITE)

        assert updated.color_at(RampPosition.STEP_2500) == WHITE
        assert palette.color_at(RampPosition.STEP_2500) is None

    def test_steps_are_read_only(self, indigo_palette):
        """Test the step mapping cannot be changed in place."""
        with pytest.raises(TypeError):
            indigo_palette.steps[RampPosition.STEP_200] = "#ffffff"
        with pytest.raises(TypeError):
            Palette().steps[RampPosition.STEP_200] = "#000000"

        assert indigo_palette.raw_value(RampPosition.STEP_200) == "#0b0034"

    def test_hashable(self, indigo_palette):
        """Test equal palettes hash equally and work as dict keys."""
        copy = Palette(
            name=indigo_palette.name,
            steps=dict(indigo_palette.steps),
            primary_step=indigo_palette.primary_step,
        )

        assert copy == indigo_palette
        assert hash(copy) == hash(indigo_palette)
        assert {indigo_palette: "indigo"}[copy] == "indigo"
        assert hash(indigo_palette.with_primary(700)) != hash(indigo_palette)

    def test_with_step_result_is_read_only(self):
        updated = Palette().with_step(200, BLACK)

        with pytest.raises(TypeError):
            updated.steps[RampPosition.STEP_300] = "#111111"

    def test_model_dump_keys_by_label(self):
        """Test serialised steps are keyed by integer label."""
        data = Palette(steps={200: "#000000"}).model_dump()

        assert data["steps"][200] == "#000000"
        assert data["steps"][2500] is None
        assert data["primary_step"] == RampPosition.STEP_600

    def test_with_primary(self):
        palette = Palette().with_primary(900)

        assert palette.primary_step == RampPosition.STEP_900

    def test_cache_key_reflects_content(self, indigo_palette):
        """Test cache keys change with content and primary step."""
        same = indigo_palette.model_copy()

        assert indigo_palette.cache_key() == same.cache_key()
        assert indigo_palette.cache_key() != indigo_palette.with_primary(700).cache_key()
        assert indigo_palette.cache_key() != indigo_palette.with_step(200, None).cache_key()
        hash(indigo_palette.cache_key())

    def test_create_default_palette(self):
        """Test the empty palette."""
        palette = create_default_palette("New")

        assert palette.name == "New"
        assert palette.defined_positions() == []
        assert palette.primary_step == RampPosition.STEP_600


class TestPaletteBuilder:
    """Tests for PaletteBuilder."""

    def test_build(self):
        """Test fluent construction."""
        palette = (
            PaletteBuilder()
            .with_name("Brand")
            .with_step(200, "#0b0034")
            .with_steps({2500: WHITE, 1200: "#716bf3"})
            .with_primary(1200)
            .build()
        )

        assert palette.name == "Brand"
        assert palette.primary_step == RampPosition.STEP_1200
        assert palette.defined_positions() == [
            RampPosition.STEP_200,
            RampPosition.STEP_1200,
            RampPosition.STEP_2500,
        ]

    def test_unknown_step_raises(self):
        """Test unknown steps raise PaletteValidationError."""
        with pytest.raises(PaletteValidationError):
            PaletteBuilder().with_step(250, "#ffffff").build()

    def test_unknown_primary_raises(self):
        with pytest.raises(PaletteValidationError):
            PaletteBuilder().with_primary(42).build()

    def test_strict_rejects_malformed_colors(self):
        """Test strict mode validates colors."""
        builder = PaletteBuilder().with_step(200, "#12")

        assert builder.build().color_at(RampPosition.STEP_200) is None
        with pytest.raises(PaletteValidationError, match="200"):
            builder.build(strict=True)


class TestDirection:
    """Tests for contrast direction resolution."""

    def test_white_surface_is_toward_dark(self):
        assert resolve_direction("#ffffff") is Direction.TOWARD_DARK

    def test_black_surface_is_toward_light(self):
        assert resolve_direction("#000000") is Direction.TOWARD_LIGHT

    def test_mid_gray_picks_stronger_side(self):
        """Test #777777 contrasts more with black (4.69) than white (4.48)."""
        assert resolve_direction("#777777") is Direction.TOWARD_DARK

    def test_saturated_dark_is_toward_light(self):
        assert resolve_direction("#3900ad") is Direction.TOWARD_LIGHT

    def test_convention(self):
        """Test the direction to extreme/fallback mapping."""
        assert Direction.TOWARD_DARK.extreme is RampPosition.STEP_200
        assert Direction.TOWARD_DARK.fallback_color == BLACK
        assert Direction.TOWARD_DARK.step_delta == -1
        assert Direction.TOWARD_LIGHT.extreme is RampPosition.STEP_2500
        assert Direction.TOWARD_LIGHT.fallback_color == WHITE
        assert Direction.TOWARD_LIGHT.step_delta == 1
