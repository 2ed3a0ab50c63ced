"""
Example usage of the accessible scales engine.

Demonstrates:
1. Building the full scale table for the sample indigo palette
2. Inspecting the scales of a single surface step
3. Building a sparse palette with the fluent builder
4. Tuning the rule constants with ScaleConfig
"""

from accessible_scales import (
    INDIGO_SAMPLE_PALETTE,
    PaletteBuilder,
    ScaleConfig,
    ScaleTableBuilder,
    build_table,
    contrast_ratio,
    generate_scales_for_step,
)


# =============================================================================
# Example 1: Full table
# =============================================================================

def example_full_table():
    """Build the table for every step of the sample palette."""

    print("=" * 60)
    print("Example 1: Full Table")
    print("=" * 60)

    table = build_table(INDIGO_SAMPLE_PALETTE)
    print(table)

    frame = table.to_frame()
    pivot = frame.pivot(index="step", columns="scale", values="display")
    print(pivot[["surface", "high", "low", "bold", "boldA11Y", "heavy"]].head(8))

    return table


# =============================================================================
# Example 2: Single step
# =============================================================================

def example_single_step():
    """Show the eight scales of one surface with their contrast."""

    print("\n" + "=" * 60)
    print("Example 2: Single Step (surface 2500)")
    print("=" * 60)

    scales = generate_scales_for_step(2500, INDIGO_SAMPLE_PALETTE)
    for name, result in scales.items():
        print(
            f"  {name.value:<9} {result.display_value:<24} "
            f"step {int(result.source_step):>4}  {result.contrast_ratio:5.2f}:1"
            f"  AA text: {result.wcag.normal_text.aa}"
        )

    return scales


# =============================================================================
# Example 3: Sparse palette
# =============================================================================

def example_sparse_palette():
    """Missing extremes fall back to black and white."""

    print("\n" + "=" * 60)
    print("Example 3: Sparse Palette")
    print("=" * 60)

    palette = (
        PaletteBuilder()
        .with_name("Teal")
        .with_steps({900: "#0f766e", 1200: "#14b8a6", 1600: "#99f6e4"})
        .with_primary(900)
        .build(strict=True)
    )

    table = build_table(palette)
    print(f"Defined steps: {[int(step) for step in table.defined_steps()]}")
    for step in table.defined_steps():
        scales = table[step]
        print(
            f"  {int(step)}: high={scales.high.hex} "
            f"bold={scales.bold.display_value} "
            f"({contrast_ratio(scales.bold.blended, scales.surface.blended):.2f}:1)"
        )

    return table


# =============================================================================
# Example 4: Custom configuration
# =============================================================================

def example_custom_config():
    """Stricter thresholds move Bold further from the primary."""

    print("\n" + "=" * 60)
    print("Example 4: Custom Configuration")
    print("=" * 60)

    strict = ScaleConfig(bold_threshold=4.5, bold_a11y_threshold=7.0, heavy_cap_step=700)
    default_table = ScaleTableBuilder().build(INDIGO_SAMPLE_PALETTE)
    strict_table = ScaleTableBuilder(strict).build(INDIGO_SAMPLE_PALETTE)

    for step in (1800, 2100, 2500):
        print(
            f"  {step}: bold {int(default_table[step].bold.source_step)} -> "
            f"{int(strict_table[step].bold.source_step)}, "
            f"boldA11Y {int(default_table[step].bold_a11y.source_step)} -> "
            f"{int(strict_table[step].bold_a11y.source_step)}"
        )

    return strict_table


# =============================================================================
# Run all examples
# =============================================================================

if __name__ == "__main__":
    example_full_table()
    example_single_step()
    example_sparse_palette()
    example_custom_config()

    print("\n" + "=" * 60)
    print("All scale examples completed successfully!")
    print("=" * 60)
