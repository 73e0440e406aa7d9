"""
tileimg: grid tile image renderer.

Draws filled, stroked rectangles for grid cells and merged cell ranges
onto an RGBA canvas and writes it as PNG.

Subpackages:
    grid: Cell-spec parsing and grid-to-pixel geometry
    render: Canvas, colors, rectangle rasterization, render loop, PNG output
    configs: YAML configuration loading and validation
    utils: Logging, atomic file output, config schema
    scripts: Command-line entrypoint

Architecture layers (one-way dependency):
    scripts/ -> render/ -> {configs/, grid/} -> utils/
"""

__version__ = "1.0.0"

__all__ = ["grid", "render", "configs", "utils", "scripts"]
