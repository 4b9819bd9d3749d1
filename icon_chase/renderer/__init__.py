"""Rendering subpackage.

Turns immutable ``State`` snapshots into Pillow images. The simulation never
depends on this package; front ends call :func:`render` after each tick.

See :mod:`icon_chase.renderer.image` for the drawing routines.
"""

from .image import DEFAULT_PALETTE, Palette, kind_to_color, render

__all__ = ["DEFAULT_PALETTE", "Palette", "kind_to_color", "render"]
