"""Color palettes and editor color themes built from color harmony rules."""

__version__ = "0.1.0"
