"""Software rasterizer: vector math, colours, bounds, clipping and an in-memory renderer."""

__version__ = "0.1.0"