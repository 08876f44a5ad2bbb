"""Building blocks for relativistic particle-in-cell simulations: pushers,
shape functions, deposition, Maxwell-Juttner sampling and space-filling curves."""

__version__ = "0.1.0"
__all__ = ["primitives", "shapes", "deposit", "maxwell_juttner", "sfc"]