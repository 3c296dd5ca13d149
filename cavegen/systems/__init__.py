"""Generation entry points and the regeneration system."""

from .cave_generator import CaveGeneratorSystem, generate, generate_cave, run_walkers

__all__ = ["CaveGeneratorSystem", "generate", "generate_cave", "run_walkers"]
