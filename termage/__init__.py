"""A terminal game engine with entities, events, animation and sound, plus two sample games."""

__version__ = "0.1.0"