"""Control a Tasmota-switched aquarium LED light by cycling its power through light modes."""

__version__ = "0.1.0"
__all__ = ["__version__"]