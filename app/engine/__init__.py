from .amounts import to_minor_units

__all__ = ["to_minor_units"]
