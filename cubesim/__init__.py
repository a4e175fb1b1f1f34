"""Component-based scene objects, typed connectors, transforms, camera, input and timing."""

__version__ = "0.1.0"
__all__ = ["__version__"]