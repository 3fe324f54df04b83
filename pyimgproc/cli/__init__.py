"""
Command Line Interface for pyimgproc

Each command loads an image with Pillow, applies one transform and saves the
result.

Available Commands:
- squash: Subsample an image by horizontal and vertical factors
- rotate: Rotate RGB channels
- blur: Box blur
- expand: Double image width and height

Author: B.G.
"""

_CLI_SUBMODULES = {
    "squash": (".transform_commands", "squash"),
    "rotate": (".transform_commands", "rotate"),
    "blur": (".transform_commands", "blur"),
    "expand": (".transform_commands", "expand"),
}

__all__ = list(_CLI_SUBMODULES.keys())


def __getattr__(name):
    info = _CLI_SUBMODULES.get(name)
    if info is None:
        raise AttributeError(name)
    pkg, attr = info
    import importlib
    mod = importlib.import_module(pkg, __package__)
    obj = getattr(mod, attr)
    globals()[name] = obj
    return obj
