"""Register NiceGUI pages by importing submodules."""

from . import editor  # noqa: F401

__all__ = ["editor"]
