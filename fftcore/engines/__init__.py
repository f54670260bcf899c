"""Engines subpackage initialization file for importing utilities."""

from .base import EngineBase
from .bluestein import BluesteinComposer
from .radix2 import Radix2Engine

__all__ = ["EngineBase", "Radix2Engine", "BluesteinComposer"]
