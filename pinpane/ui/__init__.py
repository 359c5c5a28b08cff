"""Textual front end: a layout host backed by widgets and a demo app."""

from .app import PinpaneApp, run_demo
from .host import RegionPane, TextualHost

__all__ = ["PinpaneApp", "RegionPane", "TextualHost", "run_demo"]
