"""Command line interface subpackage."""

from .parser import create_cli_arguments

__all__ = ["create_cli_arguments"]
