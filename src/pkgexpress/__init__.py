"""pkgexpress — Package Express shipping quote CLI."""

__version__ = "0.1.0"
