"""Card deck service: a deck of playing cards exposed over HTTP."""

__version__ = "1.0.0"
