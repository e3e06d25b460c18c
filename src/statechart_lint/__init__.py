"""statechart-lint: static analysis of statechart automatic transitions.

Detects chains of automatic ("eventless") transitions that can re-enter
the same state forever without waiting for an external event.
"""

__version__ = "0.1.0"

__all__ = ["__version__"]
