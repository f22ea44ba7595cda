"""
Exception hierarchy for the pin input core.
"""


class PinInputError(Exception):
    """Base class for every error raised by the pin input package."""


class ConfigurationError(PinInputError, ValueError):
    """
    Invalid construction parameters (slot count, obscure glyph, colors...).

    Always raised eagerly, at construction time.
    """


class StateInconsistencyError(PinInputError, RuntimeError):
    """A buffer or controller was used outside of its lifecycle."""
