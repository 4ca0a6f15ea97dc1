class ReconcilerError(Exception):
    """Base class for errors detected locally, before any remote call."""


class UnsupportedCommand(ReconcilerError):
    pass


class InvalidOption(ReconcilerError):
    pass


class NoOptionsSupplied(ReconcilerError):
    pass


class ConfigurationError(ReconcilerError):
    pass
