"""chainlist exceptions."""


class ChainListError(Exception):
    """Base exception."""


class CycleError(ChainListError):
    """A chain loops back on itself."""


class NodeNotInListError(ChainListError, ValueError):
    """Anchor node does not belong to the list."""


class ConfigError(ChainListError):
    """Configuration error."""
