"""Exceptions raised while loading and checking a scene description."""


class CubError(Exception):
    """Base class for every error reported by the package."""


class ConfigError(CubError):
    """A configuration line is malformed or the configuration is incomplete."""


class MapNotFoundError(CubError):
    """The scene file holds no line that starts a map."""


class ArgumentError(CubError):
    """The command line or the scene file named on it is unusable."""