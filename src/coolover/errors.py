"""Exception types shared across the coolover package."""


class CooloverError(Exception):
    """Base class for errors reported by the CLI as ``ERR <message>``."""


class ConfigError(CooloverError):
    pass


class UsageError(CooloverError):
    pass
