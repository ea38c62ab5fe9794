"""Custom exception hierarchy for the chat bot."""


class BotError(Exception):
    """Base error type."""


class ConfigError(BotError):
    pass


class TransportError(BotError):
    pass


class CommandRegistrationError(BotError):
    """Raised when a command name is registered twice in strict mode."""
    pass


class LookupFailure(BotError):
    """Raised when an external provider cannot be reached or rejects the call."""
    pass


class MalformedResponse(LookupFailure):
    """Raised when a provider response does not have the expected shape."""
    pass
