class LiterakiError(Exception):
    """
    Base class for every error raised by the engine.
    """


class SourceUnavailableError(LiterakiError):
    """
    The word source could not be read. No index is published.
    """


class EmptyInputError(LiterakiError):
    """
    The word source produced no usable words.
    """


class TooManyWildcardsError(LiterakiError):
    def __init__(self, count: int, limit: int):
        super().__init__(f"Query has {count} wildcards, at most {limit} allowed")
        self.count = count
        self.limit = limit


class ConfigError(LiterakiError):
    pass
