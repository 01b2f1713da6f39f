"""Errors raised while analyzing a locale dictionary."""


class LocaleSchemaError(Exception):
    """Base class for every error raised by :mod:`locale_schema`."""


class DuplicateKeyDefinition(LocaleSchemaError, ValueError):
    """A key is defined both as an ordinary entry and as a plural group."""

    def __init__(self, key: str):
        self.key = key
        super().__init__(
            f"Key '{key}' is defined both as a plain entry and as a plural group"
        )


class InvalidLocaleKey(LocaleSchemaError, ValueError):
    def __init__(self, path: str, key: object):
        self.path = path
        self.key = key
        super().__init__(f"Invalid key {key!r} at '{path}': keys must be non-empty strings without '.'")


class InvalidLocaleValue(LocaleSchemaError, TypeError):
    def __init__(self, path: str, value: object):
        self.path = path
        self.value = value
        super().__init__(f"Unsupported value of type {type(value).__name__} at '{path}'")


class LocaleDepthExceeded(LocaleSchemaError, ValueError):
    def __init__(self, path: str, max_depth: int):
        self.path = path
        self.max_depth = max_depth
        super().__init__(f"Locale nesting at '{path}' exceeds the maximum depth of {max_depth}")


class LocaleValueTooLong(LocaleSchemaError, ValueError):
    def __init__(self, path: str, length: int, max_length: int):
        self.path = path
        self.length = length
        self.max_length = max_length
        super().__init__(f"Value at '{path}' has {length} characters, the limit is {max_length}")


__all__ = [
    "DuplicateKeyDefinition",
    "InvalidLocaleKey",
    "InvalidLocaleValue",
    "LocaleDepthExceeded",
    "LocaleSchemaError",
    "LocaleValueTooLong",
]
