"""Exceptions raised while building Blossom authorization tokens."""


class BlossomAuthError(Exception):
    """Base error for the blossom-auth tool. Every subclass is fatal."""


class UsageError(BlossomAuthError):
    """A required argument is missing, or neither of two alternatives was given."""


class InvalidKeyError(BlossomAuthError):
    """The supplied private key is not a valid hex or nsec secret key."""


class FileHashError(BlossomAuthError, OSError):
    """The target file could not be opened or read while hashing it."""


class EncodingError(BlossomAuthError):
    """Canonical serialization or base64 encoding of an event failed."""
