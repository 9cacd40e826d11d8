"""Typed exceptions for sampling, checksum input and generator lookup."""


class SynthidError(ValueError):
    """Base class for argument errors raised by the package."""


class InvalidRangeError(SynthidError):
    """Raised when sampler bounds are non-finite, non-integral or inverted."""


class ChecksumInputError(SynthidError):
    """Raised when a digit sequence has the wrong length or non-digit items."""


class UnknownKindError(SynthidError):
    """Raised when no generator is registered under a requested name."""
