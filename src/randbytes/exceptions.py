"""Exception hierarchy for randbytes.

All exceptions derive from RandBytesError, enabling broad catch patterns
at the command-line boundary while allowing fine-grained handling internally.
"""


class RandBytesError(Exception):
    """Base exception for all randbytes errors."""


class ConfigValidationError(RandBytesError):
    """Configuration field validation failed.

    Raised when a seed is given for a source that cannot be seeded, a
    sequence is given for a source without stream support, raw output is
    requested for an interactive terminal, or a field is out of range.
    Always raised before any entropy source or output sink is touched.
    """


class EntropyUnavailableError(RandBytesError):
    """A byte source cannot provide bytes.

    Raised when an entropy device cannot be opened, the OS secure-random
    API fails, or a device stream closes before the requested number of
    bytes was read. The underlying cause is chained.
    """


class WriterContractError(RandBytesError):
    """A write-only output wrapper was used for reading.

    Signals a programming error, never a data error.
    """
