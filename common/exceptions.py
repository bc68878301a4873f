"""Custom exception classes for split/join operations."""


class SplitJoinError(Exception):
    """
    Base exception class for all split/join errors.
    """
    pass


class ConfigError(SplitJoinError):
    """
    Raised when the requested split cannot be performed with the given size.
    """
    pass


class SplitIOError(SplitJoinError):
    """
    Raised when a file cannot be opened, created, read or written.
    """
    pass


class FormatError(SplitJoinError):
    """
    Raised when a manifest line does not match the expected layout.
    """

    def __init__(self, line_number: int, line: str):
        self.line_number = line_number
        self.line = line
        super().__init__(f"corrupt or incomplete split file at line {line_number}:\n{line}")


class IntegrityError(SplitJoinError):
    """
    Raised when a chunk's computed digest differs from the recorded one.
    """

    def __init__(self, chunk_path: str, expected: str, computed: str):
        self.chunk_path = chunk_path
        self.expected = expected
        self.computed = computed
        super().__init__(
            f"file '{chunk_path}' has incorrect hash\n"
            f"  Expected: {expected}\n"
            f"  Computed: {computed}"
        )
