#
# src/treerun/exceptions.py
#
"""
Exception hierarchy for treerun.

Errors raised by test bodies never show up here: they are classified into
outcomes. These classes describe problems with the engine, its configuration,
or test discovery.
"""


class TreerunError(Exception):
    """Base class for all treerun errors."""

    pass


class ConfigurationError(TreerunError):
    """Raised when configuration is missing, malformed, or invalid."""

    pass


class DiscoveryError(TreerunError):
    """Raised when a test target cannot be imported or turned into a test tree."""

    def __init__(self, message: str, target: str | None = None, details: Exception | None = None):
        self.target = target
        self.details = details
        full_message = message
        if target:
            full_message += f" (Target: '{target}')"
        super().__init__(full_message)
        if details is not None:
            self.add_note(f"Original error: {type(details).__name__}: {details}")


class EngineError(TreerunError):
    """A defect in the engine itself, as opposed to a test outcome."""

    pass


class ClassificationError(EngineError):
    """Raised when the outcome classifier fails while classifying a signal."""

    def __init__(self, test_name: str, signal: BaseException | None, details: Exception):
        self.test_name = test_name
        self.signal = signal
        self.details = details
        super().__init__(
            f"Outcome classifier failed for test '{test_name}': "
            f"{type(details).__name__}: {details}"
        )


class IgnoreTest(Exception):
    """
    Signal raised by a test body to mark itself as ignored.

    Not a TreerunError: it is matched by the default classifier's ignore set.
    """

    def __init__(self, reason: str = ""):
        self.reason = reason
        super().__init__(reason)


def skip(reason: str = "") -> None:
    """Ignore the currently running test with the given reason."""
    raise IgnoreTest(reason)

# 🔼⚙️
