"""Exceptions raised when observations cannot be turned into a Kaplan-Meier estimate."""


class KaplanMeierError(ValueError):
    """Base class for invalid input to the estimator."""


class ShapeMismatch(KaplanMeierError):
    """The times and event indicators have different lengths."""


class EmptyInput(KaplanMeierError):
    """No observations were supplied."""
