"""Exceptions raised by the mapping engine."""


class EmptyDatasetError(ValueError):
    """Raised when there are no usable records to analyze or visualize.

    This is the only hard failure of the mapping engine. Missing columns,
    unparseable numeric values and short column lists are all recovered
    without raising.
    """

    def __init__(self, message: str = "Dataset is empty or invalid: no records to visualize.") -> None:
        super().__init__(message)
