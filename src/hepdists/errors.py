from __future__ import annotations


class HEPDistError(Exception):
    """Base class for distribution errors."""

    pass


class ParameterError(HEPDistError, ValueError):
    """Error thrown when a distribution is built from invalid parameters.

    No distribution object is returned: the caller has to supply corrected
    parameters.
    """

    pass


class DomainError(HEPDistError, ValueError):
    """Error thrown when a quantile is requested for a probability outside
    :math:`[0, 1]`.

    Attributes
    ----------
    value
        the (first) offending probability.
    """

    def __init__(self, value, msg: str = None) -> None:
        if msg is None:
            msg = f"probability p must be in [0, 1], got {value}"
        super().__init__(msg)
        self.value = value
