"""Exceptions raised by the date tree engine."""


class DaytreeError(Exception):
    """Base class for all date tree failures."""


class InvalidDateFormat(DaytreeError, ValueError):
    """Date text is not a valid ``YYYY-MM-DD`` calendar date."""


class UnrecognizedPeriodUnit(DaytreeError, ValueError):
    """Period text does not match ``[+-]digits`` followed by one of ``d w m y``."""


class InvalidRefileSource(DaytreeError):
    """The subtree to refile is a calendar node, or there is no heading to refile."""


class RangeOrderingViolation(DaytreeError, ValueError):
    """A date range or series would never reach its end date."""


class InvalidSeriesLength(DaytreeError, ValueError):
    """A repeating refile needs exactly one of a non-negative count or an end date."""
