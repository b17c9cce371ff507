"""
Domain exceptions for the betting tracker.
"""

class BetTrackerException(Exception):
    """Base exception for betting tracker errors."""
    pass

class BetValidationError(BetTrackerException):
    """Exception raised when bet input fails validation before a Bet is built."""
    pass

class BetNotFoundError(BetTrackerException):
    """Exception raised when no bet exists for the given id."""
    pass

class MatchNotFoundError(BetTrackerException):
    """Exception raised when no match exists for the given id."""
    pass

class InvalidBetResultError(BetTrackerException):
    """Exception raised when a bet is settled with a non-final result."""
    pass

class InvalidOddsError(BetTrackerException):
    """Exception raised when a payout is requested for unset (zero) odds."""
    pass

class DataUnavailableError(BetTrackerException):
    """Exception raised when the store or the fixture provider cannot be reached."""
    pass
