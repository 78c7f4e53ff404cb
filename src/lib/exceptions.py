"""
Custom exception hierarchy for the Compass Capacity Engine.

The capacity core is total over well-typed input, so the taxonomy is small:
- Configuration problems at startup
- Input validation at the API boundary
- Internal-consistency failures (a value outside a closed enumeration)

All exceptions inherit from CompassException, enabling catch-all for
Compass-specific errors while keeping the ability to catch specific
error types.
"""

from __future__ import annotations


class CompassException(Exception):
    """Base exception for all Compass errors."""


class ConfigurationError(CompassException):
    """Missing environment variables, invalid config values, or startup failures."""


class ValidationError(CompassException):
    """Input validation, parsing, or type conversion failures."""


class InvariantError(CompassException):
    """
    A closed enumeration received a value it does not define, or a constant
    table is missing an entry for one of its members.

    This is a programming defect. It is raised immediately and never
    converted into a degraded result.
    """
