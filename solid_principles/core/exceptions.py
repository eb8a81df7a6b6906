# solid_principles/core/exceptions.py
"""
Core exceptions for the SOLID example catalogue.

These exceptions provide a standard error hierarchy for the package.
"""


class SolidError(Exception):
    """
    Base exception for all catalogue errors.

    Lets consumers catch every package-level failure with a single handler.

    Examples:
        >>> try:
        ...     run("xyz")
        ... except SolidError as e:
        ...     print(f"Failed: {e}")
    """

    pass


class UnknownPrincipleError(SolidError):
    """
    No registered principle matches the requested name.

    Raised by the registry when a key, letter or acronym does not resolve.
    The message always lists the available principles.
    """

    pass


class DuplicatePrincipleError(SolidError):
    """Raised when two examples claim the same principle key or letter."""

    pass


class UnknownVariantError(SolidError, ValueError):
    """
    A factory was asked for a variant it does not know.

    Raised by the illustration factories (payment methods, shapes) and when
    a driver variant other than violating/adhering/both is requested.

    Examples:
        >>> try:
        ...     create_shape("hexagon")
        ... except UnknownVariantError as e:
        ...     print(e)
    """

    pass

