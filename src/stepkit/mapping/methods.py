"""HTTP request methods as combinable flags.

Routes may be registered for a combination of methods, while cached
responses are always keyed by exactly one method.
"""

from enum import Flag, auto
from typing import Self


class RequestMethod(Flag):
    """HTTP request method bitmask."""

    GET = auto()
    POST = auto()
    PUT = auto()
    DELETE = auto()
    HEAD = auto()
    PATCH = auto()
    OPTIONS = auto()

    ANY = GET | POST | PUT | DELETE | HEAD | PATCH | OPTIONS

    @classmethod
    def from_string(cls, value: str) -> Self:
        """Parse a method name such as `get` or `GET`.

        Raises:
            ValueError: If the name is not a known method.
        """
        try:
            return cls[value.strip().upper()]

        except KeyError as base:
            raise ValueError(f'Unknown request method {value!r}') from base

    @property
    def is_single(self) -> bool:
        """Whether the value denotes exactly one HTTP method."""
        return len(self) == 1

    def __str__(self) -> str:
        """String represenatation."""
        return '|'.join(member.name for member in self if member.name)
