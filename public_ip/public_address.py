"""
public_ip/public_address.py

Responsibility: Defines the PublicAddress value object returned by a
successful resolution.
Does NOT: make HTTP calls or decide which provider to ask.
"""

from __future__ import annotations

import ipaddress
from dataclasses import dataclass

from public_ip.exceptions import ParseError


class PublicAddress:
    """
    Tagged result of a resolution. IPv4Address is the only variant.
    """

    __slots__ = ()


@dataclass(frozen=True)
class IPv4Address(PublicAddress):
    """
    A public IPv4 address exactly as the echo service reported it.

    The text is validated on construction and stored verbatim; it is never
    reformatted, so "1.2.3.4" stays "1.2.3.4".

    Raises:
        ParseError: If text is not a dotted-decimal IPv4 address.
    """

    text: str

    def __post_init__(self) -> None:
        # ipaddress also accepts ints and packed bytes; only text is valid here.
        if not isinstance(self.text, str):
            raise ParseError(repr(self.text), "expected dotted-decimal text")
        try:
            ipaddress.IPv4Address(self.text)
        except ValueError as exc:
            raise ParseError(self.text, str(exc)) from exc

    @property
    def address(self) -> ipaddress.IPv4Address:
        return ipaddress.IPv4Address(self.text)

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f'IPv4Address("{self.text}")'
