"""Data types used by multiple modules."""

import abc
import ipaddress
from collections.abc import Sequence
from typing import Self

IPAddress = ipaddress.IPv4Address | ipaddress.IPv6Address
"""The type of a concrete IP address."""


class Resolver(abc.ABC):
    """An object that maps domain names to IP addresses, blocking if necessary."""

    __slots__ = ()

    @abc.abstractmethod
    def lookup(self: Self, domain: str) -> Sequence[IPAddress]:
        """
        Look up the addresses of a domain name.

        :param domain: The domain name to look up.
        :return: The addresses, in order of preference. An empty sequence is treated
            the same as a failure.
        :raises ResolutionError: if the lookup fails.
        """


class AsyncResolver(abc.ABC):
    """An object that maps domain names to IP addresses without blocking."""

    __slots__ = ()

    @abc.abstractmethod
    async def lookup(self: Self, domain: str) -> Sequence[IPAddress]:
        """
        Look up the addresses of a domain name.

        :param domain: The domain name to look up.
        :return: The addresses, in order of preference. An empty sequence is treated
            the same as a failure.
        :raises ResolutionError: if the lookup fails.
        """
