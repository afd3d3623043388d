"""A resolver using the operating system’s name service via getaddrinfo."""

from __future__ import annotations

import ipaddress
import logging
import socket
from collections.abc import Iterable, Sequence
from typing import Any, Self

from .errors import ResolutionError
from .types import IPAddress, Resolver


def addresses_from_addrinfo(infos: Iterable[tuple[Any, ...]]) -> list[IPAddress]:
    """
    Extract the IP addresses from a getaddrinfo result.

    getaddrinfo returns one entry per address and socket type, so duplicates are
    dropped, keeping the first occurrence of each address.

    :param infos: The getaddrinfo result.
    :return: The distinct addresses, in the order getaddrinfo gave them.
    """
    ret: list[IPAddress] = []
    for family, _type, _proto, _canonname, sockaddr in infos:
        if family not in (socket.AF_INET, socket.AF_INET6):
            continue
        address = ipaddress.ip_address(sockaddr[0])
        if address not in ret:
            ret.append(address)
    return ret


class SystemResolver(Resolver):
    """A resolver that blocks in socket.getaddrinfo."""

    __slots__ = {
        "_family": "The address family to restrict results to, or AF_UNSPEC.",
    }

    _family: int

    def __init__(self: Self, family: int = socket.AF_UNSPEC) -> None:
        """
        Construct a new SystemResolver.

        :param family: AF_INET or AF_INET6 to return only addresses of that family,
            or AF_UNSPEC to return both.
        """
        self._family = family

    def lookup(self: Self, domain: str) -> Sequence[IPAddress]:  # noqa: D102
        try:
            infos = socket.getaddrinfo(
                domain, None, family=self._family, type=socket.SOCK_STREAM
            )
        except (OSError, UnicodeError) as exp:
            # The idna codec rejects empty or overlong labels before any query.
            logging.getLogger(__name__).debug("getaddrinfo(%s) failed: %s", domain, exp)
            raise ResolutionError(str(exp)) from exp
        return addresses_from_addrinfo(infos)
