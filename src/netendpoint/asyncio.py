"""A resolver connecting netendpoint to the Python standard library asyncio."""

from __future__ import annotations

import asyncio
import logging
import socket
from collections.abc import Sequence
from typing import Self

from .errors import ResolutionError
from .system import addresses_from_addrinfo
from .types import AsyncResolver, IPAddress


class AsyncioResolver(AsyncResolver):
    """
    A resolver that uses the running event loop’s getaddrinfo.

    The default event loop runs getaddrinfo in its executor, so lookups do not block
    the loop. Cancelling the awaiting task abandons the lookup.
    """

    __slots__ = {
        "_family": "The address family to restrict results to, or AF_UNSPEC.",
    }

    _family: int

    def __init__(self: Self, family: int = socket.AF_UNSPEC) -> None:
        """
        Construct a new AsyncioResolver.

        :param family: AF_INET or AF_INET6 to return only addresses of that family,
            or AF_UNSPEC to return both.
        """
        self._family = family

    async def lookup(self: Self, domain: str) -> Sequence[IPAddress]:  # noqa: D102
        loop = asyncio.get_running_loop()
        try:
            infos = await loop.getaddrinfo(
                domain, None, family=self._family, type=socket.SOCK_STREAM
            )
        except (OSError, UnicodeError) as exp:
            # The idna codec rejects empty or overlong labels before any query.
            logging.getLogger(__name__).debug("getaddrinfo(%s) failed: %s", domain, exp)
            raise ResolutionError(str(exp)) from exp
        return addresses_from_addrinfo(infos)
