"""A resolver that queries DNS servers directly using dnspython."""

from __future__ import annotations

import ipaddress
import logging
from collections.abc import Iterable, Sequence
from typing import Self

import dns.exception
import dns.resolver

from .errors import ResolutionError
from .types import IPAddress, Resolver


class DNSPythonResolver(Resolver):
    """
    A resolver that sends A and AAAA queries with dnspython.

    Unlike the system resolver, this does not consult /etc/hosts or any other name
    service, only DNS. IPv4 addresses are returned before IPv6 addresses. If the AAAA
    query fails after the A query found addresses, the IPv4 addresses alone are
    returned.
    """

    __slots__ = {
        "_resolver": "The dnspython resolver.",
    }

    _resolver: dns.resolver.Resolver

    def __init__(
        self: Self,
        lifetime: float | None = None,
        nameservers: Iterable[str] | None = None,
    ) -> None:
        """
        Construct a new DNSPythonResolver.

        :param lifetime: The total number of seconds to spend on each query, or None
            to use dnspython’s default.
        :param nameservers: The addresses of the DNS servers to query, or None to use
            the system configuration.
        """
        self._resolver = dns.resolver.Resolver()
        if lifetime is not None:
            self._resolver.lifetime = lifetime
        if nameservers is not None:
            self._resolver.nameservers = list(nameservers)

    def _query(self: Self, domain: str, rdtype: str) -> list[IPAddress]:
        """
        Query one record type.

        :param domain: The domain name.
        :param rdtype: “A” or “AAAA”.
        :return: The addresses found, which may be none at all.
        """
        try:
            answer = self._resolver.resolve(domain, rdtype)
        except dns.resolver.NoAnswer:
            # The name exists but has no records of this type.
            return []
        except dns.exception.DNSException as exp:
            logging.getLogger(__name__).debug(
                "%s query for %s failed: %s", rdtype, domain, exp
            )
            raise ResolutionError(str(exp)) from exp
        return [ipaddress.ip_address(rdata.address) for rdata in answer]

    def lookup(self: Self, domain: str) -> Sequence[IPAddress]:  # noqa: D102
        ipv4 = self._query(domain, "A")
        try:
            ipv6 = self._query(domain, "AAAA")
        except ResolutionError:
            if not ipv4:
                raise
            logging.getLogger(__name__).debug(
                "Using only the IPv4 addresses of %s", domain
            )
            ipv6 = []
        return ipv4 + ipv6
