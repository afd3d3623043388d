"""Tests the asyncio module."""

from __future__ import annotations

import asyncio
import ipaddress
import socket
from typing import Self
from unittest import TestCase
from unittest.mock import AsyncMock, patch

from netendpoint.asyncio import AsyncioResolver
from netendpoint.errors import ResolutionError


class TestAsyncioResolver(TestCase):
    """Tests the event loop resolver."""

    def test_lookup(self: Self) -> None:
        """Test a successful lookup."""

        async def impl() -> None:
            getaddrinfo = AsyncMock(
                return_value=[
                    (socket.AF_INET, socket.SOCK_STREAM, 6, "", ("192.0.2.1", 0)),
                    (socket.AF_INET6, socket.SOCK_STREAM, 6, "", ("::1", 0, 0, 0)),
                ]
            )
            with patch.object(asyncio.get_running_loop(), "getaddrinfo", getaddrinfo):
                addresses = await AsyncioResolver().lookup("example.com")
            self.assertEqual(
                addresses,
                [ipaddress.IPv4Address("192.0.2.1"), ipaddress.IPv6Address("::1")],
            )
            getaddrinfo.assert_awaited_once_with(
                "example.com", None, family=socket.AF_UNSPEC, type=socket.SOCK_STREAM
            )

        asyncio.run(impl())

    def test_failure(self: Self) -> None:
        """Test that a getaddrinfo failure becomes a ResolutionError."""

        async def impl() -> None:
            getaddrinfo = AsyncMock(
                side_effect=socket.gaierror(socket.EAI_NONAME, "Name not known")
            )
            with patch.object(
                asyncio.get_running_loop(), "getaddrinfo", getaddrinfo
            ), self.assertRaises(ResolutionError):
                await AsyncioResolver(socket.AF_INET6).lookup("invalid.invalid")
            getaddrinfo.assert_awaited_once_with(
                "invalid.invalid",
                None,
                family=socket.AF_INET6,
                type=socket.SOCK_STREAM,
            )

        asyncio.run(impl())

    def test_encoding_failure(self: Self) -> None:
        """Test that a name getaddrinfo cannot encode becomes a ResolutionError."""

        async def impl() -> None:
            error = UnicodeError("label empty or too long")
            getaddrinfo = AsyncMock(side_effect=error)
            with patch.object(
                asyncio.get_running_loop(), "getaddrinfo", getaddrinfo
            ), self.assertRaises(ResolutionError) as cm:
                await AsyncioResolver().lookup("a..example")
            self.assertIs(cm.exception.__cause__, error)

        asyncio.run(impl())
