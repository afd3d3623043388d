"""Tests the main module."""

from __future__ import annotations

import io
import ipaddress
from collections.abc import Sequence
from typing import Self
from unittest import TestCase
from unittest.mock import patch

from netendpoint.errors import ResolutionError
from netendpoint.main import describe, main
from netendpoint.system import SystemResolver
from netendpoint.types import AsyncResolver, IPAddress, Resolver


class FixedResolver(Resolver):
    """A resolver that answers every name with the same address."""

    __slots__ = ()

    def lookup(self: Self, domain: str) -> Sequence[IPAddress]:  # noqa: D102
        if domain.endswith(".invalid"):
            msg = "Name or service not known"
            raise ResolutionError(msg)
        return [ipaddress.IPv4Address("192.0.2.7")]


class AsyncFixedResolver(AsyncResolver):
    """An asynchronous resolver that answers every name with the same address."""

    __slots__ = ()

    async def lookup(self: Self, _domain: str) -> Sequence[IPAddress]:  # noqa: D102
        return [ipaddress.IPv6Address("2001:db8::7")]


class TestDescribe(TestCase):
    """Tests describing a single endpoint."""

    def test_parse_only(self: Self) -> None:
        """Test printing the canonical form without resolving."""
        output = io.StringIO()
        self.assertTrue(describe("mqtts://broker.example", None, output))
        self.assertEqual(output.getvalue(), "mqtts://broker.example:8883\n")

    def test_resolve(self: Self) -> None:
        """Test printing resolved addresses."""
        output = io.StringIO()
        self.assertTrue(describe("http://example.com:8080", FixedResolver(), output))
        self.assertEqual(
            output.getvalue(), "http://example.com:8080\n  192.0.2.7:8080\n"
        )

    def test_resolve_async(self: Self) -> None:
        """Test printing addresses found by an asynchronous resolver."""
        output = io.StringIO()
        self.assertTrue(describe("wss://example.com", AsyncFixedResolver(), output))
        self.assertEqual(
            output.getvalue(), "wss://example.com:443\n  [2001:db8::7]:443\n"
        )

    def test_failures(self: Self) -> None:
        """Test that failures are logged and nothing is printed."""
        for uri in ("xyz://host:1", "tcp://example.com", "ftp://x.invalid"):
            output = io.StringIO()
            with self.subTest(uri=uri), self.assertLogs("netendpoint.main", "ERROR"):
                self.assertFalse(describe(uri, FixedResolver(), output))
            self.assertEqual(output.getvalue(), "")

    def test_unencodable_domain(self: Self) -> None:
        """Test that a domain the system resolver cannot encode is only logged."""
        for uri in ("http://a..example", "http://" + "a" * 64 + ".example"):
            output = io.StringIO()
            with self.subTest(uri=uri), self.assertLogs("netendpoint.main", "ERROR"):
                self.assertFalse(describe(uri, SystemResolver(), output))
            self.assertEqual(output.getvalue(), "")

    def test_resolve_path(self: Self) -> None:
        """Test that resolving a socket path is reported as a failure."""
        output = io.StringIO()
        with self.assertLogs("netendpoint.main", "ERROR") as cm:
            self.assertFalse(describe("unix:///run/a.sock", FixedResolver(), output))
        self.assertIn("not a network endpoint", cm.output[0])


class TestMain(TestCase):
    """Tests the command-line entry point."""

    @patch("logging.basicConfig")
    @patch("sys.stdout", new_callable=io.StringIO)
    @patch("sys.argv", ["netendpoint", "ftp://example.com", "unix:///tmp/a.sock"])
    def test_success(self: Self, stdout: io.StringIO, _basic_config: object) -> None:
        """Test a run in which every endpoint is valid."""
        main()
        self.assertEqual(
            stdout.getvalue(), "ftp://example.com:21\nunix:///tmp/a.sock\n"
        )

    @patch("logging.basicConfig")
    @patch("sys.stdout", new_callable=io.StringIO)
    @patch("sys.argv", ["netendpoint", "tcp://:8080", "redis://[::1]"])
    def test_failure(self: Self, stdout: io.StringIO, _basic_config: object) -> None:
        """Test that processing continues past a failure and the status is 1."""
        with self.assertLogs("netendpoint.main", "ERROR"), self.assertRaises(
            SystemExit
        ) as cm:
            main()
        self.assertEqual(cm.exception.code, 1)
        self.assertEqual(stdout.getvalue(), "redis://[::1]:6379\n")
