"""Shared fixtures for ipwatch tests."""

from io import StringIO

import pytest

from ipwatch.backends.network import AddressLookupError, LinkInfo
from ipwatch.utils.logger import Logger


@pytest.fixture(autouse=True)
def log_output():
    """Route ipwatch logs into a buffer the test can inspect."""
    output = StringIO()
    Logger.configure(level="DEBUG", output=output)
    return output


class FakeBackend:
    """In-memory interface source.

    ``links`` maps interface names to ``(LinkInfo, addresses)``; an
    addresses value of None makes the lookup fail for that interface.
    """

    def __init__(self, links=None):
        self.links = links or {}
        self.fail_enumeration = False

    def list_links(self):
        if self.fail_enumeration:
            from ipwatch.backends.network import InterfaceEnumerationError

            raise InterfaceEnumerationError("route socket unavailable")
        return [link for link, _ in self.links.values()]

    def addresses(self, name):
        _, addresses = self.links[name]
        if addresses is None:
            raise AddressLookupError(name, "permission denied")
        return list(addresses)


def make_link(name, index, flags="up|broadcast|multicast|running", mac="", mtu=1500):
    return LinkInfo(name=name, index=index, flags=flags, mac=mac, mtu=mtu)


@pytest.fixture
def two_interfaces():
    """Backend with a loopback and one ethernet interface."""
    return FakeBackend(
        {
            "lo": (
                make_link("lo", 1, flags="up|loopback|running", mtu=65536),
                ["127.0.0.1/8", "::1/128"],
            ),
            "eth0": (
                make_link("eth0", 2, mac="52:54:00:12:34:56"),
                ["192.168.1.20/24"],
            ),
        }
    )
