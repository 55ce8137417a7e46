"""Network backend - enumerates interfaces and their addresses using psutil."""

from __future__ import annotations

import ipaddress
import socket
from dataclasses import dataclass

import psutil

# Flags reported for an interface, in display order.
FLAG_ORDER = ("up", "broadcast", "loopback", "pointtopoint", "multicast", "running")

# psutil reports some flags under their ifconfig names.
_FLAG_ALIASES = {"pointopoint": "pointtopoint"}

_ZERO_MAC = "00:00:00:00:00:00"


class InterfaceEnumerationError(Exception):
    """Raised when the operating system cannot list its interfaces."""


class AddressLookupError(Exception):
    """Raised when the addresses of one interface cannot be read."""

    def __init__(self, name: str, reason: str) -> None:
        self.name = name
        super().__init__(f"address lookup for {name} failed: {reason}")


@dataclass(frozen=True)
class LinkInfo:
    """Link-level properties of one interface."""

    name: str
    index: int
    flags: str
    mac: str
    mtu: int


class NetworkBackend:
    """Interface enumeration backend using psutil and socket.

    ``list_links`` captures the interface and address tables in one pass;
    ``addresses`` then reads a single interface's addresses from that
    capture so one bad entry does not spoil the rest of the snapshot.
    """

    def __init__(self) -> None:
        self._addrs: dict[str, list] = {}

    def list_links(self) -> list[LinkInfo]:
        """Enumerate every interface exposed by the operating system.

        Returns
        -------
            LinkInfo records ordered by OS index, then name.

        Raises
        ------
            InterfaceEnumerationError: If the OS query fails.
        """
        try:
            stats = psutil.net_if_stats()
            self._addrs = psutil.net_if_addrs()
        except OSError as e:
            raise InterfaceEnumerationError(str(e)) from e

        links = []
        for name in set(stats) | set(self._addrs):
            if_stats = stats.get(name)
            links.append(
                LinkInfo(
                    name=name,
                    index=_interface_index(name),
                    flags=format_flags(if_stats),
                    mac=_hardware_address(self._addrs.get(name, [])),
                    mtu=if_stats.mtu if if_stats else 0,
                )
            )

        links.sort(key=lambda link: (link.index, link.name))
        return links

    def addresses(self, name: str) -> list[str]:
        """Return the CIDR-formatted IP addresses bound to ``name``.

        Raises
        ------
            AddressLookupError: If an address entry cannot be formatted.
        """
        result = []
        for addr in self._addrs.get(name, []):
            if addr.family not in (socket.AF_INET, socket.AF_INET6):
                continue
            try:
                result.append(to_cidr(addr.address, addr.netmask))
            except ValueError as e:
                raise AddressLookupError(name, str(e)) from e
        return result


def to_cidr(address: str, netmask: str | None) -> str:
    """Format an address and netmask as ``address/prefixlen``.

    IPv6 zone suffixes are dropped. Without a netmask the full host prefix
    is used.

    Raises
    ------
        ValueError: If the address or netmask is not a valid IP.
    """
    ip = ipaddress.ip_address(address.split("%", 1)[0])
    if netmask:
        mask = int(ipaddress.ip_address(netmask.split("%", 1)[0]))
        prefix = bin(mask).count("1")
    else:
        prefix = ip.max_prefixlen
    return f"{ip}/{prefix}"


def format_flags(if_stats) -> str:
    """Render psutil interface stats as ``up|broadcast|...``.

    Only the flags in FLAG_ORDER are reported. An interface with none of
    them renders as an empty string, not ``"0"``.
    """
    if if_stats is None:
        return ""

    raw = getattr(if_stats, "flags", "") or ""
    present = {_FLAG_ALIASES.get(f.strip(), f.strip()) for f in raw.split(",")}
    if if_stats.isup:
        present.add("up")

    return "|".join(flag for flag in FLAG_ORDER if flag in present)


def _interface_index(name: str) -> int:
    try:
        return socket.if_nametoindex(name)
    except OSError:
        return 0


def _hardware_address(addrs: list) -> str:
    for addr in addrs:
        if addr.family == psutil.AF_LINK and addr.address:
            mac = addr.address.replace("-", ":").lower()
            return "" if mac == _ZERO_MAC else mac
    return ""
