"""Outbound internet check via DNS resolution."""

from __future__ import annotations

import asyncio
import socket

from utils.error_handling import DnsResolutionError


class DnsService:
    """Resolve hostnames with the event loop's resolver."""

    async def lookup(self, hostname: str) -> str:
        """Return the first address for ``hostname``, preferring IPv4."""
        loop = asyncio.get_running_loop()
        try:
            infos = await loop.getaddrinfo(hostname, None, type=socket.SOCK_STREAM)
        except OSError as exc:
            raise DnsResolutionError(f"Could not resolve {hostname}: {exc}") from exc

        if not infos:
            raise DnsResolutionError(f"Could not resolve {hostname}: no addresses")

        for family, _, _, _, sockaddr in infos:
            if family == socket.AF_INET:
                return sockaddr[0]
        return infos[0][4][0]
