"""
Targeting Strategies
====================
Strategies that enable a toggle for explicitly listed users, addresses or hosts.
"""

import socket
from typing import Any, Optional

from unleash_client.models import Context
from unleash_client.strategies.base import Strategy, split_list


class UserWithIdStrategy(Strategy):
    """Enabled for the user ids listed in ``params["userIds"]``."""

    name = "userWithId"

    def is_enabled(
        self,
        params: Optional[dict[str, Any]] = None,
        context: Optional[Context] = None,
    ) -> bool:
        if context is None or context.user_id is None:
            return False
        return context.user_id in split_list((params or {}).get("userIds"))


class RemoteAddressStrategy(Strategy):
    """Enabled for the client addresses listed in ``params["IPs"]``."""

    name = "remoteAddress"

    def is_enabled(
        self,
        params: Optional[dict[str, Any]] = None,
        context: Optional[Context] = None,
    ) -> bool:
        if context is None or context.remote_address is None:
            return False
        return context.remote_address in split_list((params or {}).get("IPs"))


class ApplicationHostnameStrategy(Strategy):
    """
    Enabled on the hosts listed in ``params["hostNames"]``.

    The hostname is looked up once per instance and compared case-insensitively.
    """

    name = "applicationHostname"

    def __init__(self, hostname: Optional[str] = None):
        self.hostname = (hostname or socket.gethostname()).lower()

    def is_enabled(
        self,
        params: Optional[dict[str, Any]] = None,
        context: Optional[Context] = None,
    ) -> bool:
        host_names = [host.lower() for host in split_list((params or {}).get("hostNames"))]
        return self.hostname in host_names
