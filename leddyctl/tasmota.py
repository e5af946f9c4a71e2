"""Command chains for a Tasmota device, sent as a single Backlog request."""

from __future__ import annotations

import sys
import urllib.error
import urllib.request
from dataclasses import dataclass, field
from typing import Callable

LEDDY_URL = "http://192.168.1.248"
CMND_PATH = "/cm?cmnd=Backlog%20"
COMMAND_SEPARATOR = "%3b"

POWER_ON = "Power%20On"
POWER_OFF = "Power%20Off"
PAUSE = "Delay%202"
PAUSE_RESET = "Delay%2050"

REQUEST_TIMEOUT = 30.0


@dataclass
class CommandChain:
    """An ordered list of URL-encoded Tasmota commands."""

    commands: list[str] = field(default_factory=list)

    def add(self, command: str) -> None:
        """Append one command to the chain."""
        self.commands.append(command)

    def joined(self) -> str:
        """Return all commands joined with the Backlog separator."""
        return COMMAND_SEPARATOR.join(self.commands)

    def clear(self) -> None:
        """Drop every command in the chain."""
        self.commands.clear()

    def __len__(self) -> int:
        return len(self.commands)

    def __iter__(self):
        return iter(self.commands)


def build_url(command: str, base_url: str = LEDDY_URL) -> str:
    """Return the URL that runs ``command`` as a Backlog on the device."""
    return f"{base_url}{CMND_PATH}{command}"


def send_request(url: str) -> None:
    """Send a HEAD request to ``url``; transport failures are reported on stderr."""
    request = urllib.request.Request(url, method="HEAD")
    try:
        with urllib.request.urlopen(request, timeout=REQUEST_TIMEOUT):
            pass
    except urllib.error.HTTPError as exc:
        # The device answered; the status code is not treated as a failure.
        exc.close()
    except (urllib.error.URLError, OSError) as exc:
        reason = getattr(exc, "reason", exc)
        print(f"request failed: {reason}", file=sys.stderr)


def execute_chain(
    chain: CommandChain, send: Callable[[str], None] = send_request
) -> str | None:
    """Send the chain as one request and empty it.

    Returns the URL that was sent, or None when the chain held no commands.
    """
    if not chain.commands:
        return None
    url = build_url(chain.joined())
    send(url)
    chain.clear()
    return url