"""Command line control of the fish tank lamp."""

from __future__ import annotations

import re
import sys
import time
from typing import Callable, Sequence

from leddyctl.leddy import Leddy, LightState
from leddyctl.tasmota import CommandChain, execute_chain, send_request

PROG = "fishtank_control"
DEFAULT_FEED_MINUTES = 10

_DIRECT_STATES = {
    "day": LightState.DAY,
    "daybreak": LightState.DAYBREAK,
    "night": LightState.NIGHT,
}

_INVALID_HELP = (
    "Invalid argument: {arg}. Use 'on' or 'off' or 'cycle <n>' or set "
    "light directly: day, daybreak, night.\n"
    "Use reset to put leddy into known state\n"
    "Use feed for temp DAYBREAK, then return to original state"
)


def _leading_int(text: str) -> int:
    """Parse a leading integer the lenient way; no digits gives 0."""
    match = re.match(r"\s*([+-]?\d+)", text)
    return int(match.group(1)) if match else 0


def _dispatch(
    args: Sequence[str],
    leddy: Leddy,
    send: Callable[[str], None],
    sleep: Callable[[float], None],
) -> int:
    command = args[0]
    chain = leddy.chain
    if command == "cycle":
        if len(args) < 2:
            print("No cycle count provided", file=sys.stderr)
            return 1
        leddy.power_cycle(_leading_int(args[1]), chain)
    elif command == "on":
        leddy.power_on(chain)
    elif command == "off":
        leddy.power_off(chain)
    elif command == "feed":
        current = leddy.state
        daybreak = CommandChain()
        leddy.switch_state(LightState.DAYBREAK, daybreak)
        execute_chain(daybreak, send)
        minutes = _leading_int(args[1]) if len(args) > 1 else DEFAULT_FEED_MINUTES
        sleep(minutes * 60)
        leddy.switch_state(current, chain)
    elif command == "reset":
        leddy.state_reset(chain)
    elif command in _DIRECT_STATES:
        leddy.switch_state(_DIRECT_STATES[command], chain)
    else:
        print(_INVALID_HELP.format(arg=command), file=sys.stderr)
        return 1

    try:
        leddy.done()
    except OSError:
        print(f"Could not open {leddy.state_file} file", file=sys.stderr)
        return 1
    execute_chain(chain, send)
    return 0


def run(
    argv: Sequence[str],
    leddy: Leddy,
    send: Callable[[str], None] = send_request,
    sleep: Callable[[float], None] = time.sleep,
) -> int:
    """Run one command and return the exit status.

    An interrupt puts the lamp back into the state it had at start-up.
    """
    leddy.init()
    initial = leddy.state

    if not argv:
        print(f"Usage: {PROG} <on|off>", file=sys.stderr)
        return 1

    try:
        return _dispatch(argv, leddy, send, sleep)
    except KeyboardInterrupt:
        restore = CommandChain()
        leddy.switch_state(initial, restore)
        execute_chain(restore, send)
        return 0


def main(argv: Sequence[str] | None = None) -> int:
    """Entry point of the command line tool."""
    args = list(sys.argv[1:] if argv is None else argv)
    return run(args, Leddy())


if __name__ == "__main__":
    sys.exit(main())