"""Light state tracking for a lamp whose mode advances on every power cycle."""

from __future__ import annotations

import enum
from dataclasses import dataclass, field
from pathlib import Path

from leddyctl.tasmota import (
    PAUSE,
    PAUSE_RESET,
    POWER_OFF,
    POWER_ON,
    CommandChain,
)

STATE_FILE = ".leddy_state"


class LightState(enum.Enum):
    DAY = 0
    DAYBREAK = 1
    NIGHT = 2
    UNKNOWN = 3


STATES_CYCLE = (LightState.DAY, LightState.DAYBREAK, LightState.NIGHT)


def state_to_text(state: LightState) -> str:
    """Return the name stored in the state file for ``state``."""
    return state.name


def parse_state(text: str) -> LightState:
    """Return the state named by ``text``; anything unrecognised is UNKNOWN."""
    try:
        state = LightState[text]
    except KeyError:
        return LightState.UNKNOWN
    return state


def _cycle_index(state: LightState) -> int:
    try:
        return STATES_CYCLE.index(state)
    except ValueError:
        return 0


@dataclass
class Leddy:
    """The lamp's believed state, persisted in a small text file."""

    state_file: Path = field(default_factory=lambda: Path(STATE_FILE))
    chain: CommandChain = field(default_factory=CommandChain)
    state: LightState = LightState.UNKNOWN

    def __post_init__(self) -> None:
        self.state_file = Path(self.state_file)

    def load_state(self) -> LightState:
        """Read the state file; UNKNOWN when it is missing.

        An unrecognised line queues a power reset and counts as DAY.
        """
        try:
            handle = self.state_file.open("r", newline="")
        except FileNotFoundError:
            return LightState.UNKNOWN
        state = LightState.DAY
        with handle:
            for line in handle:
                state = parse_state(line.split("\n", 1)[0])
                if state is LightState.UNKNOWN:
                    self.power_reset(self.chain)
                    state = LightState.DAY
        return state

    def save_state(self) -> None:
        """Write the current state to the state file."""
        self.state_file.write_text(f"{state_to_text(self.state)}\n")

    def init(self) -> None:
        """Load the stored state, resetting the lamp when it is not known."""
        self.state = self.load_state()
        if self.state is LightState.UNKNOWN:
            self.power_reset(self.chain)
            self.state = LightState.DAY

    def done(self) -> None:
        """Persist the current state."""
        self.save_state()

    def count_cycles_to(self, target: LightState) -> int:
        """Return how many power cycles take the lamp to ``target``."""
        if target not in STATES_CYCLE:
            raise ValueError(f"cannot cycle to {state_to_text(target)}")
        return (STATES_CYCLE.index(target) - _cycle_index(self.state)) % len(
            STATES_CYCLE
        )

    def state_after_cycles(self, cycles: int) -> LightState:
        """Return the state reached after ``cycles`` power cycles."""
        steps = max(cycles, 0)
        return STATES_CYCLE[(_cycle_index(self.state) + steps) % len(STATES_CYCLE)]

    def switch_state(self, target: LightState, chain: CommandChain) -> None:
        """Queue the power cycles that bring the lamp to ``target``."""
        self.power_cycle(self.count_cycles_to(target), chain)
        self.state = target

    def state_reset(self, chain: CommandChain) -> None:
        """Reset the lamp and return it to the state it was in."""
        target = self.state
        self.power_reset(chain)
        self.switch_state(target, chain)

    def power_on(self, chain: CommandChain) -> None:
        chain.add(POWER_ON)
        chain.add(PAUSE_RESET)
        self.state = LightState.DAY

    def power_off(self, chain: CommandChain) -> None:
        chain.add(POWER_OFF)
        chain.add(PAUSE_RESET)
        self.state = LightState.UNKNOWN

    def power_reset(self, chain: CommandChain) -> None:
        chain.add(POWER_OFF)
        chain.add(PAUSE_RESET)
        chain.add(POWER_ON)
        self.state = LightState.DAY

    def power_cycle(self, cycles: int, chain: CommandChain) -> None:
        """Queue ``cycles`` off/on cycles and advance the state accordingly."""
        after = self.state_after_cycles(cycles)
        for _ in range(cycles):
            chain.add(POWER_OFF)
            chain.add(PAUSE)
            chain.add(POWER_ON)
            chain.add(PAUSE)
        self.state = after