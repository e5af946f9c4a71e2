import pytest

from leddyctl.leddy import (
    STATES_CYCLE,
    Leddy,
    LightState,
    parse_state,
    state_to_text,
)
from leddyctl.tasmota import PAUSE, PAUSE_RESET, POWER_OFF, POWER_ON, CommandChain


@pytest.fixture
def leddy(tmp_path):
    return Leddy(state_file=tmp_path / ".leddy_state")


@pytest.mark.parametrize("state", list(LightState))
def test_text_round_trip(state):
    assert parse_state(state_to_text(state)) is state


def test_state_text_values():
    assert state_to_text(LightState.DAYBREAK) == "DAYBREAK"
    assert parse_state("NIGHT") is LightState.NIGHT


@pytest.mark.parametrize("text", ["", "day", "EVENING", "DAY "])
def test_parse_unrecognised_is_unknown(text):
    assert parse_state(text) is LightState.UNKNOWN


def test_load_missing_file_is_unknown(leddy):
    assert leddy.load_state() is LightState.UNKNOWN
    assert len(leddy.chain) == 0


def test_init_missing_file_resets(leddy):
    leddy.init()
    assert leddy.state is LightState.DAY
    assert list(leddy.chain) == [POWER_OFF, PAUSE_RESET, POWER_ON]


def test_load_garbage_line_resets(leddy):
    leddy.state_file.write_text("garbage\n")
    assert leddy.load_state() is LightState.DAY
    assert list(leddy.chain) == [POWER_OFF, PAUSE_RESET, POWER_ON]


def test_load_empty_file_is_day(leddy):
    leddy.state_file.write_text("")
    assert leddy.load_state() is LightState.DAY


def test_load_uses_last_line(leddy):
    leddy.state_file.write_text("DAY\nNIGHT\n")
    assert leddy.load_state() is LightState.NIGHT


@pytest.mark.parametrize("state", STATES_CYCLE)
def test_save_load_round_trip(leddy, state):
    leddy.state = state
    leddy.done()
    fresh = Leddy(state_file=leddy.state_file)
    fresh.init()
    assert fresh.state is state
    assert len(fresh.chain) == 0


def test_saved_file_format(leddy):
    leddy.state = LightState.NIGHT
    leddy.save_state()
    assert leddy.state_file.read_text() == "NIGHT\n"


@pytest.mark.parametrize("start", STATES_CYCLE)
@pytest.mark.parametrize("target", STATES_CYCLE)
def test_cycles_reach_target(leddy, start, target):
    leddy.state = start
    cycles = leddy.count_cycles_to(target)
    assert 0 <= cycles < len(STATES_CYCLE)
    assert leddy.state_after_cycles(cycles) is target


@pytest.mark.parametrize("state", STATES_CYCLE)
def test_no_cycles_to_current(leddy, state):
    leddy.state = state
    assert leddy.count_cycles_to(state) == 0


def test_count_cycles_to_unknown_raises(leddy):
    leddy.state = LightState.DAY
    with pytest.raises(ValueError):
        leddy.count_cycles_to(LightState.UNKNOWN)


def test_state_after_full_loop(leddy):
    leddy.state = LightState.DAYBREAK
    assert leddy.state_after_cycles(len(STATES_CYCLE)) is LightState.DAYBREAK
    assert leddy.state_after_cycles(-2) is LightState.DAYBREAK


def test_unknown_state_counts_from_day(leddy):
    leddy.state = LightState.UNKNOWN
    assert leddy.state_after_cycles(1) is LightState.DAYBREAK


def test_power_cycle_commands(leddy):
    leddy.state = LightState.DAY
    chain = CommandChain()
    leddy.power_cycle(2, chain)
    assert list(chain) == [POWER_OFF, PAUSE, POWER_ON, PAUSE] * 2
    assert leddy.state is LightState.NIGHT


def test_switch_state(leddy):
    leddy.state = LightState.NIGHT
    chain = CommandChain()
    leddy.switch_state(LightState.DAYBREAK, chain)
    assert leddy.state is LightState.DAYBREAK
    assert len(chain) == 4 * 2


def test_state_reset_returns_to_state(leddy):
    leddy.state = LightState.NIGHT
    chain = CommandChain()
    leddy.state_reset(chain)
    assert leddy.state is LightState.NIGHT
    assert list(chain)[:3] == [POWER_OFF, PAUSE_RESET, POWER_ON]
    assert len(chain) == 3 + 4 * 2


def test_power_on_and_off(leddy):
    chain = CommandChain()
    leddy.power_on(chain)
    assert leddy.state is LightState.DAY
    leddy.power_off(chain)
    assert leddy.state is LightState.UNKNOWN
    assert list(chain) == [POWER_ON, PAUSE_RESET, POWER_OFF, PAUSE_RESET]