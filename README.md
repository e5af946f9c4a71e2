# leddyctl

`leddyctl` controls an aquarium LED light that is plugged into a
Tasmota smart plug. The light has no network interface of its own: every
time its power is switched off and on again it moves to the next mode in
a fixed cycle:

    DAY -> DAYBREAK -> NIGHT -> DAY -> ...

`leddyctl` keeps track of which mode the light is in, works out how many
power cycles are needed to reach the mode you ask for, and sends them to
the plug as a single Tasmota `Backlog` request.

## Installation

    pip install .

No third-party libraries are needed; HTTP requests are made with the
standard library.

## Usage

    leddyctl <command> [argument]

| Command          | What it does                                                           |
|------------------|------------------------------------------------------------------------|
| `on`             | Switch the plug on. The light is then taken to be in DAY mode.         |
| `off`            | Switch the plug off. The light's mode becomes unknown.                 |
| `cycle <n>`      | Power-cycle the light `n` times. A count that is not a number counts as 0. |
| `day`            | Move the light to DAY mode.                                            |
| `daybreak`       | Move the light to DAYBREAK mode.                                       |
| `night`          | Move the light to NIGHT mode.                                          |
| `reset`          | Turn the plug off and on to put the light into a known state, then return to the mode it was in. |
| `feed [minutes]` | Switch to DAYBREAK at once, wait (10 minutes unless given), then go back to the previous mode. |

Examples:

    leddyctl night
    leddyctl cycle 2
    leddyctl feed 5

Running without a command, with `cycle` but no count, or with an unknown
command prints a short message and exits with status 1.

Pressing Ctrl+C while a command is running (for example during the wait
in `feed`) sends the power cycles that return the light to the mode it
was in when the command started.

Each request is sent as an HTTP HEAD request. A request that cannot be
delivered is reported on standard error; it is not retried.

## The state file

The current mode is stored in a file named `.leddy_state` in the working
directory, holding `DAY`, `DAYBREAK`, `NIGHT`, or `UNKNOWN` after `off`.
When the file is missing or holds anything other than one of the three
modes, `leddyctl` first resets the plug so the light is in DAY mode and
goes on from there. Run `leddyctl` from the same directory each time so
that it finds its state. If the state file cannot be written, the command
exits with status 1 and nothing is sent.

If the light gets out of step with the stored mode (for instance after
someone unplugged it), run `leddyctl reset`.

## Limits

- The plug's address is fixed at `http://192.168.1.248`
  (`leddyctl.tasmota.LEDDY_URL`); the command has no option to change it.
- `leddyctl` never asks the plug for its power state; it relies entirely
  on the state file.

## Using it from Python

The pieces the command is built from can be used directly:

- `leddyctl.tasmota.CommandChain` collects Tasmota commands (`add`,
  `joined`, `clear`). `execute_chain(chain, send)` joins them into one
  `Backlog` URL built by `build_url`, hands it to `send` (by default
  `send_request`), empties the chain and returns the URL, or returns
  `None` if the chain was empty.
- `leddyctl.leddy.Leddy` tracks the light's mode (`LightState`), loads
  and saves the state file (`init`, `done`, `load_state`, `save_state`)
  and adds the power commands needed to change mode to a chain
  (`switch_state`, `state_reset`, `power_on`, `power_off`,
  `power_reset`, `power_cycle`). `state_to_text` and `parse_state`
  convert modes to and from their stored names.
- `leddyctl.cli.run(argv, leddy, send, sleep)` runs one command with a
  given `Leddy`, sender and sleep function and returns the exit status,
  which makes it easy to drive without a real plug.

## Running the tests

    pip install ".[test]"
    pytest