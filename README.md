# wavebase

Small building blocks for audio software, with no dependencies outside the
standard library.

## Contents

### `wavebase.types`

- `bswap16`, `bswap32`, `bswap64`: reverse the byte order of a 16-, 32- or
  64-bit value. `bswap32h` swaps the bytes inside each 16-bit half of a
  32-bit value and `bswap32w` swaps the two halves. Inputs are masked to
  the given width first.
- `strcasestr(haystack, needle)`: ASCII case-insensitive search. Returns
  the rest of `haystack` from the first match, the whole `haystack` for an
  empty needle, or `None`.
- `strlcpy(src, size)`: what a buffer of `size` characters would hold after a
  bounded copy: at most `size - 1` characters, cut at any embedded NUL.
  A negative size raises `ValueError`.
- `clamp(value, low, high)`: limit a value to a range; `high` wins when the
  range is empty.
- Angle constants such as `GMATH_PI`, `GMATH_2PI`, `GMATH_DEG_TO_RAD` and
  `GMATH_RAD_TO_DEG`.

### `wavebase.random`

- `Generator128(s0, s1)`: one 128-bit state (two unsigned 64-bit words, not
  both zero) shared by three algorithms: `xorshift128plus()` and
  `xoroshiro128plus()` return 64-bit values, `xoshiro128plus()` returns
  32-bit values. `sample()` gives a single-precision noise value in
  [-1.0, 1.0], `uniform()` a value in [0.0, 1.0].
  `Generator128.from_entropy()` seeds from `os.urandom`; `state` shows the
  two words.
- `XorShift64Star(seed)`: the xorshift64* generator. `seed(value)` restarts
  it (non-zero only), `next()` returns the next 64-bit value, and the object
  is an endless iterator.

### `wavebase.timer`

- `usec_sleep(dt_us)` and `msec_sleep(dt_ms)`: sleep for a number of micro-
  or milliseconds; negative values raise `ValueError`.
- `RepeatTimer`: `start_repeatable(us)` starts it with a fixed step of one
  millisecond (the argument is checked but does not change the step);
  `wait()` sleeps out what is left of the current step and returns the
  microseconds slept; `stop()` returns `True`.

### `wavebase.log`

- `LogLevel`: `EMERG` (0) to `DEBUG` (7), plus `SYSLOG` (40).
- `Logger(stream=None, enabled=None)`: `log(level, message, ident=0,
  ident_names=(), current_level=LogLevel.DEBUG)` writes the message to the
  stream (standard output by default) when `level` is between `EMERG` and
  `DEBUG` and not above `current_level`, and returns whether it did. A
  non-zero `ident` prefixes the line with `ident_names[ident]`, right-aligned
  in 16 columns. Messages at `LogLevel.SYSLOG` go to the standard `logging`
  logger named `wavebase` when the system-log channel is on.
- When `enabled` is `None`, the channel is switched on from the
  `WAVEBASE_ENABLE_LOGGING` environment variable, read by
  `syslog_enabled_from_env`: unset means off; empty, `true` in any case, or a
  non-zero leading integer means on. `close()` resets the channel so that it
  is decided again on next use.
- `format_vector`, `format_row`, `format_matrix`, `format_matrices`: text for
  4-element vectors and column-major 4x4 matrices.

## Examples

```python
from wavebase.types import bswap32, strcasestr
from wavebase.random import Generator128, XorShift64Star

assert bswap32(0x11223344) == 0x44332211
assert strcasestr("Audio Loopback Device", "loop") == "Loopback Device"

gen = Generator128.from_entropy()
noise = [gen.sample() for _ in range(1024)]

rng = XorShift64Star(42)
value = rng.next()
```

```python
from wavebase.timer import RepeatTimer

timer = RepeatTimer()
timer.start_repeatable(1000)
for _ in range(10):
    timer.wait()   # sleeps out the rest of each 1 ms step
timer.stop()
```

```python
import io
from wavebase.log import Logger, LogLevel

out = io.StringIO()
logger = Logger(stream=out, enabled=False)
logger.log(LogLevel.INFO, "started", 1, ["", "mixer"])
logger.log(LogLevel.DEBUG, "ignored", current_level=LogLevel.INFO)
```

## What it does not do

This is a helper library only. It does not open audio devices, play,
record or convert audio files, and it installs no command-line programs.
The system-log channel hands messages to Python's `logging` module; it does
not talk to a syslog daemon itself.

## Running the tests

```
pip install -e ".[test]"
pytest
```