# barstatus

`barstatus` is a set of small functions that read system figures and
return them as short strings for a window manager status bar. Each
function returns a string, or `None` when the value cannot be read; in
that case a short diagnostic is written to standard error.

## Installation

```
pip install .
```

For running the tests:

```
pip install ".[test]"
pytest
```

## Components

- `barstatus.power` – `battery_perc`, `battery_state` and
  `battery_remaining`, read from `/sys/class/power_supply/<bat>`.
  `battery_state` returns `"ﮣ"` while charging, `"*"` while discharging
  and `"?"` otherwise; `battery_remaining` returns `"Hh Mm"` while
  discharging and an empty string otherwise.
- `barstatus.memory` – `parse_meminfo`, `ram_free`, `ram_perc`,
  `ram_total`, `ram_used`, `swap_free`, `swap_perc`, `swap_total`,
  `swap_used`, all read from `/proc/meminfo`.
- `barstatus.system` – `datetime`, `disk_free`, `disk_perc`,
  `disk_total`, `disk_used`, `entropy`, `hostname`, `kernel_release`,
  `load_avg`, `num_files`, `run_command`, `uptime`, `uid`, `gid`,
  `username` and `temp`.
- `barstatus.network` – `ipv4`, `ipv6`, `wifi_perc`, `wifi_essid`,
  `rssi_to_perc` and `NetSpeed`.
- `barstatus.volume` – `vol_perc`, the master volume of an OSS mixer
  device (`/dev/mixer` by default).
- `barstatus.keyboard` – `format_indicators`, `valid_layout_or_variant`
  and `layout_from_symbols`.
- `barstatus.util` – `fmt_human`, `read_file`, `read_uint`, `warn` and
  `die`.

Most readers take the file or directory they read from as an argument,
so they can be pointed at test data:

```python
from barstatus.memory import ram_perc
from barstatus.power import battery_perc

ram_perc("/proc/meminfo")
battery_perc("BAT0")
```

Sizes are formatted with `fmt_human`, which scales a number by 1000 or
1024 and adds the matching prefix; any other base raises `ValueError`:

```python
from barstatus.util import fmt_human

fmt_human(1536, 1024)   # '1.5 Ki'
```

`NetSpeed` keeps the byte counter of an interface between calls. Its
first `sample` returns `None`; later ones return the rate per second
since the previous sample, given the interval in milliseconds:

```python
from barstatus.network import NetSpeed

rx = NetSpeed("rx", interval=1000)
rx.sample("wlan0")   # None
rx.sample("wlan0")   # e.g. '12.0 Ki'
```

Keyboard indicators follow a short format: `c` for caps lock and `n` for
num lock, each optionally followed by `?`. Without `?` the letter is
always shown, upper case when the indicator is on; with `?` it is shown
only when the indicator is on:

```python
from barstatus.keyboard import format_indicators

format_indicators("cn", 1)   # 'Cn' – caps lock on, num lock off
```

## What it does not do

The package has no command and no loop that assembles the components
into a status line and refreshes it; combining and printing the values
is left to the caller. It also has no CPU usage or CPU frequency
component.