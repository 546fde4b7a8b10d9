# lggram

Read and change the extra features that the `lg-laptop` kernel driver
exposes on LG Gram laptops:

| Feature              | Setting file         | Off   | On   |
|----------------------|----------------------|-------|------|
| Battery care limit   | `battery_care_limit` | `100` | `80` |
| Fn lock              | `fn_lock`            | `0`   | `1`  |
| USB charge           | `usb_charge`         | `0`   | `1`  |
| Reader mode          | `reader_mode`        | `0`   | `1`  |

Current values are read from `/sys/devices/platform/lg-laptop`.
Changes go through a privileged writer, started with `pkexec`, that
writes the setting file and enables or disables the matching
`lg-gram-<feature>.service` systemd unit (underscores become dashes,
e.g. `lg-gram-battery-care-limit.service`), so that the setting is
restored at boot.

## Installation

```
pip install .
```

To run the tests:

```
pip install .[test]
pytest
```

## Commands

### `lg-gram-settings`

A terminal front end. On start it reads every feature and lists it:

```
$ lg-gram-settings
1. Battery Care Limit: 80
2. Fn Lock: 0
3. USB Charge: 1
4. Reader Mode: unavailable
```

A feature whose setting file is missing or holds an unexpected value is
shown as `unavailable`, and the reason is printed as a line starting
with `! `. It then reads commands, one per line, until `quit` or the end
of input:

- `list` — list the features and their values again
- `toggle N` — switch feature `N` to its other value
- `set N VALUE` — set feature `N` to `VALUE` (one of its two values)
- `info` — show product name, serial number, BIOS vendor and BIOS version
- `folder` — open the settings folder with `xdg-open`
- `about` — print the application name and version
- `help` — list the commands

Changing an unavailable feature does nothing. If the writer fails, the
feature goes back to its previous value and the writer's error output is
printed as a `! ` line. Unknown commands and bad arguments print
`error: ...`.

The settings application runs the writer as
`pkexec /usr/share/lg-gram-settings/lg-gram-writer`; the writer must be
installed at that path for changes and system information to work.

### `lg-gram-writer`

The privileged helper. It must run as root.

```
sudo lg-gram-writer --system-info
sudo lg-gram-writer --feature battery_care_limit=80
sudo lg-gram-writer --feature fn_lock=1
```

`--system-info` prints alternating label and value lines read from
`/sys/devices/virtual/dmi/id`. `--feature setting=value` accepts only the
values in the table above; `battery_care_limit=100` or `0` for the other
features disables the service, the other value enables it. Invalid
arguments print `ERROR: USAGE: <program> mode setting=value` and exit
with status 1; any other failure is written to standard error with exit
status 1. On success the result is printed and the exit status is 0.

## Library use

```python
from lggram.gram import feature, GramError

try:
    print(feature("fn_lock"))
except GramError as error:
    print(f"Failed to read fn_lock: {error}")
```

- `lggram.gram.feature(feature_id, settings_dir=...)` reads a value.
- `lggram.gram.set_feature_async(feature_id, value, writer=...)` and
  `lggram.gram.system_information_async(writer=...)` run the writer
  through `pkexec` and raise `GramError` with its error output on failure.
- `lggram.writer` offers `validate_args`, `system_information`,
  `set_feature` and `usage`; they raise `WriterError` (and `UsageError`
  for bad arguments).
- `lggram.widget.FeatureToggle` is one two-valued feature row;
  `lggram.window.MainWindow` holds the four rows and collects error
  messages in `toasts`; `lggram.window.parse_system_information` turns
  the writer's output into `(label, value)` pairs.

## What it does not do

There is no graphical window: `lg-gram-settings` is a line-based command
loop on standard input and output. The about command shows only the
name and version.