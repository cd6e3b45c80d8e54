# sysbro

A set of small helpers for a Linux desktop. Each one is a Python module
you can import. Most of them also install a command.

## Installation

```
pip install .
```

To run the test suite:

```
pip install ".[test]"
pytest
```

## Startup applications (`sysbro.autostart`, `sysbro.desktop_properties`)

`AutoStartManager` manages the `.desktop` files in an autostart directory.
By default this is `default_autostart_dir()`, which is
`$XDG_CONFIG_HOME/autostart` or `~/.config/autostart`. The manager creates
the directory if it does not exist.

`load_apps()` reads the directory again and returns the entries as
`DesktopInfo` records, which have the fields `file_path`, `name`,
`icon_name`, `command` and `generic_name`. When a file has a localized
`Name[<locale>]` key, that value is used as the name. Functions registered
in `manager.listeners` are called after every reload.

The manager has these other operations:

- `add_new_app(name, command)` writes `<name>.desktop` and returns its path.
- `set_value(path, key, value)` changes one key. When the key is `Name`, it
  also changes the localized name. When the key is `Exec`, it also sets
  `Icon` to the same value.
- `remove_app(path)` removes one entry.
- `delete_all()` deletes every file in the directory.
- `import_files(paths)` copies `.desktop` files into the directory. It does
  not overwrite existing files, and it returns the list of copies.

```python
from sysbro.autostart import AutoStartManager, default_autostart_dir

manager = AutoStartManager(default_autostart_dir(), "en_US")
manager.add_new_app("Notes", "notes-app")
for info in manager.load_apps():
    print(info.name, info.command, info.file_path)
```

`DesktopProperties` reads one `[group]` of a `key=value` file and writes it
back with the keys sorted. Unlike an INI parser, it treats `;` as part of
the value, so a line such as `Categories=Utility;System;` stays intact.

- `load()` raises `OSError` when the file cannot be read.
- The constructor does not raise for a missing file. You get an empty set
  of properties instead.

## File shredder (`sysbro.shredder`)

`FileList` is an ordered list of paths with no duplicates. It supports
`append`, `remove`, `clear`, `len()`, iteration and `in`.

`remove_all_files(command)` runs the delete command with every listed path
as an argument and returns how many paths there were. The default command
is `pkexec sysbro-delete-files`. The list is emptied only when the command
succeeds. If the command fails, `subprocess.CalledProcessError` is raised
and the list is kept.

The `sysbro-delete-files` command deletes each path it is given. A
directory is removed with everything inside it. For each path that is not
a directory, it prints `finished` or `error`.

```
sysbro-delete-files FILE_OR_DIR...
```

`delete_paths(paths)` does the same work from Python. It returns one
`DeleteResult` (`path`, `is_dir`, `ok`) for each path.

## Boot time (`sysbro.boot_time`)

`sysbro-boot-assistant` reads the total startup time from the first line of
`systemd-analyze` output and shows it as a desktop notification through
`notify-send`. It exits with status 1 in either of these cases:

- A program cannot be run.
- No time is found in the output.

```
sysbro-boot-assistant
```

`parse_boot_time(output)` returns the time text. It raises `ValueError`
when there is none. `boot_time_message(time)` builds the notification text.

## Parcel tracking (`sysbro.express`)

Looks up a parcel at the kuaidi100 query service. The service needs an id,
which you give with `--api-id` or the `KUAIDI100_ID` environment variable.
The company is one of the display names in `COMPANIES`. The output lists
each event's time and text in the order the service returns them
(newest first).

```
sysbro-express --api-id YOUR_ID 顺丰快递 TRACKING_NUMBER
```

The command also accepts `--timeout SECONDS`, with a default of 10.

The same functions are available from Python:

- `build_query_url(api_id, company, number)` accepts a display name or a
  company code. It raises `ValueError` for an unknown company.
- `format_tracking(payload)` turns a reply into text.
- `query(...)` combines the two. It raises `ValueError` for an empty number
  and `OSError` on network failure.

## Network speed test (`sysbro.speedtest`)

`SpeedTest` works in three steps:

1. It requests the probe URL without a proxy and expects a `302` redirect.
2. It downloads the redirect target and takes a rate sample after each
   chunk.
3. It returns the highest of the first `samples` rates, in bytes per
   second. The default is 60 samples.

It raises `SpeedTestError` in these cases:

- The probe is not redirected.
- The download fails.
- The download ends before enough samples were taken.

`format_bytes(rate)` renders rates such as `512.0B/s` or `1.5MB/s`.

```
sysbro-network-test [--url URL] [--samples N] [--quiet]
```

The command prints each sample unless `--quiet` is given, then prints the
highest rate.

## Input-method skins (`sysbro.skin`)

`SkinManager` converts `.ssf` skin files into fcitx skins. It uses an
external `ssf2skin` converter, which by default is expected next to the
running program. The converted skins go into `~/.config/fcitx/skin/`
unless you set a different directory.

- `convert(files)` raises `FileNotFoundError` when the converter is missing.
- `installed_skins()` lists the installed skin directories.
- `delete_skins(names)` returns the names that could not be deleted.

```
ssf2fcitx [--install-dir DIR] [--converter PATH] convert FILE.ssf...
ssf2fcitx list
ssf2fcitx delete NAME...
```

## What this package does not do

- It has no graphical interface: no windows, lists, dialogs, drag and drop
  or notifications other than the one `notify-send` call. Every helper is a
  library or a command-line program.
- Autostart entries can only be managed from Python. There is no command
  for it.
- `AutoStartManager` does not watch its directory for changes. Call
  `load_apps()` to pick up changes made by other programs.