# pioctl

`pioctl` switches your desktop between named setups in one step. A setup is
called a *profile*. A profile says how the monitors are laid out, which audio
sinks to use and at what volume, and which workspace goes on which monitor.
The tool talks to Hyprland through `hyprctl`, to PipeWire through `pactl`, and
shows its progress with `notify-send`.

## Installation

```
pip install .
```

This needs Python 3.10 or newer and the `platformdirs` package. `hyprctl`,
`pactl` and `notify-send` must be on your `PATH`. To run the tests, install
the `test` extra (`pip install .[test]`) and run `pytest`.

## Profiles

Profiles are JSON files in the user config directory for `pioctl`, as found by
`platformdirs` (on Linux usually `~/.config/pioctl/`). The file name without
`.json` is the profile's id: `desk.json` has the id `desk`. The id of the
active profile is kept in the file `current_profile` in the user data
directory (on Linux usually `~/.local/share/pioctl/current_profile`). If no
profile has been recorded yet, the first profile in alphabetical order of id
becomes the active one.

An example profile:

```json
{
  "name": "desk",
  "monitors_config": {
    "delay_before_ms": null,
    "disabled_to_enabled_delay_ms": 500,
    "monitors": [
      {
        "name": "DP-1",
        "scale": 1.0,
        "transformation": 0,
        "resolution": {"width": 2560, "height": 1440},
        "refresh_rate": 144.0,
        "is_enabled": true,
        "mirror_of_name": null,
        "current_position": {"width": 0, "height": 0}
      },
      {
        "name": "HDMI-A-1",
        "scale": 1.0,
        "transformation": 0,
        "resolution": {"width": 1920, "height": 1080},
        "refresh_rate": 60.0,
        "is_enabled": false,
        "mirror_of_name": null,
        "current_position": {"width": 2560, "height": 0}
      }
    ]
  },
  "audio_sinks_config": {
    "delay_before_ms": 1000,
    "audio_sinks": [
      {"sink_name": "alsa_output.usb", "volume": 40, "default": true}
    ]
  },
  "desktop_config": {
    "delay_before_ms": null,
    "workspaces": [
      {"index": "1", "monitor_name": "DP-1", "active": true, "focused": true},
      {"index": "2", "monitor_name": "DP-1"}
    ]
  }
}
```

`default` on an audio sink and `active` and `focused` on a workspace may be
left out; they are then `false`. A profile file that does not parse makes the
commands that read all profiles fail.

Each `sink_name` is matched against the start of the sink names that `pactl`
reports. A sink is tried up to ten times, half a second apart, so devices that
show up late are still found.

## Usage

```
pioctl monitors          # connected monitors and their modes, as JSON
pioctl audio-sinks       # names of the available audio sinks
pioctl profiles          # every profile: its file path, then its JSON
pioctl current           # the active profile's file path and JSON
pioctl apply desk        # apply the profile with id "desk"
pioctl apply-next        # apply the profile after the active one, wrapping around
pioctl restore 2000      # re-apply the active profile after 2000 ms
pioctl --version
```

`apply-next` needs at least two profiles. Put `--dry-run` before the command to
print the `hyprctl` and `pactl` commands instead of running them:

```
pioctl --dry-run apply desk
```

In dry-run mode the progress notifications are still sent with `notify-send`,
and the message is also printed.

When a profile is applied, the monitors are set first: disabled monitors are
turned off, then, if any were turned off, the tool waits
`disabled_to_enabled_delay_ms`, then the enabled monitors are set up with their
resolution, refresh rate, position and scale. If that works, the profile is
recorded as the active one. Then the audio sinks are set, then every workspace
is moved to its monitor, and finally the active workspaces are shown on their
monitors, the focused one last. Each of the three steps can first wait its own
`delay_before_ms`. A failing step is reported and the next step still runs.

Failures are printed to standard error; the exit status is 0 except when no
command is given, which exits with status 1.

## What it does not do

The `transformation` and `mirror_of_name` fields of a monitor are read and
written back, but are not applied: monitors are neither rotated nor mirrored.
Only Hyprland and `pactl` are supported.

## Library use

The same steps are available from Python:

```python
from pioctl.profiles import ProfilesManager, default_config_dir, default_data_dir
from pioctl.display import get_display_manager

profiles = ProfilesManager(default_config_dir(), default_data_dir())
profile = profiles.get_profile_by_id("desk")
get_display_manager().set_monitors_config(profile.monitors_config, dry_run=True)
```

`pioctl.models` holds the data types (`Profile`, `MonitorsConfig`,
`AudioSinksConfig`, `DesktopConfig` and the rest) with `from_dict` and
`to_dict`; `Profile` also has `from_json` and `to_json`. `pioctl.audio`,
`pioctl.desktop` and `pioctl.notifications` drive `pactl`, `hyprctl dispatch`
and `notify-send`, and `pioctl.dispatcher.Dispatcher` runs a whole command.
Failures raise a subclass of `pioctl.errors.PioctlError`.