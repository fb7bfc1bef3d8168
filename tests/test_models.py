import json

import pytest

from pioctl.models import (
    AudioConfig,
    AudioSinksConfig,
    DesktopConfig,
    Mode,
    Monitor,
    MonitorConfig,
    MonitorsConfig,
    Profile,
    Size,
    Transformation,
    Workspace,
)


def _profile_dict():
    return {
        "name": "Desk",
        "monitors_config": {
            "delay_before_ms": 100,
            "disabled_to_enabled_delay_ms": None,
            "monitors": [
                {
                    "name": "DP-1",
                    "scale": 1.0,
                    "transformation": 0,
                    "resolution": {"width": 2560, "height": 1440},
                    "refresh_rate": 144.0,
                    "is_enabled": True,
                    "mirror_of_name": None,
                    "current_position": {"width": 0, "height": 0},
                },
                {
                    "name": "HDMI-A-1",
                    "scale": 1.5,
                    "transformation": 1,
                    "resolution": {"width": 1920, "height": 1080},
                    "refresh_rate": 60.0,
                    "is_enabled": False,
                    "mirror_of_name": "DP-1",
                    "current_position": {"width": 2560, "height": 0},
                },
            ],
        },
        "audio_sinks_config": {
            "delay_before_ms": None,
            "audio_sinks": [
                {"sink_name": "alsa_output.usb", "volume": 40, "default": True}
            ],
        },
        "desktop_config": {
            "delay_before_ms": 250,
            "workspaces": [
                {"index": "1", "monitor_name": "DP-1", "active": True, "focused": True},
                {"index": "2", "monitor_name": "HDMI-A-1", "active": False, "focused": False},
            ],
        },
    }


def test_profile_dict_round_trip():
    data = _profile_dict()
    assert Profile.from_dict(data).to_dict() == data


def test_profile_json_round_trip():
    profile = Profile.from_dict(_profile_dict())
    assert Profile.from_json(profile.to_json()) == profile


def test_to_json_is_indented_and_ordered():
    text = Profile.from_dict(_profile_dict()).to_json()
    assert text.startswith('{\n  "name": "Desk",\n  "monitors_config": {')
    assert list(json.loads(text)) == [
        "name",
        "monitors_config",
        "audio_sinks_config",
        "desktop_config",
    ]


def test_to_json_keeps_non_ascii():
    data = _profile_dict()
    data["name"] = "Büro"
    assert '"Büro"' in Profile.from_dict(data).to_json()


def test_unknown_fields_are_ignored():
    data = _profile_dict()
    data["extra"] = 1
    profile = Profile.from_dict(data)
    assert "extra" not in profile.to_dict()
    assert profile.name == "Desk"


def test_missing_optional_delays_become_none():
    data = _profile_dict()
    del data["monitors_config"]["delay_before_ms"]
    del data["monitors_config"]["disabled_to_enabled_delay_ms"]
    config = MonitorsConfig.from_dict(data["monitors_config"])
    assert config.delay_before_ms is None
    assert config.disabled_to_enabled_delay_ms is None
    assert len(config.monitors) == 2


def test_missing_required_field_raises():
    data = _profile_dict()
    del data["desktop_config"]
    with pytest.raises(ValueError, match="desktop_config"):
        Profile.from_dict(data)


def test_invalid_json_raises_value_error():
    with pytest.raises(ValueError):
        Profile.from_json("{not json")


def test_non_object_raises_value_error():
    with pytest.raises(ValueError):
        Profile.from_json("[1, 2]")


def test_integer_scale_is_read_as_float():
    data = _profile_dict()["monitors_config"]["monitors"][0]
    data["scale"] = 2
    config = MonitorConfig.from_dict(data)
    assert config.scale == 2.0
    assert isinstance(config.to_dict()["scale"], float)


def test_monitor_config_bad_types():
    data = _profile_dict()["monitors_config"]["monitors"][0]
    data["is_enabled"] = "yes"
    with pytest.raises(ValueError):
        MonitorConfig.from_dict(data)


def test_monitor_config_transformation_out_of_range():
    data = _profile_dict()["monitors_config"]["monitors"][0]
    data["transformation"] = 256
    with pytest.raises(ValueError):
        MonitorConfig.from_dict(data)


def test_audio_config_default_flag_defaults_false():
    config = AudioConfig.from_dict({"sink_name": "hdmi", "volume": 80})
    assert config.default is False
    assert config.to_dict() == {"sink_name": "hdmi", "volume": 80, "default": False}


@pytest.mark.parametrize("volume", [-1, 256, 1.5, True, "50"])
def test_audio_config_rejects_bad_volume(volume):
    with pytest.raises(ValueError):
        AudioConfig.from_dict({"sink_name": "hdmi", "volume": volume})


def test_audio_config_volume_bounds_accepted():
    assert AudioConfig.from_dict({"sink_name": "a", "volume": 255}).volume == 255
    assert AudioConfig.from_dict({"sink_name": "a", "volume": 0}).volume == 0


def test_audio_sinks_config_requires_list():
    with pytest.raises(ValueError):
        AudioSinksConfig.from_dict({"delay_before_ms": None, "audio_sinks": {}})


def test_workspace_defaults():
    workspace = Workspace.from_dict({"index": "3", "monitor_name": "DP-2"})
    assert (workspace.active, workspace.focused) == (False, False)


def test_workspace_null_flag_rejected():
    with pytest.raises(ValueError):
        Workspace.from_dict({"index": "3", "monitor_name": "DP-2", "active": None})


def test_desktop_config_round_trip():
    data = _profile_dict()["desktop_config"]
    assert DesktopConfig.from_dict(data).to_dict() == data


def test_size_round_trip_and_errors():
    assert Size.from_dict({"width": 800, "height": 600}).to_dict() == {
        "width": 800,
        "height": 600,
    }
    with pytest.raises(ValueError):
        Size.from_dict({"width": -5, "height": 600})
    with pytest.raises(ValueError):
        Size.from_dict({"width": 800})


def test_mode_to_dict():
    mode = Mode(resolution=Size(1920, 1080), refresh_rate=[144.0, 60.0])
    assert mode.to_dict() == {
        "resolution": {"width": 1920, "height": 1080},
        "refresh_rate": [144.0, 60.0],
    }


def test_monitor_to_dict_field_order():
    monitor = Monitor(
        id=0,
        name="DP-1",
        model="Model",
        description="Desc",
        scale=1.0,
        transformation=0,
        resolution=Size(2560, 1440),
        refresh_rate=143.9,
        is_enabled=True,
        mirror_of_name=None,
        current_position=Size(0, 0),
        modes=[Mode(Size(2560, 1440), [143.9])],
    )
    data = monitor.to_dict()
    assert list(data) == [
        "id",
        "name",
        "model",
        "description",
        "scale",
        "transformation",
        "resolution",
        "refresh_rate",
        "is_enabled",
        "mirror_of_name",
        "current_position",
        "modes",
    ]
    assert data["mirror_of_name"] is None
    assert data["modes"][0]["refresh_rate"] == [143.9]


@pytest.mark.parametrize("code", range(8))
def test_transformation_code_round_trip(code):
    assert Transformation.from_code(code).code() == code


def test_transformation_known_values():
    assert Transformation.from_code(0) is Transformation.NORMAL
    assert Transformation.from_code(7) is Transformation.FLIP_ROTATE_270


def test_transformation_unknown_code():
    assert Transformation.from_code(8) is None