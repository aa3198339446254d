import pytest

from robodefense.audio import AudioSettings
from robodefense.settings import (
    COMMON_RESOLUTIONS,
    DEFAULT_RESOLUTION,
    GameSettings,
    SettingsStore,
    parse_settings,
    serialize_settings,
)


def _custom() -> GameSettings:
    return GameSettings(
        audio=AudioSettings(
            master_volume=55.5,
            music_volume=20.0,
            sfx_volume=75.0,
            muted=True,
            music_enabled=False,
            sfx_enabled=True,
        ),
        fullscreen=True,
        vsync=False,
        resolution_index=3,
        key_bindings=[1, 2, 3, 4, 5, 6],
        game_speed=1.5,
        show_tutorial=False,
        auto_save=False,
    )


def test_round_trip():
    settings = _custom()
    assert parse_settings(serialize_settings(settings)) == settings


def test_serialized_sections_in_order():
    text = serialize_settings(GameSettings())
    positions = [text.index(s) for s in ("[Audio]", "[Graphics]", "[Controls]", "[Gameplay]")]
    assert positions == sorted(positions)
    assert "muted=false" in text
    assert "vsync=true" in text


def test_empty_text_gives_defaults():
    assert parse_settings("") == GameSettings()


def test_comments_and_unknown_keys_ignored():
    text = "# comment\n[Audio]\n  muted=true  \nunknown=3\n[Other]\nx=1\nnoequals\n"
    parsed = parse_settings(text)
    assert parsed.audio.muted is True
    assert parsed.audio.master_volume == GameSettings().audio.master_volume


def test_key_binding_out_of_range_ignored():
    parsed = parse_settings("[Controls]\nkey99=5\n")
    assert parsed.key_bindings == GameSettings().key_bindings


def test_key_binding_set():
    parsed = parse_settings("[Controls]\nkey0=42\n")
    assert parsed.key_bindings[0] == 42
    assert parsed.key_bindings[1:] == GameSettings().key_bindings[1:]


def test_malformed_number_raises():
    with pytest.raises(ValueError):
        parse_settings("[Audio]\nmasterVolume=loud\n")


def test_supported_resolutions_filtered_and_sorted():
    store = SettingsStore(display_modes=[(640, 480), (2560, 1440), (1920, 1080)])
    resolutions = store.supported_resolutions()
    assert (640, 480) not in resolutions
    assert (2560, 1440) in resolutions
    assert resolutions.count((1920, 1080)) == 1
    assert all(r in resolutions for r in COMMON_RESOLUTIONS)
    areas = [w * h for w, h in resolutions]
    assert areas == sorted(areas)


def test_unknown_resolution_index_is_zero():
    store = SettingsStore()
    assert store.resolution_index((123, 456)) == 0


def test_set_resolution(tmp_path):
    store = SettingsStore(tmp_path / "s.ini")
    store.set_resolution((1920, 1080))
    assert store.resolution() == (1920, 1080)
    assert store.changed is True


def test_default_resolution():
    store = SettingsStore()
    assert store.resolution() == DEFAULT_RESOLUTION


def test_invalid_index_falls_back_to_default():
    store = SettingsStore()
    store.settings.resolution_index = 999
    assert store.resolution() == DEFAULT_RESOLUTION


def test_load_missing_file_gives_defaults(tmp_path):
    store = SettingsStore(tmp_path / "absent.ini")
    loaded = store.load()
    assert loaded.resolution_index == store.resolution_index(DEFAULT_RESOLUTION)
    assert store.resolution() == DEFAULT_RESOLUTION


def test_save_then_load(tmp_path):
    path = tmp_path / "s.ini"
    store = SettingsStore(path)
    store.settings = _custom()
    store.save()
    other = SettingsStore(path)
    assert other.load() == _custom()


def test_volume_clamping():
    store = SettingsStore()
    store.set_master_volume(150)
    store.set_music_volume(-5)
    store.set_sfx_volume(40)
    assert store.settings.audio.master_volume == 100.0
    assert store.settings.audio.music_volume == 0.0
    assert store.settings.audio.sfx_volume == 40.0
    assert store.changed is True


def test_reset():
    store = SettingsStore()
    store.settings = _custom()
    store.reset()
    assert store.settings.fullscreen is False
    assert store.resolution() == DEFAULT_RESOLUTION