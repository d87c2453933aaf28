import json
import logging

import constants
import settings
from render.minimap_renderer import ViewportSpec
from ui.widgets.virtual_joystick import VirtualJoystick


def test_save_settings_persists_new_options(tmp_path, monkeypatch):
    cfg = tmp_path / "settings.json"
    monkeypatch.setattr(settings, "SETTINGS_FILE", cfg)
    settings.save_settings(minimap_size=200, show_legend=False)
    data = json.loads(cfg.read_text(encoding="utf-8"))
    assert data["minimap_size"] == 200
    assert data["show_legend"] is False


def test_save_settings_merges_existing_file(tmp_path, monkeypatch):
    cfg = tmp_path / "settings.json"
    cfg.write_text(json.dumps({"minimap_radius": 20}), encoding="utf-8")
    monkeypatch.setattr(settings, "SETTINGS_FILE", cfg)
    settings.save_settings(joystick_size=140)
    data = json.loads(cfg.read_text(encoding="utf-8"))
    assert data == {"minimap_radius": 20, "joystick_size": 140}


def test_remap_key_persists(tmp_path, monkeypatch):
    cfg = tmp_path / "settings.json"
    monkeypatch.setattr(settings, "SETTINGS_FILE", cfg)
    monkeypatch.setattr(settings, "KEYMAP", {})
    settings.remap_key("up", "z")
    data = json.loads(cfg.read_text(encoding="utf-8"))
    assert data["keymap"]["up"] == "z"
    assert settings.KEYMAP["up"] == "z"


def test_environment_overrides_and_validation(monkeypatch, caplog):
    monkeypatch.setenv("HUD_MINIMAP_SIZE", "220")
    assert settings._get_int("HUD_MINIMAP_SIZE", "minimap_size", 150) == 220
    monkeypatch.setenv("HUD_MINIMAP_SIZE", "huge")
    with caplog.at_level(logging.WARNING, logger="settings"):
        assert settings._get_int("HUD_MINIMAP_SIZE", "minimap_size", 150) == 150
    assert "invalid value" in caplog.text
    monkeypatch.setenv("HUD_MINIMAP_RADIUS", "0")
    assert settings._get_int("HUD_MINIMAP_RADIUS", "minimap_radius", 40) == 40
    monkeypatch.setenv("HUD_SHOW_LEGEND", "false")
    assert settings._get_bool("HUD_SHOW_LEGEND", "show_legend", True) is False


def test_minimap_size_too_small_for_edge_margin_is_rejected(monkeypatch, caplog):
    assert settings.MINIMAP_MIN_SIZE == 2 * constants.EDGE_MARGIN + 1
    monkeypatch.setenv("HUD_MINIMAP_SIZE", "16")
    with caplog.at_level(logging.WARNING, logger="settings"):
        size = settings._get_int(
            "HUD_MINIMAP_SIZE", "minimap_size", 150, minimum=settings.MINIMAP_MIN_SIZE
        )
    assert size == 150
    assert "below minimum" in caplog.text
    # The smallest accepted size still builds a usable viewport
    view = ViewportSpec(size=settings.MINIMAP_MIN_SIZE)
    assert view.margin < view.centre


def test_joystick_knob_must_fit_inside_base(monkeypatch, caplog):
    monkeypatch.setenv("HUD_JOYSTICK_SIZE", "80")
    monkeypatch.setenv("HUD_JOYSTICK_STICK_SIZE", "60")
    assert settings._joystick_sizes() == (80, 60)
    monkeypatch.setenv("HUD_JOYSTICK_STICK_SIZE", "80")
    with caplog.at_level(logging.WARNING, logger="settings"):
        base, stick = settings._joystick_sizes()
    assert (base, stick) == (120, 50)
    assert "not smaller than" in caplog.text
    VirtualJoystick((100, 100), lambda keys: None, size=base, stick_size=stick)
