from hidebars.config import HideBarsSettings
from hidebars.core.app import build_screen
from hidebars.core.geometry import FrameViewport
from hidebars.core.state import VisibilitySettings
from hidebars.core.store import SettingsStore
from hidebars.services.loop import ManualEventLoop


def test_store_save_load(tmp_path):
    store = SettingsStore(tmp_path / "data" / "bars.json")
    assert store.load("first") == {}

    store.save("first", {"hide_primary_bar": False, "show_on_appear": True})
    store.save("second", {"hide_on_appear": False})

    assert store.load("first") == {"hide_primary_bar": False, "show_on_appear": True}
    assert store.load("second") == {"hide_on_appear": False}
    assert store.load("unknown") == {}


def test_corrupt_store_loads_empty(tmp_path):
    path = tmp_path / "bars.json"
    path.write_text("{not json")
    store = SettingsStore(path)

    assert store.load("first") == {}

    store.save("first", {"hide_on_appear": True})
    assert store.load("first") == {"hide_on_appear": True}


def test_restore_skips_unknown_names_and_observers(tmp_path):
    store = SettingsStore(tmp_path / "bars.json")
    store.save("first", {"hide_secondary_bar": False, "bogus": True})
    settings = VisibilitySettings()
    changes = []
    settings.add_observer(lambda name, value: changes.append(name), owner=changes)

    store.restore("first", settings)

    assert settings.hide_secondary_bar is False
    assert changes == []


def test_bound_settings_persist_changes(tmp_path):
    store = SettingsStore(tmp_path / "bars.json")
    settings = VisibilitySettings()
    store.bind("first", settings)

    settings.set_flag("show_on_appear", False)

    assert store.load("first") == settings.flags()
    assert store.load("first")["show_on_appear"] is False


def make_screen(screen_id, store, **kwargs):
    return build_screen(
        screen_id,
        HideBarsSettings(persist=False),
        ManualEventLoop(),
        FrameViewport(width=400, height=800),
        store=store,
        **kwargs,
    )


def test_screen_restores_and_saves_through_store(tmp_path):
    store = SettingsStore(tmp_path / "bars.json")
    store.save("second", {"hide_on_appear": False})

    screen = make_screen("second", store)
    assert screen.settings.hide_on_appear is False

    screen.settings.set_flag("show_on_appear", False)
    assert store.load("second")["show_on_appear"] is False


def test_unpersisted_screen_ignores_store(tmp_path):
    store = SettingsStore(tmp_path / "bars.json")
    store.save("first", {"hide_on_appear": False})

    screen = make_screen("first", store, persist=False)
    assert screen.settings.hide_on_appear is True

    screen.settings.set_flag("show_on_appear", False)
    assert store.load("first") == {"hide_on_appear": False}
