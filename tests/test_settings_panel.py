import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from memo_client.core.settings_panel import SettingsPanel
from memo_client.settings import DEFAULT_THEME


def test_apply_with_password(fake_api_cls):
    api = fake_api_cls(password="1234")
    panel = SettingsPanel(api)
    applied = []
    panel.on_applied(applied.append)

    panel.open()
    panel.choose_theme("light-pink")
    panel.set_password_draft("5678")
    panel.apply()

    assert api.password == "5678"
    assert api.theme == "light-pink"
    assert not panel.is_open
    assert panel.password_draft == ""
    assert applied == ["5678"]


def test_blank_password_not_sent(fake_api_cls):
    api = fake_api_cls(password="1234")
    panel = SettingsPanel(api)
    applied = []
    panel.on_applied(applied.append)

    panel.open()
    panel.apply()

    assert api.password == "1234"
    assert applied == [None]


def test_apply_failure_keeps_panel_open(fake_api_cls):
    api = fake_api_cls()
    api.fail.add("update_settings")
    panel = SettingsPanel(api)
    panel.open()
    panel.set_password_draft("5678")
    panel.apply()

    assert panel.is_open
    assert panel.password_draft == "5678"
    assert not panel.applying


def test_close_clears_draft(fake_api_cls):
    panel = SettingsPanel(fake_api_cls())
    panel.toggle()
    panel.set_password_draft("99")
    panel.toggle()
    assert not panel.is_open
    assert panel.password_draft == ""


def test_unknown_theme_normalized(fake_api_cls):
    panel = SettingsPanel(fake_api_cls(), theme="pink")
    assert panel.theme == DEFAULT_THEME
    panel.choose_theme("LIGHT-PINK")
    assert panel.theme == "light-pink"


def test_cancelled_theme_is_never_applied(fake_api_cls):
    api = fake_api_cls()
    panel = SettingsPanel(api, theme="deep-blue")
    applied = []
    panel.on_applied(applied.append)

    panel.open()
    panel.choose_theme("light-pink")
    assert panel.theme == "light-pink"
    panel.close()

    assert applied == []
    assert panel.applied_theme == "deep-blue"
    assert api.calls == []


def test_failed_apply_keeps_previous_theme(fake_api_cls):
    api = fake_api_cls()
    api.fail.add("update_settings")
    panel = SettingsPanel(api, theme="deep-blue")
    applied = []
    panel.on_applied(applied.append)

    panel.open()
    panel.choose_theme("light-pink")
    panel.apply()

    assert applied == []
    assert panel.applied_theme == "deep-blue"


def test_applied_theme_is_the_one_sent(fake_api_cls, deferred):
    api = fake_api_cls()
    panel = SettingsPanel(api, runner=deferred, theme="deep-blue")
    panel.open()
    panel.choose_theme("light-pink")
    panel.apply()
    panel.choose_theme("deep-blue")
    deferred.run_next()

    assert api.theme == "light-pink"
    assert panel.applied_theme == "light-pink"
