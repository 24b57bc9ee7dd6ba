import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

from memo_client.core.app_state import MemoApp, ViewMode
from memo_client.core.editor import EditorMode
from memo_client.services.content_renderer import render_note_body


def test_locked_until_authenticated(app, api):
    assert app.view_mode is ViewMode.LOCKED
    app.session.input_code("0000")
    assert app.view_mode is ViewMode.LOCKED
    assert "list_memos" not in api.calls


def test_login_triggers_exactly_one_refresh(app, api):
    app.session.input_code("1234")
    assert app.view_mode is ViewMode.BROWSING
    assert api.calls.count("list_memos") == 1
    assert [n.title for n in app.collection.notes] == ["Groceries", "Work"]


def test_create_then_refresh_round_trip(unlocked, api):
    before = {n.id for n in unlocked.collection.notes}
    unlocked.new_note()
    assert unlocked.view_mode is ViewMode.EDITING
    unlocked.editor.set_title("T")
    unlocked.editor.set_content("C")
    unlocked.editor.save()

    matches = [n for n in unlocked.collection.notes if (n.title, n.content) == ("T", "C")]
    assert len(matches) == 1
    assert matches[0].id is not None
    assert matches[0].id not in before
    assert unlocked.collection.selected is None
    assert unlocked.view_mode is ViewMode.BROWSING


def test_edit_selected_then_save_clears_selection(unlocked, api):
    note = unlocked.collection.notes[1]
    unlocked.select_note(note)
    assert unlocked.edit_selected()
    assert unlocked.editor.mode is EditorMode.MODIFYING
    unlocked.editor.set_content("Annual report")
    unlocked.editor.save()

    assert api.memos[note.id]["content"] == "Annual report"
    assert unlocked.collection.selected is None


def test_select_exits_editing(unlocked):
    unlocked.new_note()
    unlocked.select_note(unlocked.collection.notes[0])
    assert unlocked.editor.mode is EditorMode.IDLE
    assert unlocked.view_mode is ViewMode.BROWSING


def test_new_note_clears_selection(unlocked):
    unlocked.select_note(unlocked.collection.notes[0])
    unlocked.new_note()
    assert unlocked.collection.selected is None
    assert unlocked.editor.title == ""


def test_delete_selected_then_refresh(unlocked, api):
    target = unlocked.collection.notes[0]
    unlocked.select_note(target)
    assert unlocked.delete_selected(confirm=lambda: True)

    ids = [n.id for n in unlocked.collection.notes]
    assert target.id not in ids
    assert len(ids) == 1
    assert unlocked.collection.selected is None


def test_delete_without_selection(unlocked, api):
    assert unlocked.delete_selected(confirm=lambda: True) is False
    assert "delete_memo" not in api.calls


def test_settings_view_wins(unlocked):
    unlocked.new_note()
    unlocked.toggle_settings()
    assert unlocked.view_mode is ViewMode.SETTINGS
    unlocked.toggle_settings()
    assert unlocked.view_mode is ViewMode.EDITING


def test_empty_password_keeps_old_code(fake_api_cls):
    api = fake_api_cls(password="1234")
    first = MemoApp(api)
    first.session.input_code("1234")
    first.settings.open()
    first.settings.choose_theme("light-pink")
    first.settings.apply()

    second = MemoApp(api)
    second.session.input_code("1234")
    assert second.session.authenticated


def test_new_password_remembered(fake_api_cls):
    api = fake_api_cls(password="1234")
    app = MemoApp(api)
    app.session.input_code("1234")
    app.settings.set_password_draft("4321")
    app.settings.apply()

    assert app.session.code == "4321"
    again = MemoApp(api)
    again.session.input_code("4321")
    assert again.session.authenticated


def test_groceries_scenario(unlocked):
    note = unlocked.collection.find(1)
    body = render_note_body(note.content)
    assert body.count("<p>") == 2
    assert body.count("<img") == 1
    assert body.index("<p>milk</p>") < body.index('src="http://img/1.png"') < body.index("<p>eggs</p>")
    assert unlocked.collection.visible()[0].title == "Groceries"


def test_search_filters_visible(unlocked):
    unlocked.collection.set_query("QUARTERLY")
    assert [n.title for n in unlocked.collection.visible()] == ["Work"]
    unlocked.collection.set_query("")
    assert len(unlocked.collection.visible()) == 2


def test_notifications_forwarded(app):
    seen = []
    app.subscribe(lambda: seen.append(app.view_mode))
    app.session.input_code("1234")
    assert seen[-1] is ViewMode.BROWSING
