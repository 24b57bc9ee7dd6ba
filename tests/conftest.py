import sys
import os

sys.path.insert(0, os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))

import pytest

from memo_client.core.app_state import MemoApp
from memo_client.core.errors import ApiStatusError, TransportFailure
from memo_client.core.models import Note
from memo_client.core.tasks import TaskRunner
from memo_client.services.upload import UploadResult


class FakeApi:
    """In-memory stand-in for the memo backend."""

    def __init__(self, password="1234", memos=None):
        self.password = password
        self.theme = None
        self.memos = {}
        self.next_id = 1
        self.calls = []
        self.fail = set()  # names of operations that raise TransportFailure
        for title, content in memos or []:
            self._insert(title, content)

    def _insert(self, title, content):
        note_id = self.next_id
        self.next_id += 1
        self.memos[note_id] = {"id": note_id, "title": title, "content": content}
        return self.memos[note_id]

    def _check(self, name):
        self.calls.append(name)
        if name in self.fail:
            raise TransportFailure(f"{name} failed")

    def verify_password(self, password):
        self._check("verify_password")
        return password == self.password

    def list_memos(self):
        self._check("list_memos")
        return [Note.from_payload(m) for m in self.memos.values()]

    def create_memo(self, title, content):
        self._check("create_memo")
        return self._insert(title, content)

    def update_memo(self, note_id, title, content):
        self._check("update_memo")
        if note_id not in self.memos:
            raise ApiStatusError("PUT", "/api/memos", 404)
        self.memos[note_id].update(title=title, content=content)
        return self.memos[note_id]

    def delete_memo(self, note_id):
        self._check("delete_memo")
        self.memos.pop(note_id, None)
        return {"success": True}

    def update_settings(self, theme, password=None):
        self._check("update_settings")
        self.theme = theme
        if password:
            self.password = password
        return {"success": True}


class FakeUploader:
    def __init__(self, url="http://img/up.png", error=None):
        self.url = url
        self.error = error
        self.paths = []

    def upload(self, path):
        self.paths.append(path)
        if self.error:
            return UploadResult(error=self.error)
        return UploadResult(url=self.url)


class DeferredRunner(TaskRunner):
    """Queues jobs until the test runs them; lets us see in-flight states."""

    def __init__(self):
        self.queue = []
        self.timers = []

    def submit(self, job, on_done, on_error):
        self.queue.append((job, on_done, on_error))

    def call_later(self, delay_ms, fn):
        self.timers.append((delay_ms, fn))

    def run_next(self):
        self.run_at(0)

    def run_at(self, index):
        job, on_done, on_error = self.queue.pop(index)
        try:
            result = job()
        except Exception as exc:
            on_error(exc)
            return
        on_done(result)

    def fire_timers(self):
        timers, self.timers = self.timers, []
        for _, fn in timers:
            fn()


@pytest.fixture
def api():
    return FakeApi(memos=[("Groceries", "milk\n![x](http://img/1.png)\neggs"),
                          ("Work", "Quarterly report")])


@pytest.fixture
def uploader():
    return FakeUploader()


@pytest.fixture
def app(api, uploader):
    return MemoApp(api, uploader)


@pytest.fixture
def unlocked(app):
    app.session.input_code("1234")
    assert app.session.authenticated
    return app


@pytest.fixture
def deferred():
    return DeferredRunner()


@pytest.fixture
def fake_api_cls():
    return FakeApi


@pytest.fixture
def fake_uploader_cls():
    return FakeUploader
