from __future__ import annotations

from collections.abc import Callable

from memo_client.core.errors import AuthFailure
from memo_client.core.observable import Observable
from memo_client.core.tasks import ImmediateRunner, TaskRunner
from memo_client.logging_setup import get_logger
from memo_client.settings import CODE_LENGTH, LOGIN_TRANSITION_MS

log = get_logger("session")

INCORRECT_PASSWORD = "Incorrect password"
AUTHENTICATION_ERROR = "Authentication error"


class SessionGate(Observable):
    """
    Экран блокировки: буфер кода (не больше CODE_LENGTH символов), проверка на
    сервере и переход в authenticated.

    authenticated является терминальным состоянием, logout нет. Неудачные попытки
    ничем не ограничены: после ошибки можно сразу вводить код снова.
    """

    def __init__(self, api, *, runner: TaskRunner | None = None,
                 transition_ms: int = LOGIN_TRANSITION_MS) -> None:
        super().__init__()
        self._api = api
        self._runner = runner or ImmediateRunner()
        self._transition_ms = int(transition_ms)
        self._on_authenticated: list[Callable[[], None]] = []

        self.authenticated = False
        self.error = ""
        self.code = ""
        self.transitioning = False
        self.verifying = False

    def on_authenticated(self, callback: Callable[[], None]) -> None:
        self._on_authenticated.append(callback)

    def input_code(self, text: str) -> None:
        code = (text or "")[:CODE_LENGTH]
        if code != self.code:
            self.code = code
            self._notify()
        if len(code) == CODE_LENGTH:
            self.submit_code(code)

    def submit_code(self, code: str) -> None:
        if self.authenticated or self.transitioning or self.verifying:
            log.debug("submit_code ignored: authenticated=%s transitioning=%s verifying=%s",
                      self.authenticated, self.transitioning, self.verifying)
            return
        if len(code) != CODE_LENGTH:
            return

        self.verifying = True
        self._notify()
        self._runner.submit(
            lambda: self._verify(code),
            self._on_verified,
            self._on_verify_failed,
        )

    def _verify(self, code: str) -> None:
        if not self._api.verify_password(code):
            raise AuthFailure("password rejected")

    def _on_verified(self, _result) -> None:
        self.verifying = False
        self.transitioning = True
        self._notify()
        self._runner.call_later(self._transition_ms, self._finish_login)

    def _finish_login(self) -> None:
        if self.authenticated:
            return
        self.transitioning = False
        self.authenticated = True
        self.error = ""
        log.info("Session unlocked")
        self._notify()
        for callback in list(self._on_authenticated):
            callback()

    def _on_verify_failed(self, exc: BaseException) -> None:
        self.verifying = False
        if isinstance(exc, AuthFailure):
            log.info("Login rejected")
            self.code = ""
            self.error = INCORRECT_PASSWORD
        else:
            log.error("Login request failed: %s", exc)
            self.error = AUTHENTICATION_ERROR
        self._notify()

    def remember_code(self, code: str) -> None:
        """Новый пароль из настроек становится кодом для следующего входа."""
        self.code = (code or "")[:CODE_LENGTH]
        self._notify()
