from __future__ import annotations

from contextlib import contextmanager


@contextmanager
def blocked_signals(*widgets):
    """
    Программно выставляем текст/выбор в виджетах без обратных сигналов
    (иначе render() снова попадёт в состояние).
    """
    previous = [w.blockSignals(True) for w in widgets]
    try:
        yield
    finally:
        for w, was_blocked in zip(widgets, previous):
            w.blockSignals(was_blocked)


def set_text_if_changed(widget, text: str) -> None:
    """setText/setPlainText only when needed, so the cursor stays where it is."""
    current = widget.toPlainText() if hasattr(widget, "toPlainText") else widget.text()
    if current == text:
        return
    with blocked_signals(widget):
        if hasattr(widget, "setPlainText"):
            widget.setPlainText(text)
        else:
            widget.setText(text)
