from .qt_runner import ApiCallWorker, QtTaskRunner

__all__ = [
    "ApiCallWorker",
    "QtTaskRunner",
]
