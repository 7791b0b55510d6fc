from __future__ import annotations


class Unique64Error(RuntimeError):
    code: str
    explanation: str

    def __init__(self, message: str, code: str):
        super(RuntimeError, self).__init__(f"{code}: {message}")
        self.code = code
        self.explanation = message
