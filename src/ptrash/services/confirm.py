# Filename: confirm.py
# Author: Rich Lewis @RichLewis007
# Description: Yes/no confirmation sources. Provides the interactive console prompt and a
#              scripted replacement so trash and clear operations can run unattended.

from __future__ import annotations

import re
import sys
from collections.abc import Callable, Iterable
from typing import TextIO

Confirm = Callable[[str], bool]

_YES = re.compile(r"[Yy]")


def is_affirmative(answer: str) -> bool:
    # Only a single ``y`` or ``Y`` counts as yes.
    return _YES.fullmatch(answer.strip()) is not None


def prompt_confirm(
    prompt: str,
    *,
    stdin: TextIO | None = None,
    stdout: TextIO | None = None,
) -> bool:
    """Show ``prompt`` and read one line of input.

    End of input is treated as a refusal.
    """
    stdin = stdin or sys.stdin
    stdout = stdout or sys.stdout
    stdout.write(prompt)
    stdout.flush()
    answer = stdin.readline()
    return is_affirmative(answer)


class ScriptedConfirm:
    # Replays prepared answers and records the prompts that were shown.

    def __init__(self, answers: Iterable[str | bool]) -> None:
        self._answers = list(answers)
        self.prompts: list[str] = []

    def __call__(self, prompt: str) -> bool:
        self.prompts.append(prompt)
        if not self._answers:
            return False
        answer = self._answers.pop(0)
        if isinstance(answer, bool):
            return answer
        return is_affirmative(answer)


__all__ = ["Confirm", "ScriptedConfirm", "is_affirmative", "prompt_confirm"]
