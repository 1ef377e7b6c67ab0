import io

import pytest

from ptrash.services.confirm import ScriptedConfirm, is_affirmative, prompt_confirm


@pytest.mark.parametrize("answer", ["y", "Y", "y\n", "  Y  \n"])
def test_single_y_is_yes(answer: str) -> None:
    assert is_affirmative(answer) is True


@pytest.mark.parametrize("answer", ["", "\n", "n", "N", "yes", "YES", "yy", "1"])
def test_anything_else_is_no(answer: str) -> None:
    assert is_affirmative(answer) is False


def test_prompt_writes_prompt_and_reads_line() -> None:
    stdout = io.StringIO()
    assert prompt_confirm("Go? [Y/N]: ", stdin=io.StringIO("y\n"), stdout=stdout) is True
    assert stdout.getvalue() == "Go? [Y/N]: "


def test_prompt_end_of_input_is_no() -> None:
    assert prompt_confirm("Go? ", stdin=io.StringIO(""), stdout=io.StringIO()) is False


def test_scripted_confirm_replays_and_records() -> None:
    confirm = ScriptedConfirm(["Y", False])

    assert confirm("first") is True
    assert confirm("second") is False
    assert confirm("third") is False
    assert confirm.prompts == ["first", "second", "third"]
