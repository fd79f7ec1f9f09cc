# tests/test_input_controller.py
from pathlib import Path

import pytest

from hangul_ime.controllers import InputController
from hangul_ime.services.commit_sink import TextCommitSink
from hangul_ime.services.settings_store import SettingsStore


@pytest.fixture
def controller():
    return InputController()


@pytest.mark.parametrize("keys,expected", [
    ("hangug", "한국"),
    ("seoul", "서울"),
    ("hangeul", "한글"),
    ("gwa", "과"),
    ("annyeoq", "안녕"),
    ("yeoboseyo", "여보세요"),
    ("Gaci", "까치"),
    ("gga", "까"),
    ("dalg", "닭"),
    ("dalga", "달가"),
    ("hani", "하니"),
    ("oa", "오아"),
])
def test_transliterate_words(controller, keys, expected):
    assert controller.transliterate(keys) == expected


def test_passthrough_flushes_and_is_kept(controller):
    assert controller.transliterate("hangug mal!") == "한국 말!"


def test_out_of_alphabet_key_discards_open_block(controller):
    assert controller.transliterate("ga1na") == "나"


def test_control_keys(controller):
    assert controller.transliterate("ga'a") == "가ㅏ"

    c = InputController()
    assert c.transliterate("han`") == ""


def test_text_includes_preview(controller):
    for key in "hang":
        controller.press(key)
    assert controller.sink.text == "한"
    assert controller.text == "한ㄱ"

    step = controller.press("u")
    assert step.committed is None
    assert step.preview == "구"
    assert controller.text == "한구"


def test_backspace_edits_open_block_only(controller):
    for key in "han":
        controller.press(key)
    assert controller.backspace() is True
    assert controller.text == "하"

    controller.press(" ")
    assert controller.backspace() is False
    assert controller.text == "하 "


def test_commit_listener_sees_each_block():
    seen = []
    c = InputController(sink=TextCommitSink(on_commit=seen.append))
    c.transliterate("hangug mal")
    assert seen == ["한", "국", "말"]
    assert c.sink.parts == ["한", "국", " ", "말"]


def test_compound_flag(controller):
    c = InputController(compound_double_chars=True)
    assert c.transliterate("oa") == "와"
    assert c.automaton.compound_double_chars is True
    assert controller.automaton.compound_double_chars is False


def test_from_settings(tmp_path: Path):
    keymap = tmp_path / "keymap.yaml"
    keymap.write_text('keys:\n  "x": "ㄱ"\n  "k": "ㅏ"\n', encoding="utf-8")
    store = SettingsStore(settings_path=str(tmp_path / "settings.yaml"))
    store.save({
        "compound_double_chars": True,
        "passthrough": "-",
        "keymap_path": str(keymap),
    })

    c = InputController.from_settings(store)
    assert c.automaton.compound_double_chars is True
    assert c.transliterate("xk-xk xk") == "가-가"

    c = InputController.from_settings(store, compound_double_chars=False)
    assert c.automaton.compound_double_chars is False
