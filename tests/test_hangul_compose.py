from hangul_ime.domain.hangul_compose import NULL_INITIAL, compose_cv, compose_lvt, render_block

def test_compose_cv_basic():
    assert compose_cv("ㄱ", "ㅏ") == "가"
    assert compose_cv("ㄴ", "ㅣ") == "니"

def test_compose_cv_invalid():
    assert compose_cv("", "ㅏ") == ""
    assert compose_cv("ㄱ", "") == ""

def test_compose_lvt_with_final():
    assert compose_lvt("ㅎ", "ㅏ", "ㄴ") == "한"
    assert compose_lvt("ㄷ", "ㅏ", "ㄺ") == "닭"
    assert compose_lvt("ㄱ", "ㅏ", "ㄲ") == "갂"

def test_compose_lvt_rejects_invalid_slots():
    # ㄸ/ㅃ/ㅉ are never finals, compound finals are never initials
    assert compose_lvt("ㄱ", "ㅏ", "ㄸ") == ""
    assert compose_lvt("ㄳ", "ㅏ") == ""
    assert compose_lvt("ㄱ", "ㄱ") == ""
    assert compose_lvt(None, "ㅏ") == ""

def test_render_block_falls_back_to_jamo():
    assert render_block("ㄱ", None) == "ㄱ"
    assert render_block(None, "ㅏ") == "ㅏ"
    assert render_block(NULL_INITIAL, "ㅘ") == "와"
    assert render_block(None, None) == ""
