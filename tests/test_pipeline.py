# tests/test_pipeline.py
import pytest

from trie_spellcheck.context.pipeline import MISSPELLED_STYLE, CheckedWord, CheckPipeline
from trie_spellcheck.core.dictionary import Dictionary


@pytest.fixture
def pipeline():
    return CheckPipeline(Dictionary.from_words(["the", "cat", "sat", "on", "mat", "ten"]))


def test_process_classifies_tokens(pipeline):
    words = pipeline.process("The cat sat 123 on teh mat!")
    assert words[0] == CheckedWord("The", True)
    assert CheckedWord("123", True) in words  # no letters, exempt
    assert CheckedWord("teh", False) in words
    assert words[-1] == CheckedWord("mat!", True)
    assert pipeline.misspelled() == ["teh"]


def test_misspelled_is_distinct_in_order(pipeline):
    pipeline.process("teh cta teh mat cta")
    assert pipeline.misspelled() == ["teh", "cta"]


def test_process_file(pipeline, tmp_path):
    path = tmp_path / "input.txt"
    path.write_text("the cat\nsatt\n", encoding="utf-8")
    words = pipeline.process_file(path)
    assert [w.token for w in words] == ["the", "cat", "satt"]
    assert pipeline.misspelled() == ["satt"]


def test_process_missing_file_raises(pipeline, tmp_path):
    with pytest.raises(OSError):
        pipeline.process_file(tmp_path / "missing.txt")


def test_render_highlights_misspelled(pipeline):
    pipeline.process("The cat sat on teh mat")
    text = pipeline.render()
    assert text.plain == "The cat sat on teh mat"
    start = text.plain.index("teh")
    assert [(s.start, s.end, s.style) for s in text.spans] == [(start, start + 3, MISSPELLED_STYLE)]


def test_correct_asks_once_per_token(pipeline):
    pipeline.process("teh cat teh xyzzy")
    asked = []

    def chooser(token, suggestions):
        asked.append((token, suggestions))
        return suggestions[0] if suggestions else None

    replacements = pipeline.correct(chooser)
    assert [t for t, _ in asked] == ["teh", "xyzzy"]
    assert asked[0][1] == pipeline.dictionary.suggest("teh")
    assert asked[1][1] == []
    assert replacements == {"teh": "ten"}
    assert pipeline.corrected_text(replacements) == "ten cat ten xyzzy"


def test_save_joins_with_single_spaces(pipeline, tmp_path):
    pipeline.process(["thw  cat\n", "sst\n"])
    out = tmp_path / "out.txt"
    pipeline.save(out, {"thw": "the"})
    assert out.read_text(encoding="utf-8") == "the cat sst"
