import dataclasses
import json

import pytest

from services.skill_taxonomy import (
    SKILL_TAXONOMY,
    STOP_WORDS,
    build_vocabulary,
    get_vocabulary,
    load_taxonomy_file,
    merge_taxonomies,
    phrase_tokens,
)


def test_phrase_tokens_keeps_compound_spellings():
    assert phrase_tokens("Node.js, C++ and CI/CD.") == ["node.js", "c++", "and", "ci", "cd"]


def test_phrase_tokens_leading_dot():
    assert phrase_tokens(".NET Core") == [".net", "core"]


def test_lookup_synonyms():
    vocab = build_vocabulary()
    assert vocab.lookup("js") == "javascript"
    assert vocab.lookup("es6") == "javascript"
    assert vocab.lookup("k8s") == "kubernetes"
    assert vocab.lookup("ci cd") == "ci/cd"
    assert vocab.lookup("scikit learn") == "scikit-learn"
    assert vocab.lookup("amazon web services") == "aws"


def test_lookup_canonical_name_is_a_variant():
    vocab = build_vocabulary()
    assert vocab.lookup("python") == "python"
    assert vocab.lookup("machine learning") == "machine learning"


def test_lookup_unknown():
    assert build_vocabulary().lookup("underwater basket weaving") is None


def test_no_single_letter_or_bare_go_skills():
    vocab = build_vocabulary()
    assert vocab.lookup("c") is None
    assert vocab.lookup("r") is None
    assert vocab.lookup("go") is None
    assert vocab.lookup("golang") == "golang"


def test_compound_tokens():
    vocab = build_vocabulary()
    assert {"c++", "c#", "node.js", ".net"} <= vocab.compound_tokens


def test_canonical_names_come_from_taxonomy():
    vocab = build_vocabulary()
    assert vocab.canonical == frozenset(SKILL_TAXONOMY)


def test_max_ngram_is_capped():
    vocab = build_vocabulary()
    assert vocab.max_ngram == 3


def test_stop_words():
    assert {"the", "and", "with", "experience", "years", "looking"} <= STOP_WORDS
    assert "computer" not in STOP_WORDS
    assert "system" not in STOP_WORDS


def test_vocabulary_is_read_only():
    vocab = build_vocabulary()
    with pytest.raises(TypeError):
        vocab.variants["js"] = "java"
    with pytest.raises(dataclasses.FrozenInstanceError):
        vocab.max_ngram = 5


def test_get_vocabulary_is_cached():
    assert get_vocabulary() is get_vocabulary()


def test_conflicting_variant_keeps_first(caplog):
    vocab = build_vocabulary({"javascript": ("js",), "jscript": ("js",)})
    assert vocab.lookup("js") == "javascript"
    assert "maps to both" in caplog.text


def test_merge_taxonomies():
    merged = merge_taxonomies(SKILL_TAXONOMY, {"Python": ["pythonic"], "dbt": ["data build tool"]})
    vocab = build_vocabulary(merged)
    assert vocab.lookup("pythonic") == "python"
    assert vocab.lookup("py") == "python"
    assert vocab.lookup("data build tool") == "dbt"
    assert "dbt" not in SKILL_TAXONOMY


def test_load_taxonomy_file(tmp_path):
    path = tmp_path / "skills.json"
    path.write_text(json.dumps({"dbt": ["data build tool"], "looker": []}), encoding="utf-8")
    assert load_taxonomy_file(path) == {"dbt": ["data build tool"], "looker": []}


def test_load_taxonomy_file_invalid_json(tmp_path):
    path = tmp_path / "skills.json"
    path.write_text("{not json", encoding="utf-8")
    with pytest.raises(ValueError):
        load_taxonomy_file(path)


def test_load_taxonomy_file_wrong_shape(tmp_path):
    path = tmp_path / "skills.json"
    path.write_text(json.dumps(["python"]), encoding="utf-8")
    with pytest.raises(ValueError, match="JSON object"):
        load_taxonomy_file(path)

    path.write_text(json.dumps({"python": "py"}), encoding="utf-8")
    with pytest.raises(ValueError, match="list of strings"):
        load_taxonomy_file(path)


def test_load_taxonomy_file_missing(tmp_path):
    with pytest.raises(ValueError):
        load_taxonomy_file(tmp_path / "missing.json")
