from mkpw import Classifier, PasswordSpec, candidates

"""
TEST: mkpw/pool.py

Checks the order of the merged pool, the whitespace switch and the
similar-character filter.
"""


def _small_spec(**kwargs):
    return PasswordSpec(
        uppercase=Classifier(["A", "O"], 1),
        lowercase=Classifier(["a", "i", "l", "o"], 1),
        number=Classifier(["0", "1", "2"], 1),
        symbol=Classifier(["!"], 1),
        **kwargs,
    )


def test_merge_order():
    spec = _small_spec(others=[Classifier(["x"]), Classifier(["y", "z"])])
    assert candidates(spec) == [
        "a", "i", "l", "o",
        "A", "O",
        "0", "1", "2",
        "!",
        "x", "y", "z",
    ]


def test_default_pool_size():
    assert len(candidates(PasswordSpec())) == 26 + 26 + 10 + 32


def test_include_whitespace_appends_one_space():
    pool = candidates(_small_spec(include_whitespace=True))
    assert pool[-1] == " "
    assert pool.count(" ") == 1


def test_exclude_similar():
    pool = candidates(_small_spec(exclude_similar=True))
    assert pool == ["a", "A", "2", "!"]


def test_exclude_similar_also_applies_to_others():
    spec = PasswordSpec(exclude_similar=True, others=[Classifier(["o", "O", "o\u0308"])])
    assert "o\u0308" in candidates(spec)
    assert "o" not in candidates(spec)


def test_exclude_similar_ignores_multi_character_clusters():
    # "o" followed by a combining diaeresis is one cluster, not "o".
    spec = PasswordSpec(exclude_similar=True, others=[Classifier.from_text("o\u0308")])
    assert "o\u0308" in candidates(spec)


def test_duplicates_are_kept():
    spec = PasswordSpec(others=[Classifier(["a"])])
    assert candidates(spec).count("a") == 2


def test_empty_pool():
    spec = PasswordSpec(
        uppercase=Classifier(),
        lowercase=Classifier(),
        number=Classifier(),
        symbol=Classifier(),
    )
    assert candidates(spec) == []
