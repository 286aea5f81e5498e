import os
import sys
from pathlib import Path

# Qt renders without a display server in the test run.
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

# Put the project root on sys.path so "import mkpw" works without installing.
ROOT = Path(__file__).resolve().parents[1]
if str(ROOT) not in sys.path:
    sys.path.insert(0, str(ROOT))

import pytest

from mkpw import Classifier, PasswordSpec, SeededRandomSource


@pytest.fixture()
def rng():
    """Deterministic random source, fresh for every test."""
    return SeededRandomSource(0)


@pytest.fixture()
def zero_minimum_spec():
    """
    Default pools with every minimum count set to 0.
    """
    spec = PasswordSpec()
    for _name, _index, classifier in spec.classifiers():
        classifier.minimum_count = 0
    return spec


@pytest.fixture()
def emoji_others():
    """
    Other classifiers made of multi-codepoint grapheme clusters.
    """
    return [
        Classifier.from_text("😀🚀🐱", 1),
        Classifier.from_text("花󠄁龍󠄀舟󠄁👍🏿", 2),
        Classifier.from_text("áパぎ", 3),
        Classifier.from_text("🏳️‍🌈❤️‍🔥👨‍👩‍👦", 4),
        Classifier.from_text("🇯🇵🇺🇸🇲🇦🇨🇦", 2),
    ]
