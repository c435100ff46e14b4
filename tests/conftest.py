# conftest.py - shared fixtures

import pytest

from lexicon_engine.core.lexicon import Lexicon
from lexicon_engine.utils.logger_utils import Log


@pytest.fixture
def lexicon():
    lex = Lexicon()
    lex.insert("apple", "a fruit")
    lex.insert("apply", "to request")
    lex.insert("app", "a program")
    return lex


@pytest.fixture
def log(tmp_path):
    return Log(path=str(tmp_path / "logs" / "test.log"))
