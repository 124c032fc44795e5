"""
Behavioral tests for the documented query scenarios.

Bridge word answers on tiny corpora and bridge-augmented text generation
on the fox/alpha corpus, checked as a user would see them.
"""

import random

import pytest

from wordgraph import Session, WordGraphConfig
from wordgraph.constants import MSG_NO_WORDS_IN_INPUT

from tests.fixtures import FOX_CORPUS


class TestBridgeScenarios:
    """Bridge word queries on small corpora."""

    def test_both_words_missing(self):
        session = Session.from_text("a b c")
        assert session.query_bridge_words("d", "e") == 'No "d" or "e" in the graph!'

    def test_second_word_missing(self):
        session = Session.from_text("a b c")
        assert session.query_bridge_words("c", "e") == 'No "c" or "e" in the graph!'

    def test_no_bridge(self):
        session = Session.from_text("a b c")
        assert session.query_bridge_words("b", "a") == 'No bridge words from "b" to "a"!'

    def test_single_bridge(self):
        session = Session.from_text("a b c")
        assert session.query_bridge_words("a", "c") == 'The bridge words from "a" to "c" is: "b".'

    def test_several_bridges_from_word_to_itself(self):
        session = Session.from_text("a b d b c b e b")
        assert session.query_bridge_words("b", "b") == (
            'The bridge words from "b" to "b" are: "c", "d" and "e".'
        )

    def test_two_bridges(self):
        session = Session.from_text(FOX_CORPUS)
        assert session.query_bridge_words("fox", "over") == (
            'The bridge words from "fox" to "over" are: "jumps" and "leaps".'
        )

    def test_path_through_bridges(self):
        session = Session.from_text("a b d b c b e b")
        assert session.calc_shortest_path("a", "e") == (
            "从 a 到 e 的所有最短路径:\n"
            "a -> b -> e (距离: 2)"
        )


class TestGenerateScenarios:
    """Bridge-augmented text on the fox/alpha corpus."""

    @pytest.fixture
    def session(self):
        return Session.from_text(FOX_CORPUS, config=WordGraphConfig(random_seed=99))

    @pytest.mark.parametrize("text", ["", "你好", "  ,.;  "])
    def test_no_words(self, session, text):
        assert session.generate_new_text(text) == MSG_NO_WORDS_IN_INPUT

    def test_nothing_to_insert(self, session):
        text = "quick fox jumps over lazy dog"
        assert session.generate_new_text(text) == text

    def test_single_bridge_inserted(self, session):
        assert session.generate_new_text("quick jumps over lazy dog") == (
            "quick fox jumps over lazy dog"
        )

    def test_case_preserved(self, session):
        assert session.generate_new_text("qUiCk JuMps ovEr lAZy dOg") == (
            "qUiCk fox JuMps ovEr lAZy dOg"
        )

    def test_non_letters_separate_words(self, session):
        assert session.generate_new_text("qUiCk你JuMps好ovEr啊lAZy。dOg") == (
            "qUiCk fox JuMps ovEr lAZy dOg"
        )

    def test_one_of_two_bridges(self, session):
        seen = {session.generate_new_text("fox over") for _ in range(100)}
        assert seen == {"fox jumps over", "fox leaps over"}

    def test_one_of_four_bridges(self, session):
        seen = {session.generate_new_text("alpha gamma") for _ in range(200)}
        assert seen == {
            "alpha beta gamma",
            "alpha delta gamma",
            "alpha epsilon gamma",
            "alpha zeta gamma",
        }

    def test_injected_rng_reproduces(self):
        first = Session.from_text(FOX_CORPUS, rng=random.Random(4))
        second = Session.from_text(FOX_CORPUS, rng=random.Random(4))
        outputs = [
            (first.generate_new_text("alpha gamma"), second.generate_new_text("alpha gamma"))
            for _ in range(10)
        ]
        assert all(a == b for a, b in outputs)
