"""
Unit Tests for Bridge Words
===========================

Tests for find_bridge_words, format_bridge_words and query_bridge_words.
"""

from wordgraph.graph import build_graph, WordGraph
from wordgraph.analysis import (
    find_bridge_words,
    format_bridge_words,
    query_bridge_words,
)


class TestFindBridgeWords:
    """Tests for the bridge set."""

    def test_single_bridge(self):
        graph = build_graph("a b c".split())
        assert find_bridge_words(graph, "a", "c") == {"b"}

    def test_no_bridge(self):
        graph = build_graph("a b c".split())
        assert find_bridge_words(graph, "b", "a") == set()

    def test_missing_word1(self):
        graph = build_graph("a b c".split())
        assert find_bridge_words(graph, "zzz", "c") == set()

    def test_missing_word2(self):
        graph = build_graph("a b c".split())
        assert find_bridge_words(graph, "a", "zzz") == set()

    def test_multiple_bridges(self):
        graph = build_graph("a b d b c b e b".split())
        assert find_bridge_words(graph, "b", "b") == {"c", "d", "e"}

    def test_bridges_are_valid_edges(self):
        graph = WordGraph.from_text("the cat and the dog and the bird saw the cat")
        for w1 in graph:
            for w2 in graph:
                for bridge in find_bridge_words(graph, w1, w2):
                    assert bridge in graph
                    assert graph.has_edge(w1, bridge)
                    assert graph.has_edge(bridge, w2)

    def test_self_loop_bridge(self):
        """x -> x -> y makes x a bridge from x to y."""
        graph = build_graph("x x y".split())
        assert find_bridge_words(graph, "x", "y") == {"x"}


class TestFormatBridgeWords:
    """Tests for the sentence formatting."""

    def test_none(self):
        assert format_bridge_words("a", "b", set()) == 'No bridge words from "a" to "b"!'

    def test_one(self):
        assert format_bridge_words("a", "c", {"b"}) == 'The bridge words from "a" to "c" is: "b".'

    def test_two(self):
        assert (format_bridge_words("a", "c", {"x", "y"})
                == 'The bridge words from "a" to "c" are: "x" and "y".')

    def test_four(self):
        result = format_bridge_words("a", "c", {"w", "x", "y", "z"})
        assert result == 'The bridge words from "a" to "c" are: "w", "x", "y" and "z".'


class TestQueryBridgeWords:
    """Tests for query_bridge_words diagnostics."""

    def setup_method(self):
        self.graph = build_graph("a b c".split())

    def test_both_missing(self):
        assert query_bridge_words(self.graph, "d", "e") == 'No "d" or "e" in the graph!'

    def test_second_missing(self):
        assert query_bridge_words(self.graph, "c", "e") == 'No "c" or "e" in the graph!'

    def test_first_missing(self):
        assert query_bridge_words(self.graph, "e", "c") == 'No "e" or "c" in the graph!'

    def test_no_bridge(self):
        assert query_bridge_words(self.graph, "b", "a") == 'No bridge words from "b" to "a"!'

    def test_found(self):
        assert query_bridge_words(self.graph, "a", "c") == 'The bridge words from "a" to "c" is: "b".'

    def test_removed_middle_word(self):
        """Without the middle word there is no bridge."""
        adjacency = self.graph.adjacency()
        del adjacency["b"]
        adjacency["a"] = {}
        graph = WordGraph(adjacency, {"a": 1, "c": 1})
        assert query_bridge_words(graph, "a", "c") == 'No bridge words from "a" to "c"!'
