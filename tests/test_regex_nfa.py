import io

import pytest

from labkit.regex_nfa import RegexGraph, build_graph, main, recognizes


def test_graph_has_one_vertex_per_position_plus_final():
    graph = RegexGraph("abc")
    assert graph.vertices == len("abc") + 1
    assert graph.reachable(0) == {0}


def test_add_edge_and_reachable():
    graph = RegexGraph("abcd")
    graph.add_edge(0, 1)
    graph.add_edge(1, 2)
    assert graph.reachable(0) == {0, 1, 2}
    assert graph.reachable(3) == {3}


def test_out_of_range_vertex():
    graph = RegexGraph("ab")
    with pytest.raises(IndexError):
        graph.add_edge(0, graph.vertices)
    with pytest.raises(IndexError):
        graph.reachable(-1)


def test_star_group_reaches_final_state():
    pattern = "(a|b)*"
    graph = build_graph(pattern)
    assert len(pattern) in graph.reachable(0)
    assert recognizes(graph, "")
    assert recognizes(graph, "abba")
    assert not recognizes(graph, "c")


def test_concatenation():
    graph = build_graph("ab")
    assert recognizes(graph, "ab")
    assert not recognizes(graph, "a")
    assert not recognizes(graph, "b")
    assert not recognizes(graph, "abc")


def test_active_states_accumulate():
    graph = build_graph("ab")
    assert recognizes(graph, "aab")


def test_set_is_an_epsilon_chain():
    pattern = "[ab]"
    graph = build_graph(pattern)
    assert graph.reachable(0) == set(range(len(pattern) + 1))
    assert graph.sets == ["[ab"]


def test_complement_adds_no_edges():
    pattern = "[^ab]"
    graph = build_graph(pattern)
    assert all(not edges for edges in graph.adjacency)
    assert graph.sets == ["&ab"]


@pytest.mark.parametrize("pattern", ["a)", "[ab", "a|b)"])
def test_malformed_patterns(pattern):
    with pytest.raises(ValueError):
        build_graph(pattern)


def test_main_prints_verdicts(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("ab\n3\nab\na\nabc\n"))
    assert main([]) == 0
    out = capsys.readouterr().out
    assert [line[-1] for line in out.splitlines()] == ["S", "N", "N"]


def test_main_missing_input(monkeypatch, capsys):
    monkeypatch.setattr("sys.stdin", io.StringIO("ab\n2\nab\n"))
    assert main([]) == 1
    assert "missing input" in capsys.readouterr().err