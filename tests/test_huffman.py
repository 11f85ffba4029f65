import pytest
from hypothesis import given
from hypothesis import strategies as st

from analgo.huffman import build_huffman_tree, huffman_codes, letter_frequencies, main


def test_classic_example_codes():
    root = build_huffman_tree(list("abcdef"), [5, 9, 12, 13, 16, 45])
    codes = huffman_codes(root)
    assert codes == {
        "f": "0",
        "c": "100",
        "d": "101",
        "a": "1100",
        "b": "1101",
        "e": "111",
    }
    assert list(codes) == ["f", "c", "d", "a", "b", "e"]


def test_root_frequency_is_total():
    freqs = [5, 9, 12, 13, 16, 45]
    root = build_huffman_tree(list("abcdef"), freqs)
    assert root.freq == sum(freqs)
    assert root.symbol is None


def test_single_symbol_has_empty_code():
    root = build_huffman_tree(["x"], [3])
    assert root.is_leaf
    assert huffman_codes(root) == {"x": ""}


def test_mismatched_lengths_rejected():
    with pytest.raises(ValueError):
        build_huffman_tree(["a", "b"], [1])


def test_empty_input_rejected():
    with pytest.raises(ValueError):
        build_huffman_tree([], [])


def test_letter_frequencies_lowercases_in_first_seen_order():
    counts = letter_frequencies("BanAna")
    assert list(counts) == ["b", "a", "n"]
    assert counts == {"b": 1, "a": 3, "n": 2}


def test_main_prints_counts_and_codes(capsys):
    assert main(["abca"]) == 0
    out = capsys.readouterr().out
    assert "Letra: a, Frecuencia: 2" in out
    assert "Letra: b, Frecuencia: 1" in out
    code_lines = [line for line in out.splitlines() if not line.startswith("Letra")]
    assert sorted(line.split(":")[0] for line in code_lines) == ["a", "b", "c"]


def test_main_rejects_empty_word(capsys, monkeypatch):
    monkeypatch.setattr("builtins.input", lambda prompt="": "")
    assert main([]) == 1


@given(st.dictionaries(st.characters(min_codepoint=97, max_codepoint=122),
                       st.integers(1, 1000), min_size=2))
def test_codes_are_prefix_free_and_complete(table):
    symbols = list(table)
    root = build_huffman_tree(symbols, [table[s] for s in symbols])
    codes = huffman_codes(root)
    assert set(codes) == set(symbols)
    values = list(codes.values())
    for i, first in enumerate(values):
        for j, second in enumerate(values):
            if i != j:
                assert not second.startswith(first)
    assert sum(2.0 ** -len(code) for code in values) == pytest.approx(1.0)


@given(st.dictionaries(st.characters(min_codepoint=97, max_codepoint=122),
                       st.integers(1, 1000), min_size=2))
def test_more_frequent_symbols_never_get_longer_codes(table):
    symbols = list(table)
    codes = huffman_codes(build_huffman_tree(symbols, [table[s] for s in symbols]))
    for a in symbols:
        for b in symbols:
            if table[a] > table[b]:
                assert len(codes[a]) <= len(codes[b])