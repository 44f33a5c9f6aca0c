from fractions import Fraction

import pytest

from treekit.huffman_tree import HuffmanTree, encode, main

FREQUENCIES = {
    "A": 2089,
    "E": 576,
    "H": 357,
    "I": 671,
    "K": 849,
    "L": 354,
    "M": 259,
    "N": 660,
    "O": 844,
    "P": 239,
    "U": 472,
    "W": 74,
    "'": 541,
}


def test_every_character_gets_a_code():
    codes = HuffmanTree(FREQUENCIES).encoding_map()
    assert set(codes) == set(FREQUENCIES)
    assert all(code and set(code) <= {"0", "1"} for code in codes.values())


def test_codes_are_prefix_free():
    codes = list(HuffmanTree(FREQUENCIES).encoding_map().values())
    for a in codes:
        for b in codes:
            if a is not b:
                assert not b.startswith(a)


def test_kraft_sum_is_one():
    codes = HuffmanTree(FREQUENCIES).encoding_map()
    assert sum(Fraction(1, 2 ** len(c)) for c in codes.values()) == 1


def test_more_frequent_codes_are_not_longer():
    codes = HuffmanTree(FREQUENCIES).encoding_map()
    for a, fa in FREQUENCIES.items():
        for b, fb in FREQUENCIES.items():
            if fa > fb:
                assert len(codes[a]) <= len(codes[b])


@pytest.mark.parametrize("message", ["ALOHA", "", "WAIKIKI", "'OHANA", "MAHALO NUI"[:6]])
def test_round_trip(message):
    tree = HuffmanTree(FREQUENCIES)
    assert tree.decode(encode(message, tree.encoding_map())) == message


def test_two_symbols():
    tree = HuffmanTree({"a": 1, "b": 2})
    assert tree.encoding_map() == {"a": "0", "b": "1"}
    assert tree.decode("0110") == "abba"


def test_trailing_partial_code_is_dropped():
    tree = HuffmanTree(FREQUENCIES)
    codes = tree.encoding_map()
    longest = max(codes.values(), key=len)
    assert tree.decode(codes["A"] + longest[:-1]) == "A"


def test_encode_unknown_character():
    with pytest.raises(KeyError):
        encode("Z", HuffmanTree(FREQUENCIES).encoding_map())


def test_empty_tree():
    tree = HuffmanTree({})
    assert tree.encoding_map() == {}
    with pytest.raises(ValueError):
        tree.decode("0")


def test_single_symbol():
    tree = HuffmanTree({"x": 5})
    assert tree.encoding_map() == {"x": ""}
    with pytest.raises(ValueError):
        tree.decode("0")


def test_main(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0].startswith("Encoded: ")
    assert lines[1] == "Decoded: ALOHA"