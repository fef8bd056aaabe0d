import pytest

from algolab.huffman import (
    Leaf,
    Node,
    bits_to_bytes,
    build_codes,
    build_frequency_table,
    build_huffman_tree,
    bytes_to_bits,
    compress,
    compress_text,
    decode,
    decompress,
    decompress_data,
    encode,
    main,
)

TEXTS = [
    "ab",
    "hello world",
    "abracadabra",
    "mississippi river",
    "ação é ótima — ünïcödé ✓",
    "the quick brown fox jumps over the lazy dog\nTHE END\n",
]


def test_frequency_table_counts():
    table = build_frequency_table("abracadabra")
    assert table == {"a": 5, "b": 2, "r": 2, "c": 1, "d": 1}


def test_tree_root_frequency_is_text_length():
    text = "mississippi"
    tree = build_huffman_tree(build_frequency_table(text))
    assert tree.freq == len(text)


def test_empty_table_raises():
    with pytest.raises(ValueError):
        build_huffman_tree({})


def test_codes_for_two_equal_frequencies():
    tree = build_huffman_tree({"b": 1, "a": 1})
    assert build_codes(tree) == {"a": "0", "b": "1"}


def test_single_leaf_code_is_empty():
    tree = build_huffman_tree({"z": 4})
    assert tree == Leaf("z", 4)
    assert build_codes(tree) == {"z": ""}


@pytest.mark.parametrize("text", TEXTS)
def test_codes_are_prefix_free(text):
    codes = list(build_codes(build_huffman_tree(build_frequency_table(text))).values())
    for i, a in enumerate(codes):
        for b in codes[i + 1 :]:
            assert not a.startswith(b) and not b.startswith(a)


def test_more_frequent_characters_get_shorter_codes():
    text = "a" * 50 + "b" * 10 + "c" * 3 + "d"
    codes = build_codes(build_huffman_tree(build_frequency_table(text)))
    assert len(codes["a"]) <= len(codes["b"]) <= len(codes["c"]) <= len(codes["d"])


@pytest.mark.parametrize("text", TEXTS)
def test_encode_decode_round_trip(text):
    tree = build_huffman_tree(build_frequency_table(text))
    bits = encode(text, build_codes(tree))
    assert set(bits) <= {"0", "1"}
    assert decode(bits, tree) == text


def test_encode_unknown_character_raises():
    with pytest.raises(ValueError):
        encode("abc", {"a": "0", "b": "1"})


def test_decode_leaf_root_empty_bits():
    assert decode("", Leaf("x", 3)) == "x"


def test_decode_leaf_root_with_bits_raises():
    with pytest.raises(ValueError):
        decode("01", Leaf("x", 3))


def test_decode_with_manual_tree():
    tree = Node(3, Leaf("p", 1), Leaf("q", 2))
    assert decode("0110", tree) == "pqqp"


def test_bits_to_bytes_pads_with_zeros():
    assert bits_to_bytes("1") == b"\x80"


@pytest.mark.parametrize("bits", ["10110011", "0000000011111111", ""])
def test_bits_bytes_round_trip(bits):
    assert bytes_to_bits(bits_to_bytes(bits)) == bits


def test_compress_text_wire_format():
    assert compress_text("ab") == (
        b"\x00\x02"
        b"\x00\x00\x00\x02"
        b"\x00\x00\x00\x61\x00\x00\x00\x01"
        b"\x00\x00\x00\x62\x00\x00\x00\x01"
        b"\x40"
    )


@pytest.mark.parametrize("text", TEXTS)
def test_compress_round_trip(text):
    assert decompress_data(compress_text(text)) == text


def test_single_symbol_collapses_to_one_character():
    assert decompress_data(compress_text("aaaa")) == "a"


def test_compress_empty_text_raises():
    with pytest.raises(ValueError):
        compress_text("")


def test_truncated_header_raises():
    with pytest.raises(ValueError):
        decompress_data(b"\x00")


def test_truncated_table_raises():
    data = compress_text("hello world")
    with pytest.raises(ValueError):
        decompress_data(data[:10])


def test_bit_count_beyond_data_raises():
    data = bytearray(compress_text("ab"))
    data[2:6] = (100).to_bytes(4, "big")
    with pytest.raises(ValueError):
        decompress_data(bytes(data))


def test_file_round_trip(tmp_path):
    source = tmp_path / "in.txt"
    packed = tmp_path / "packed.bin"
    result = tmp_path / "out.txt"
    text = "ação é ótima\nabracadabra\n"
    source.write_text(text, encoding="utf-8")
    compress(str(source), str(packed))
    decompress(str(packed), str(result))
    assert packed.read_bytes() == compress_text(text)
    assert result.read_text(encoding="utf-8") == text


def test_main_round_trip(tmp_path):
    source = tmp_path / "in.txt"
    packed = tmp_path / "packed.bin"
    result = tmp_path / "out.txt"
    source.write_text("mississippi river", encoding="utf-8")
    assert main([str(source), str(packed), str(result)]) == 0
    assert result.read_text(encoding="utf-8") == "mississippi river"