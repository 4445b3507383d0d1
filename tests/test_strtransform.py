import pytest

from cubscene.strtransform import split, striteri, strjoin, strmapi, strtrim, substr


class TestSubstr:
    def test_empty_source(self):
        assert substr("", 0, 0) == ""

    def test_middle_slice(self):
        text = "lorem ipsum dolor sit amet"
        assert substr(text, 6, 5) == text[6:11]

    def test_length_past_end_is_clamped(self):
        assert substr("abc", 1, 100) == "bc"

    def test_start_past_end_gives_empty(self):
        assert substr("abc", 3, 2) == ""
        assert substr("abc", 10, 2) == ""

    def test_zero_length(self):
        assert substr("abc", 1, 0) == ""

    def test_stops_at_nul(self):
        assert substr("ab\0cd", 0, 5) == "ab"

    @pytest.mark.parametrize("start,length", [(-1, 2), (0, -1)])
    def test_negative_arguments_rejected(self, start, length):
        with pytest.raises(ValueError):
            substr("abc", start, length)


class TestStrjoin:
    def test_concatenates(self):
        a, b = "Hello ", "42"
        joined = strjoin(a, b)
        assert joined == a + b
        assert len(joined) == len(a) + len(b)

    def test_empty_parts(self):
        assert strjoin("", "") == ""
        assert strjoin("x", "") == "x"

    def test_none_rejected(self):
        with pytest.raises(TypeError):
            strjoin(None, "a")


class TestStrtrim:
    def test_source_example(self):
        assert strtrim("alooppabcppooll", "pol") == "alooppabc"

    def test_trims_both_ends(self):
        assert strtrim("  \tword \t ", " \t") == "word"

    def test_everything_trimmed(self):
        assert strtrim("xxxx", "x") == ""

    def test_empty_set_leaves_text(self):
        assert strtrim(" a ", "") == " a "

    def test_inner_characters_kept(self):
        assert strtrim("xaxbx", "x") == "axb"

    def test_empty_source(self):
        assert strtrim("", "abc") == ""


class TestSplit:
    def test_source_example(self):
        text = "      split       this for   me  !       "
        assert split(text, " ") == ["split", "this", "for", "me", "!"]

    def test_color_triplet(self):
        assert split("220,100,0", ",") == ["220", "100", "0"]

    def test_no_empty_pieces(self):
        pieces = split(",,a,,b,", ",")
        assert pieces == ["a", "b"]
        assert all(pieces)

    def test_only_separators(self):
        assert split(",,,", ",") == []

    def test_empty_string(self):
        assert split("", ",") == []

    def test_nul_separator(self):
        assert split("whole text", "\0") == ["whole text"]
        assert split("", "\0") == []

    def test_pieces_hold_no_separator(self):
        text = "a b  c   d"
        pieces = split(text, " ")
        assert "".join(pieces) == text.replace(" ", "")
        assert all(" " not in p for p in pieces)

    def test_bad_separator(self):
        with pytest.raises(ValueError):
            split("a,b", ",,")


class TestStriteri:
    def test_modifies_in_place(self):
        chars = list("abc")
        result = striteri(chars, lambda i, c: chr(ord(c) + i))
        assert result is None
        assert chars == ["a", "c", "e"]

    def test_stops_at_nul(self):
        chars = list("ab\0cd")
        striteri(chars, lambda i, c: c.upper())
        assert chars == ["A", "B", "\0", "c", "d"]

    def test_indices_passed_in_order(self):
        seen = []

        def record(i, c):
            seen.append(i)
            return c

        chars = list("xyz")
        striteri(chars, record)
        assert seen == [0, 1, 2]
        assert chars == list("xyz")


class TestStrmapi:
    def test_maps_each_character(self):
        assert strmapi("abc", lambda i, c: c.upper()) == "ABC"

    def test_index_is_passed(self):
        text = "aaaa"
        out = strmapi(text, lambda i, c: str(i))
        assert out == "".join(str(i) for i in range(len(text)))

    def test_identity_round_trip(self):
        text = "Hello 42 Amman"
        assert strmapi(text, lambda i, c: c) == text

    def test_empty(self):
        assert strmapi("", lambda i, c: "x") == ""