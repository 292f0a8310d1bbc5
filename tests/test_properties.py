"""Property-based tests for slicing using Hypothesis.

Python's own ``str`` slicing counts Unicode scalar values and saturates at
the end, which makes it an exact oracle for the byte-level operations:
1. slice/from_/till agree with str slicing for every offset
2. Saturation and zero-length identities hold
3. Compositions of operations agree with a single slice
4. Every result borrows from the input and lands on character boundaries
"""

from hypothesis import assume, given, settings
from hypothesis import strategies as st

import utf8_slice
from utf8_slice import TextView, byte_range, char_index, char_len, chars, from_, resolve, till
from utf8_slice import slice as slice_chars

texts = st.text(max_size=60)
ascii_texts = st.text(alphabet=st.characters(max_codepoint=0x7F), max_size=60)
offsets = st.integers(min_value=0, max_value=80)


class TestAgreesWithStr:
    """Byte-level results match Python str slicing."""

    @given(text=texts, i=offsets, j=offsets)
    @settings(max_examples=300)
    def test_slice(self, text: str, i: int, j: int) -> None:
        assume(i <= j)
        assert str(slice_chars(text.encode(), i, j)) == text[i:j]

    @given(text=texts, k=offsets)
    @settings(max_examples=200)
    def test_from_and_till(self, text: str, k: int) -> None:
        data = text.encode()
        assert str(from_(data, k)) == text[k:]
        assert str(till(data, k)) == text[:k]

    @given(text=texts)
    def test_char_len(self, text: str) -> None:
        assert char_len(text.encode()) == len(text)

    @given(text=texts, k=offsets)
    def test_resolve(self, text: str, k: int) -> None:
        assert resolve(text.encode(), k) == len(text[:k].encode())


class TestIdentities:
    """Saturation and zero-length identities."""

    @given(text=texts, extra=st.integers(min_value=0, max_value=20))
    def test_saturation(self, text: str, extra: int) -> None:
        data = text.encode()
        k = char_len(data) + extra
        assert from_(data, k) == b""
        assert till(data, k) == data

    @given(text=texts)
    def test_zero_length(self, text: str) -> None:
        data = text.encode()
        assert till(data, 0) == b""
        assert from_(data, 0) == data
        assert slice_chars(data, 0, char_len(data)) == data


class TestComposability:
    """Compositions agree with a single range slice."""

    @given(text=texts, data=st.data())
    @settings(max_examples=200)
    def test_slice_composes(self, text: str, data: st.DataObject) -> None:
        buffer = text.encode()
        n = char_len(buffer)
        j = data.draw(st.integers(min_value=0, max_value=n))
        i = data.draw(st.integers(min_value=0, max_value=j))

        expected = slice_chars(buffer, i, j)
        assert expected == from_(slice_chars(buffer, 0, j), i)
        assert expected == till(from_(buffer, i), j - i)

    @given(text=texts)
    def test_length_agreement(self, text: str) -> None:
        buffer = text.encode()
        n = char_len(buffer)
        pieces = [slice_chars(buffer, k, k + 1) for k in range(n)]
        assert all(char_len(p) == 1 for p in pieces)
        assert b"".join(bytes(p) for p in pieces) == buffer
        assert pieces == list(chars(buffer))

    @given(text=texts, k=offsets)
    def test_char_index_inverts_resolve(self, text: str, k: int) -> None:
        buffer = text.encode()
        assert char_index(buffer, resolve(buffer, k)) == min(k, len(text))


class TestAsciiRoundTrip:
    """Single-byte text behaves exactly like raw byte slicing."""

    @given(text=ascii_texts, i=offsets, j=offsets)
    def test_byte_slicing(self, text: str, i: int, j: int) -> None:
        assume(i <= j)
        data = text.encode()
        assert slice_chars(data, i, j) == data[i:j]
        assert from_(data, i) == data[i:]
        assert till(data, j) == data[:j]
        assert utf8_slice.len(data) == len(data)


class TestZeroCopy:
    """Results borrow from the caller's buffer."""

    @given(text=texts, i=offsets, j=offsets)
    def test_result_shares_storage(self, text: str, i: int, j: int) -> None:
        assume(i <= j)
        data = text.encode()
        result = slice_chars(data, i, j)
        assert isinstance(result, TextView)
        assert result.obj is data

    @given(text=texts, i=offsets, j=offsets)
    def test_offsets_on_boundaries(self, text: str, i: int, j: int) -> None:
        assume(i <= j)
        data = text.encode()
        start, stop = byte_range(data, i, j)
        # both halves decode cleanly only if the cut is on a boundary
        data[:start].decode()
        data[start:stop].decode()
        data[stop:].decode()
