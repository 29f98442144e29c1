"""Tests for the vector codec."""

import pytest

from semdex.exceptions import VectorParseError
from semdex.vector import decode_vector, encode_vector


class TestEncodeVector:
    def test_empty(self):
        assert encode_vector([]) == "[]"

    def test_values(self):
        assert encode_vector([0.1, 0.2, 0.3]) == "[0.1,0.2,0.3]"

    def test_integers_become_floats(self):
        assert encode_vector([1, 0]) == "[1.0,0.0]"

    @pytest.mark.parametrize("value", [float("nan"), float("inf"), float("-inf")])
    def test_rejects_non_finite(self, value):
        with pytest.raises(VectorParseError):
            encode_vector([0.1, value])


class TestDecodeVector:
    def test_empty(self):
        assert decode_vector("[]") == []

    def test_empty_with_whitespace(self):
        assert decode_vector("  [ ]  ") == []

    def test_values_with_whitespace(self):
        assert decode_vector("[ 0.5 , -1 ,2e-3]") == [0.5, -1.0, 0.002]

    def test_invalid_number(self):
        with pytest.raises(VectorParseError, match="index 1"):
            decode_vector("[0.1,abc,0.3]")

    def test_empty_piece(self):
        with pytest.raises(VectorParseError):
            decode_vector("[0.1,,0.3]")

    def test_missing_brackets(self):
        with pytest.raises(VectorParseError):
            decode_vector("0.1,0.2")

    def test_non_finite(self):
        with pytest.raises(VectorParseError):
            decode_vector("[nan]")

    def test_is_value_error(self):
        with pytest.raises(ValueError):
            decode_vector("[x]")


class TestRoundTrip:
    @pytest.mark.parametrize(
        "vector",
        [
            [],
            [0.5],
            [-0.1, 0.2, -0.3],
            [i * 0.001 for i in range(1024)],
        ],
    )
    def test_lossless(self, vector):
        assert decode_vector(encode_vector(vector)) == vector
