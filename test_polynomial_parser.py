"""Tests for the polynomial string grammar."""

import pytest
from term import Term
from polynomial_parser import parse_polynomial, parse_term, parse_terms


class TestParseTerm:
    def test_forms(self):
        assert parse_term("x") == Term(1, 1)
        assert parse_term("7") == Term(7, 0)
        assert parse_term("2.5x") == Term(2.5, 1)
        assert parse_term("x^3") == Term(1, 3)
        assert parse_term("4x^2") == Term(4, 2)

    def test_negation(self):
        assert parse_term("-x^3") == Term(-1, 3)
        assert parse_term("-6") == Term(-6, 0)

    def test_case_and_whitespace(self):
        assert parse_term(" 3 X ^ 2 ") == Term(3, 2)

    def test_leading_dot(self):
        assert parse_term(".5x") == Term(0.5, 1)

    def test_malformed_is_zero(self):
        assert parse_term("") == Term(0, 0)
        assert parse_term("foo") == Term(0, 0)
        assert parse_term("2y") == Term(0, 0)
        assert parse_term("x^") == Term(0, 0)


class TestParsePolynomial:
    def test_canonical_round_trip(self):
        assert parse_polynomial("4x^2 + 2x + 1").to_string() == "4x^2 + 2x + 1"

    def test_subtraction(self):
        assert parse_polynomial("3x^2 - 2x + 1").to_string() == "3x^2 - 2x + 1"

    def test_double_negative(self):
        assert parse_polynomial("3x^2 - -2").to_string() == "3x^2 + 2"

    def test_leading_minus(self):
        assert parse_polynomial("-x + 4").to_string() == "-x + 4"

    def test_uppercase_variable(self):
        assert parse_polynomial("3x^4 - 126X").to_string() == "3x^4 - 126x"

    def test_compact_input(self):
        assert parse_polynomial("3x^3-5x^2+10x-3").to_string() == "3x^3 - 5x^2 + 10x - 3"

    def test_whitespace(self):
        assert parse_polynomial("  4 x ^ 2  +  1 ").to_string() == "4x^2 + 1"

    def test_negative_exponent(self):
        assert parse_terms("x^-2") == [Term(1, -2)]

    def test_scientific_notation(self):
        assert parse_polynomial("1e-05x^2 + 3").to_string() == "1e-05x^2 + 3"

    def test_like_terms_combined(self):
        assert parse_polynomial("x + x + x^2 - x^2").to_string() == "2x"

    def test_malformed_chunks_ignored(self):
        assert parse_polynomial("3x + foo").to_string() == "3x"

    def test_zero_terms_discarded(self):
        assert parse_terms("0x^2 + 0 + 5") == [Term(5, 0)]
        assert parse_polynomial("0").to_string() == "0"

    @pytest.mark.parametrize("text", [
        "4x^2 + 2x + 1",
        "0.5x^3 - 2x + 7",
        "-x^4 + x^-1",
        "1.33333333333x^3 - 0.444444444444x + 0.666666666667",
        "12",
    ])
    def test_round_trip(self, text):
        p = parse_polynomial(text)
        assert parse_polynomial(p.to_string()) == p
        assert parse_polynomial(p.to_string(False)) == p


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
