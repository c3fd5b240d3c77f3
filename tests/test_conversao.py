"""Testes das funções de conversão dos campos do formulário."""

import pytest

from conversao import MAX_INTEIRO, converter_decimal, converter_inteiro, id_da_busca


class TestConverterDecimal:

    @pytest.mark.parametrize('texto, esperado', [
        ('9.99', 9.99),
        ('  12.5 ', 12.5),
        ('3', 3.0),
        ('.5', 0.5),
        ('9.99abc', 9.99),
        ('1e2', 100.0),
    ])
    def test_valid_prefix_is_parsed(self, texto, esperado):
        assert converter_decimal(texto) == pytest.approx(esperado)

    @pytest.mark.parametrize('texto', [None, '', 'abc', 'nan', '-5', '0', '1e999'])
    def test_invalid_input_becomes_zero(self, texto):
        assert converter_decimal(texto) == 0.0

    def test_custom_default(self):
        assert converter_decimal('x', padrao=1.5) == 1.5


class TestConverterInteiro:

    @pytest.mark.parametrize('texto, esperado', [
        ('3', 3),
        (' 42', 42),
        ('3.7', 3),
        ('12 unidades', 12),
    ])
    def test_valid_prefix_is_parsed(self, texto, esperado):
        assert converter_inteiro(texto) == esperado

    @pytest.mark.parametrize('texto', [None, '', 'abc', '-2', '.5', '99999999999999999999', '9223372036854775808'])
    def test_invalid_input_becomes_zero(self, texto):
        assert converter_inteiro(texto) == 0

    def test_largest_sqlite_integer_is_kept(self):
        assert converter_inteiro('9223372036854775807') == MAX_INTEIRO


class TestIdDaBusca:

    def test_numeric_term(self):
        assert id_da_busca('42') == 42
        assert id_da_busca(' 7 ') == 7

    def test_non_numeric_term_is_sentinel(self):
        assert id_da_busca('Widget') == -1

    def test_zero_is_sentinel(self):
        assert id_da_busca('0') == -1

    def test_fractional_term_kept_as_float(self):
        assert id_da_busca('4.5') == 4.5

    def test_large_id_within_sqlite_range(self):
        assert id_da_busca('4611686018427387904') == 2 ** 62

    @pytest.mark.parametrize('termo', ['12345678901234567890', '-99999999999999999999', '1e30'])
    def test_term_beyond_sqlite_integer_is_sentinel(self, termo):
        assert id_da_busca(termo) == -1

    @pytest.mark.parametrize('termo', ['1_000', '4 peças', '0x10', 'inf', 'nan', ''])
    def test_partial_or_python_only_numbers_are_sentinel(self, termo):
        assert id_da_busca(termo) == -1

    def test_exponent_term(self):
        assert id_da_busca('1e3') == 1000
