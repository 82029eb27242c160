import datetime
from decimal import Decimal

import pytest

from remessa_cnab.cnab240.campos import (
    alfanumerico,
    campo,
    conferir_tamanho,
    formatar_data,
    formatar_data_hora,
    ler_data,
    ler_data_hora,
    ler_inteiro,
    ler_valor,
    numerico,
    ocorrencias,
    remover_acentos,
    valor_decimal,
    valor_monetario,
)
from remessa_cnab.excecoes import ErroCritico, ErroValidacao


@pytest.mark.parametrize(
    "valor, tamanho, esperado",
    [
        ("123", 5, "00123"),
        (123, 5, "00123"),
        ("00123", 5, "00123"),
        ("", 3, "000"),
        (None, 4, "0000"),
        ("12345", 5, "12345"),
    ],
)
def test_numerico(valor, tamanho, esperado):
    assert numerico(valor, tamanho) == esperado


def test_numerico_e_idempotente():
    assert numerico(numerico("42", 6), 6) == "000042"


def test_numerico_nunca_trunca():
    with pytest.raises(ErroValidacao) as excinfo:
        numerico("123456", 5, "agencia")
    assert excinfo.value.codigo == "CAMPO_NUMERICO_EXCEDIDO"
    assert excinfo.value.campo == "agencia"


def test_numerico_rejeita_texto():
    with pytest.raises(ErroValidacao) as excinfo:
        numerico("12-3", 5)
    assert excinfo.value.codigo == "CAMPO_NAO_NUMERICO"


@pytest.mark.parametrize(
    "valor, tamanho, esperado",
    [
        ("ABC", 5, "ABC  "),
        ("ABCDEFG", 5, "ABCDE"),
        (None, 3, "   "),
        ("São Paulo", 9, "Sao Paulo"),
        ("AÇÃO", 2, "AC"),
        ("linha\r\nquebrada", 16, "linha  quebrada "),
    ],
)
def test_alfanumerico(valor, tamanho, esperado):
    assert alfanumerico(valor, tamanho) == esperado


@pytest.mark.parametrize(
    "valor, esperado",
    [
        (Decimal("150.00"), "000000000015000"),
        (Decimal("150.005"), "000000000015001"),
        ("0.1", "000000000000010"),
        (Decimal("-12.34"), "000000000001234"),
        (7, "000000000000700"),
        (None, "000000000000000"),
    ],
)
def test_valor_monetario(valor, esperado):
    assert valor_monetario(valor, 15) == esperado


def test_valor_monetario_excedido():
    with pytest.raises(ErroValidacao) as excinfo:
        valor_monetario(Decimal("10000000000000"), 15, "valor_pagamento")
    assert excinfo.value.codigo == "CAMPO_NUMERICO_EXCEDIDO"


@pytest.mark.parametrize(
    "texto, esperado",
    [
        ("000000000015000", Decimal("150.00")),
        ("000000000000001", Decimal("0.01")),
        ("", Decimal("0.00")),
        ("     ", Decimal("0.00")),
    ],
)
def test_ler_valor(texto, esperado):
    assert ler_valor(texto) == esperado


def test_ler_valor_invalido():
    with pytest.raises(ErroValidacao) as excinfo:
        ler_valor("00012A")
    assert excinfo.value.codigo == "VALOR_INVALIDO"


def test_datas():
    assert formatar_data(datetime.date(2025, 3, 1)) == "01032025"
    assert formatar_data(None) == "00000000"
    assert formatar_data_hora(datetime.datetime(2025, 3, 1, 8, 5, 9)) == "01032025080509"
    assert ler_data("01032025") == datetime.date(2025, 3, 1)
    assert ler_data_hora("01032025080509") == datetime.datetime(2025, 3, 1, 8, 5, 9)


@pytest.mark.parametrize("texto", ["", "        ", "00000000", None])
def test_ler_data_vazia(texto):
    assert ler_data(texto) is None


@pytest.mark.parametrize("texto", ["32012025", "0103202", "01-03-25"])
def test_ler_data_invalida(texto):
    with pytest.raises(ErroValidacao) as excinfo:
        ler_data(texto)
    assert excinfo.value.codigo == "DATA_INVALIDA"


@pytest.mark.parametrize(
    "texto, esperado",
    [
        ("00000000000000000123", 123),
        ("789                 ", 789),
        ("", None),
        ("12A", None),
    ],
)
def test_ler_inteiro(texto, esperado):
    assert ler_inteiro(texto) == esperado


def test_ocorrencias():
    assert ocorrencias("00BDHA    ") == ["00", "BD", "HA"]
    assert ocorrencias("          ") == []


def test_campo_usa_posicoes_do_manual():
    linha = "341" + "0001" + "3" + " " * 232
    assert campo(linha, 1, 3) == "341"
    assert campo(linha, 4, 7) == "0001"
    assert campo(linha, 8, 8) == "3"
    assert campo("curta", 10, 20) == ""


def test_conferir_tamanho():
    linha = "X" * 240
    assert conferir_tamanho(linha, "o teste") is linha
    with pytest.raises(ErroCritico) as excinfo:
        conferir_tamanho("X" * 239, "o Segmento J")
    assert excinfo.value.codigo == "LINHA_TAMANHO_GERADA"
    assert "o Segmento J" in excinfo.value.mensagem


def test_remover_acentos():
    assert remover_acentos("ÇÃO é ñ") == "CAO e n"
    assert remover_acentos("a\r\nb") == "a\r\nb"
    assert remover_acentos("R$ 10 €") == "R$ 10 "
    assert remover_acentos(None) == ""


@pytest.mark.parametrize(
    "valor, esperado",
    [
        (0.1, Decimal("0.1")),
        ("150.00", Decimal("150.00")),
        (15, Decimal("15")),
        (None, None),
    ],
)
def test_valor_decimal(valor, esperado):
    assert valor_decimal(valor, "valor") == esperado


@pytest.mark.parametrize("valor", ["abc", "NaN", "Infinity", [1]])
def test_valor_decimal_invalido(valor):
    with pytest.raises(ErroValidacao) as excinfo:
        valor_decimal(valor, "valor")
    assert excinfo.value.codigo == "VALOR_INVALIDO"


def test_numerico_aceita_apenas_digitos_ascii():
    # Dígitos arábicos passam em str.isdigit, mas sumiriam na normalização final
    with pytest.raises(ErroValidacao) as excinfo:
        numerico("١٢٣", 5, "doc_id")
    assert excinfo.value.codigo == "CAMPO_NAO_NUMERICO"
    assert ler_inteiro("١٢") is None
