"""Codificação dos campos de tamanho fixo do CNAB 240 (numéricos, alfanuméricos, valores e datas)."""

import unicodedata
from datetime import date, datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from ..excecoes import ErroCritico, ErroValidacao

TAMANHO_LINHA = 240
FIM_DE_LINHA = "\r\n"

_CENTAVOS = Decimal("0.01")


def campo(linha: str, inicio: int, fim: int) -> str:
    """
    Retorna o trecho da linha entre as posições informadas (1-based, inclusive).
    """
    if inicio < 1 or fim < inicio:
        return ""
    if len(linha) < inicio:
        return ""
    return linha[inicio - 1:fim]


def somente_digitos(texto: str) -> bool:
    """
    True se o texto tem apenas dígitos ASCII. ``str.isdigit`` aceita dígitos de
    outros alfabetos, que não existem no arquivo.
    """
    return texto.isascii() and texto.isdigit()


def remover_acentos(texto: str) -> str:
    """
    Remove acentos (NFKD sem marcas combinantes) e descarta caracteres fora do
    ASCII imprimível. Quebras de linha são preservadas.
    """
    normalizado = unicodedata.normalize("NFKD", texto or "")
    chars = []
    for ch in normalizado:
        if unicodedata.combining(ch):
            continue
        if ch in "\r\n" or " " <= ch <= "~":
            chars.append(ch)
    return "".join(chars)


def numerico(valor, tamanho: int, nome: str = None) -> str:
    """
    Campo numérico: alinhado à direita e completado com zeros à esquerda.
    Nunca trunca: valor com mais dígitos que o campo é rejeitado.
    """
    texto = "" if valor is None else str(valor)
    if texto == "":
        return "0" * tamanho
    if not somente_digitos(texto):
        raise ErroValidacao(
            "Campo numérico '${0}' contém caracteres não numéricos: '${1}'.",
            (nome or "?", texto),
            codigo="CAMPO_NAO_NUMERICO",
            campo=nome,
        )
    if len(texto) > tamanho:
        raise ErroValidacao(
            "Campo numérico '${0}' com ${1} dígitos não cabe em ${2} posições.",
            (nome or "?", len(texto), tamanho),
            codigo="CAMPO_NUMERICO_EXCEDIDO",
            campo=nome,
        )
    return texto.rjust(tamanho, "0")


def alfanumerico(valor, tamanho: int) -> str:
    """
    Campo alfanumérico: alinhado à esquerda e completado com brancos.
    Textos maiores que o campo são truncados (mantém os primeiros caracteres).
    """
    texto = remover_acentos("" if valor is None else str(valor)).replace("\r", " ").replace("\n", " ")
    return texto[:tamanho].ljust(tamanho, " ")


def valor_monetario(valor, tamanho: int, nome: str = None) -> str:
    """
    Valor com 2 casas decimais implícitas: multiplicado por 100, em módulo,
    completado com zeros à esquerda.
    """
    if valor is None:
        return "0" * tamanho
    centavos = abs(Decimal(valor).quantize(_CENTAVOS, rounding=ROUND_HALF_UP)).scaleb(2)
    return numerico(str(int(centavos)), tamanho, nome)


def ler_valor(texto: str) -> Decimal:
    """
    Converte um campo de valor (2 casas implícitas) em Decimal.
    """
    texto = (texto or "").strip()
    if not texto:
        return Decimal("0.00")
    if not somente_digitos(texto):
        raise ErroValidacao(
            "Valor '${0}' não é numérico.", (texto,), codigo="VALOR_INVALIDO"
        )
    return Decimal(texto).scaleb(-2).quantize(_CENTAVOS)


def formatar_data(valor: date) -> str:
    if valor is None:
        return "00000000"
    return valor.strftime("%d%m%Y")


def formatar_data_hora(valor: datetime) -> str:
    return valor.strftime("%d%m%Y%H%M%S")


def ler_data(texto: str):
    """
    Converte DDMMAAAA em date. Vazio ou zerado resulta em None.
    """
    texto = (texto or "").strip()
    if not texto or texto == "00000000":
        return None
    try:
        if len(texto) != 8 or not somente_digitos(texto):
            raise ValueError(texto)
        return datetime.strptime(texto, "%d%m%Y").date()
    except ValueError:
        raise ErroValidacao(
            "Data '${0}' inválida (esperado DDMMAAAA).", (texto,), codigo="DATA_INVALIDA"
        ) from None


def ler_data_hora(texto: str):
    """
    Converte DDMMAAAAHHMMSS em datetime. Vazio ou zerado resulta em None.
    """
    texto = (texto or "").strip()
    if not texto or set(texto) == {"0"}:
        return None
    try:
        return datetime.strptime(texto, "%d%m%Y%H%M%S")
    except ValueError:
        raise ErroValidacao(
            "Data/hora '${0}' inválida (esperado DDMMAAAAHHMMSS).",
            (texto,),
            codigo="DATA_INVALIDA",
        ) from None


def ler_inteiro(texto: str):
    """
    Converte um campo numérico em int; brancos ou texto não numérico resultam em None.
    """
    texto = (texto or "").strip()
    if not texto or not somente_digitos(texto):
        return None
    return int(texto)


def ocorrencias(texto: str) -> list:
    """
    Quebra o campo de ocorrências de retorno (10 posições) em códigos de 2 caracteres.
    """
    texto = (texto or "").strip()
    return [texto[i:i + 2] for i in range(0, len(texto), 2)]


def conferir_tamanho(linha: str, descricao: str) -> str:
    """
    Garante que a linha montada tem exatamente 240 caracteres antes de ser gravada.
    """
    if len(linha) != TAMANHO_LINHA:
        raise ErroCritico(
            "Falha ao criar ${0}. A linha ficou com ${1} caracteres, esperado ${2}.",
            (descricao, len(linha), TAMANHO_LINHA),
            codigo="LINHA_TAMANHO_GERADA",
        )
    return linha


def valor_decimal(valor, nome: str) -> Decimal:
    """
    Converte int/str/Decimal em Decimal; float é convertido pela representação textual.
    """
    if valor is None:
        return None
    if isinstance(valor, float):
        valor = str(valor)
    try:
        numero = Decimal(valor)
    except (InvalidOperation, TypeError, ValueError):
        numero = None
    if numero is None or not numero.is_finite():
        raise ErroValidacao(
            "Valor '${0}' inválido para o campo '${1}'.",
            (valor, nome),
            codigo="VALOR_INVALIDO",
            campo=nome,
        )
    return numero
