"""Remessa e retorno de pagamentos no padrão CNAB 240 (FEBRABAN)."""
from .base import (
    BANCOS_CNAB,
    ESTADOS_BR,
    identificar_banco,
    limpar_numero,
    validar_cnpj,
    validar_codigo_barras_arrecadacao,
    validar_codigo_barras_boleto,
    validar_cpf,
    validar_cpf_ou_cnpj,
)
from .config import ConfiguracaoCNAB
from .excecoes import ErroCNAB, ErroCritico, ErroValidacao
from .cnab240 import (
    ArquivoCNAB240,
    DadosEmpresa,
    RemessaCNAB240,
    TipoLote,
    ler_arquivo,
    ler_arquivo_bytes,
)

__version__ = "0.1.0"

__all__ = [
    "BANCOS_CNAB",
    "ESTADOS_BR",
    "identificar_banco",
    "limpar_numero",
    "validar_cnpj",
    "validar_codigo_barras_arrecadacao",
    "validar_codigo_barras_boleto",
    "validar_cpf",
    "validar_cpf_ou_cnpj",
    "ConfiguracaoCNAB",
    "ErroCNAB",
    "ErroCritico",
    "ErroValidacao",
    "ArquivoCNAB240",
    "DadosEmpresa",
    "RemessaCNAB240",
    "TipoLote",
    "ler_arquivo",
    "ler_arquivo_bytes",
]
