"""Tipos de lote suportados e as constantes do header de lote de cada um."""

from dataclasses import dataclass
from enum import Enum

from ..excecoes import ErroValidacao


class TipoLote(Enum):
    """Combinações de Tipo de Serviço + Forma de Lançamento suportadas."""

    TITULO_MESMO_BANCO = "titulo_mesmo_banco"
    TITULO_OUTROS_BANCOS = "titulo_outros_bancos"
    CONTAS_SERVICO = "contas_servico"
    SALARIO = "salario"


@dataclass(frozen=True)
class ConstantesLote:
    tipo_servico: str
    forma_lancamento: str
    layout: str
    # Indicativo da Forma de Pagamento do Serviço (pos. 223-224), só no layout 046
    indicativo_forma_pagamento: str = None


# Tipo do Serviço (pos. 10-11):
#   '30' = Pagamento Salários
#   '98' = Pagamentos Diversos
# Forma de Lançamento (pos. 12-13):
#   '01' = Crédito em Conta Corrente/Salário
#   '11' = Pagamento de Contas e Tributos com Código de Barras
#   '30' = Liquidação de Títulos do Próprio Banco
#   '31' = Pagamento de Títulos de Outros Bancos
CONSTANTES_LOTE = {
    TipoLote.TITULO_MESMO_BANCO: ConstantesLote("98", "30", "040"),
    TipoLote.TITULO_OUTROS_BANCOS: ConstantesLote("98", "31", "040"),
    TipoLote.CONTAS_SERVICO: ConstantesLote("98", "11", "040"),
    TipoLote.SALARIO: ConstantesLote("30", "01", "046", "01"),
}

TIPOS_LOTE_POR_CODIGO = {
    (c.tipo_servico, c.forma_lancamento): tipo for tipo, c in CONSTANTES_LOTE.items()
}

LAYOUTS_LOTE_CONHECIDOS = {"040", "046"}

# Layouts que trazem o indicativo da forma de pagamento nas posições 223-224
LAYOUTS_COM_INDICATIVO = {"046"}


def identificar_tipo_lote(tipo_servico: str, forma_lancamento: str, linha: int = None) -> TipoLote:
    """
    Identifica o tipo de lote pela combinação Tipo de Serviço + Forma de Lançamento.
    """
    tipo = TIPOS_LOTE_POR_CODIGO.get((tipo_servico, forma_lancamento))
    if tipo is None:
        raise ErroValidacao(
            "Tipo de lote desconhecido para 'Tipo de Serviço = ${0}' e 'Forma de Lançamento = ${1}'.",
            (tipo_servico, forma_lancamento),
            codigo="TIPO_LOTE_DESCONHECIDO",
            linha=linha,
        )
    return tipo


def constantes_lote(tipo: TipoLote) -> ConstantesLote:
    return CONSTANTES_LOTE[tipo]
