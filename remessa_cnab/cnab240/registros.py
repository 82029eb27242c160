"""
Modelo dos registros CNAB 240: arquivo, lotes e registros de detalhe (segmentos A, J, J-52 e O).

Os layouts abaixo usam posições 1-based e inclusivas, como no manual FEBRABAN.
Os campos são guardados como lidos (texto de tamanho fixo); as propriedades
``*_como_data``/``*_como_decimal`` fazem a conversão.
"""

from collections import Counter
from dataclasses import dataclass, field, fields
from decimal import Decimal
from typing import ClassVar, Optional

from ..excecoes import ErroCritico
from .campos import campo, ler_data, ler_data_hora, ler_inteiro, ler_valor, ocorrencias, somente_digitos
from .tipos_lote import LAYOUTS_COM_INDICATIVO, TipoLote

LAYOUT_HEADER_ARQUIVO = {
    "codigo_banco": (1, 3),
    "tipo_inscricao": (18, 18),
    "numero_inscricao": (19, 32),
    "codigo_convenio": (33, 52),
    "agencia": (53, 57),
    "agencia_dv": (58, 58),
    "conta_numero": (59, 70),
    "conta_dv": (71, 71),
    "agencia_conta_dv": (72, 72),
    "nome_empresa": (73, 102),
    "nome_banco": (103, 132),
    "remessa_retorno": (143, 143),
    "data_hora_geracao": (144, 157),
    "numero_sequencial_arquivo": (158, 163),
    "layout": (164, 166),
    "reservado_empresa": (192, 211),
}

LAYOUT_HEADER_LOTE = {
    "numero_lote": (4, 7),
    "tipo_servico": (10, 11),
    "forma_lancamento": (12, 13),
    "layout": (14, 16),
    "indicativo_forma_pagamento": (223, 224),
}

LAYOUT_TRAILER_LOTE = {
    "qtd_registros": (18, 23),
    "somatoria_valores": (24, 41),
}

LAYOUT_TRAILER_ARQUIVO = {
    "qtd_lotes": (18, 23),
    "qtd_registros": (24, 29),
}

LAYOUT_SEGMENTO_A = {
    "favorecido_banco": (21, 23),
    "favorecido_agencia": (24, 28),
    "favorecido_agencia_dv": (29, 29),
    "favorecido_conta": (30, 41),
    "favorecido_conta_dv": (42, 42),
    "favorecido_agencia_conta_dv": (43, 43),
    "favorecido_nome": (44, 73),
    "doc_id": (74, 93),
    "data_pagamento": (94, 101),
    "valor_pagamento": (120, 134),
    "doc_id_banco": (135, 154),
    "ocorrencias": (231, 240),
}

LAYOUT_SEGMENTO_J = {
    "codigo_barras": (18, 61),
    "beneficiario_nome": (62, 91),
    "data_vencimento": (92, 99),
    "valor_titulo": (100, 114),
    "valor_desconto": (115, 129),
    "valor_mora_multa": (130, 144),
    "data_pagamento": (145, 152),
    "valor_pagamento": (153, 167),
    "doc_id": (183, 202),
    "doc_id_banco": (203, 222),
    "ocorrencias": (231, 240),
}

LAYOUT_SEGMENTO_J52 = {
    "identificador_registro": (18, 19),
    "pagador_tipo_inscricao": (20, 20),
    "pagador_numero_inscricao": (21, 35),
    "pagador_nome": (36, 75),
    "beneficiario_tipo_inscricao": (76, 76),
    "beneficiario_numero_inscricao": (77, 91),
    "beneficiario_nome": (92, 131),
}

LAYOUT_SEGMENTO_O = {
    "codigo_barras": (18, 61),
    "concessionaria_nome": (62, 91),
    "data_vencimento": (92, 99),
    "data_pagamento": (100, 107),
    "valor_pagamento": (108, 122),
    "doc_id": (123, 142),
    "doc_id_banco": (143, 162),
    "ocorrencias": (231, 240),
}


def extrair_campos(linha: str, layout: dict) -> dict:
    """Recorta da linha todos os campos descritos no layout."""
    return {nome: campo(linha, inicio, fim) for nome, (inicio, fim) in layout.items()}


@dataclass
class RegistroDetalhe:
    """Campos comuns a todos os segmentos de detalhe de pagamento."""

    segmento: ClassVar[str] = ""
    layout: ClassVar[dict] = {}

    numero_registro: int
    numero_linha: int
    data_pagamento: str
    valor_pagamento: str
    doc_id: str
    doc_id_banco: str
    ocorrencias: str

    @classmethod
    def da_linha(cls, linha: str, numero_linha: int = None):
        encontrado = campo(linha, 14, 14)
        if encontrado != cls.segmento:
            raise ErroCritico(
                "Este objeto espera registros do segmento ${0}. Registro encontrado: '${1}'.",
                (cls.segmento, encontrado),
                codigo="SEGMENTO_INESPERADO",
                linha=numero_linha,
            )
        valores = extrair_campos(linha, cls.layout)
        nomes = {f.name for f in fields(cls)}
        valores = {k: v for k, v in valores.items() if k in nomes}
        return cls(
            numero_registro=ler_inteiro(campo(linha, 9, 13)),
            numero_linha=numero_linha,
            **valores,
        )

    @property
    def data_pagamento_como_data(self):
        return ler_data(self.data_pagamento)

    @property
    def valor_pagamento_como_decimal(self) -> Decimal:
        return ler_valor(self.valor_pagamento)

    @property
    def doc_id_como_inteiro(self) -> Optional[int]:
        return ler_inteiro(self.doc_id)

    @property
    def ocorrencias_como_lista(self) -> list:
        return ocorrencias(self.ocorrencias)


@dataclass
class RegistroA(RegistroDetalhe):
    """Segmento A: crédito em conta (salário)."""

    segmento: ClassVar[str] = "A"
    layout: ClassVar[dict] = LAYOUT_SEGMENTO_A

    favorecido_banco: str = ""
    favorecido_agencia: str = ""
    favorecido_agencia_dv: str = ""
    favorecido_conta: str = ""
    favorecido_conta_dv: str = ""
    favorecido_agencia_conta_dv: str = ""
    favorecido_nome: str = ""


@dataclass
class RegistroJ(RegistroDetalhe):
    """
    Segmento J: pagamento de título de cobrança (boleto).

    A linha opcional J-52 (mesmo segmento, identificador '52' nas posições
    18-19) complementa este registro com os dados de inscrição do pagador e
    do beneficiário.
    """

    segmento: ClassVar[str] = "J"
    layout: ClassVar[dict] = LAYOUT_SEGMENTO_J

    codigo_barras: str = ""
    beneficiario_nome: str = ""
    data_vencimento: str = ""
    valor_titulo: str = ""
    valor_desconto: str = ""
    valor_mora_multa: str = ""
    pagador_tipo_inscricao: Optional[str] = None
    pagador_numero_inscricao: Optional[str] = None
    pagador_nome: Optional[str] = None
    beneficiario_tipo_inscricao: Optional[str] = None
    beneficiario_numero_inscricao: Optional[str] = None
    complementado: bool = False

    def complementar(self, linha: str, numero_linha: int = None) -> None:
        """Incorpora a linha J-52 a este registro."""
        novo_segmento = campo(linha, 14, 14)
        if novo_segmento != "J":
            raise ErroCritico(
                "A linha adicional deve ser do segmento 'J'. Segmento da linha adicional: '${0}'.",
                (novo_segmento,),
                codigo="J52_SEGMENTO_INVALIDO",
                linha=numero_linha,
            )
        valores = extrair_campos(linha, LAYOUT_SEGMENTO_J52)
        if valores["identificador_registro"] != "52":
            raise ErroCritico(
                "Para o segmento J é esperado o identificador '52' na linha de registro adicional.",
                codigo="J52_IDENTIFICADOR_INVALIDO",
                linha=numero_linha,
            )
        if self.complementado:
            raise ErroCritico(
                "O registro J da linha '${0}' já recebeu sua linha J-52.",
                (self.numero_linha,),
                codigo="J52_DUPLICADO",
                linha=numero_linha,
            )
        self.pagador_tipo_inscricao = valores["pagador_tipo_inscricao"]
        self.pagador_numero_inscricao = valores["pagador_numero_inscricao"]
        self.pagador_nome = valores["pagador_nome"]
        self.beneficiario_tipo_inscricao = valores["beneficiario_tipo_inscricao"]
        self.beneficiario_numero_inscricao = valores["beneficiario_numero_inscricao"]
        # J-52 traz o nome do beneficiário com 40 posições (no J são 30)
        self.beneficiario_nome = valores["beneficiario_nome"]
        self.complementado = True

    @property
    def data_vencimento_como_data(self):
        return ler_data(self.data_vencimento)

    @property
    def valor_titulo_como_decimal(self) -> Decimal:
        return ler_valor(self.valor_titulo)

    @property
    def valor_desconto_como_decimal(self) -> Decimal:
        return ler_valor(self.valor_desconto)

    @property
    def valor_mora_multa_como_decimal(self) -> Decimal:
        return ler_valor(self.valor_mora_multa)


@dataclass
class RegistroO(RegistroDetalhe):
    """Segmento O: pagamento de contas de consumo e tributos com código de barras."""

    segmento: ClassVar[str] = "O"
    layout: ClassVar[dict] = LAYOUT_SEGMENTO_O

    codigo_barras: str = ""
    concessionaria_nome: str = ""
    data_vencimento: str = ""

    @property
    def data_vencimento_como_data(self):
        return ler_data(self.data_vencimento)


SEGMENTOS_SUPORTADOS = {
    RegistroA.segmento: RegistroA,
    RegistroJ.segmento: RegistroJ,
    RegistroO.segmento: RegistroO,
}


@dataclass
class Lote:
    """Lote de serviço lido de um arquivo CNAB 240."""

    numero: int
    tipo: TipoLote
    tipo_servico: str
    forma_lancamento: str
    layout: str
    numero_linha: int = None
    indicativo_forma_pagamento: Optional[str] = None
    registros: list = field(default_factory=list)
    # header + todas as linhas de detalhe (inclusive as ignoradas) + trailer
    qtd_linhas: int = 0
    # segmento -> quantidade de linhas sem suporte no parser
    segmentos_ignorados: Counter = field(default_factory=Counter)
    qtd_registros_declarada: Optional[int] = None
    somatoria_declarada: Optional[Decimal] = None

    @classmethod
    def da_linha(cls, linha: str, numero_linha: int, tipo: TipoLote):
        valores = extrair_campos(linha, LAYOUT_HEADER_LOTE)
        indicativo = None
        if valores["layout"] in LAYOUTS_COM_INDICATIVO:
            indicativo = valores["indicativo_forma_pagamento"]
        return cls(
            numero=ler_inteiro(valores["numero_lote"]),
            tipo=tipo,
            tipo_servico=valores["tipo_servico"],
            forma_lancamento=valores["forma_lancamento"],
            layout=valores["layout"],
            numero_linha=numero_linha,
            indicativo_forma_pagamento=indicativo,
            qtd_linhas=1,
        )

    def fechar(self, linha: str) -> None:
        """Registra os totais declarados no trailer do lote."""
        valores = extrair_campos(linha, LAYOUT_TRAILER_LOTE)
        self.qtd_linhas += 1
        self.qtd_registros_declarada = ler_inteiro(valores["qtd_registros"])
        somatoria = valores["somatoria_valores"].strip()
        self.somatoria_declarada = ler_valor(somatoria) if somente_digitos(somatoria) else None

    @property
    def valor_total(self) -> Decimal:
        return sum((r.valor_pagamento_como_decimal for r in self.registros), Decimal("0.00"))


@dataclass
class ArquivoCNAB240:
    """Arquivo CNAB 240 lido: header, lotes e totais declarados no trailer."""

    codigo_banco: str = None
    tipo_inscricao: str = None
    numero_inscricao: str = None
    codigo_convenio: str = None
    agencia: str = None
    agencia_dv: str = None
    conta_numero: str = None
    conta_dv: str = None
    agencia_conta_dv: str = None
    nome_empresa: str = None
    nome_banco: str = None
    remessa_retorno: str = None
    data_hora_geracao: str = None
    numero_sequencial_arquivo: str = None
    layout: str = None
    reservado_empresa: str = None
    lotes: list = field(default_factory=list)
    qtd_linhas: int = 0
    qtd_lotes_declarada: Optional[int] = None
    qtd_registros_declarada: Optional[int] = None

    def preencher_header(self, linha: str) -> None:
        for nome, valor in extrair_campos(linha, LAYOUT_HEADER_ARQUIVO).items():
            setattr(self, nome, valor)

    def fechar(self, linha: str) -> None:
        valores = extrair_campos(linha, LAYOUT_TRAILER_ARQUIVO)
        self.qtd_lotes_declarada = ler_inteiro(valores["qtd_lotes"])
        self.qtd_registros_declarada = ler_inteiro(valores["qtd_registros"])

    @property
    def is_remessa(self) -> Optional[bool]:
        """True para remessa ('1'), False para retorno ('2'), None se desconhecido."""
        if self.remessa_retorno == "1":
            return True
        if self.remessa_retorno == "2":
            return False
        return None

    @property
    def data_geracao(self):
        return ler_data_hora(self.data_hora_geracao)

    @property
    def registros(self) -> list:
        return [r for lote in self.lotes for r in lote.registros]
