"""
Leitura (parser) de arquivos CNAB 240.

Valida a sequência dos tipos de registro (posição 8) linha a linha e monta o
``ArquivoCNAB240`` com seus lotes e registros de detalhe:

  0 = Header de Arquivo
  1 = Header de Lote
  3 = Detalhe
  5 = Trailer de Lote
  9 = Trailer de Arquivo
"""

from ..config import ConfiguracaoCNAB
from ..excecoes import ErroCritico, ErroValidacao
from ..logging import get_logger
from . import conferencia
from .campos import TAMANHO_LINHA, campo
from .registros import SEGMENTOS_SUPORTADOS, ArquivoCNAB240, Lote, RegistroJ
from .tipos_lote import LAYOUTS_LOTE_CONHECIDOS, identificar_tipo_lote

logger = get_logger(__name__)

LAYOUT_ARQUIVO_SUPORTADO = "103"

# Tipo de registro anterior -> tipos permitidos na linha seguinte (None = início do arquivo)
TRANSICOES = {
    None: {"0"},
    "0": {"1"},
    "1": {"3"},
    "3": {"3", "5"},
    "5": {"1", "9"},
    "9": set(),
}

MENSAGENS_TRANSICAO = {
    "0": "O registro do tipo '0' é esperado na primeira linha do arquivo. Encontrado na linha '${0}'.",
    "1": "O registro do tipo '1' é esperado após a abertura do arquivo ou após o fechamento de outro lote. Encontrado na linha '${0}'.",
    "3": "O registro do tipo '3' é esperado após a abertura do lote ou após outro registro detalhe. Encontrado na linha '${0}'.",
    "5": "O registro do tipo '5' é esperado após o lançamento de registros detalhes. Encontrado na linha '${0}'.",
    "9": "O registro do tipo '9' é esperado após o fechamento dos lotes. Encontrado na linha '${0}'.",
}


class LeitorCNAB240:
    """
    Máquina de estados do parser. Uma instância lê um único arquivo.
    """

    def __init__(self):
        self.arquivo = ArquivoCNAB240()
        self.tipo_anterior = None
        self.ultimo_numero_linha = 0
        self._lote_atual = None
        # Último registro de detalhe criado; só um J pode receber a linha J-52
        self._ultimo_registro = None

    def ler(self, linhas) -> ArquivoCNAB240:
        for numero_linha, linha in enumerate(linhas, start=1):
            self.processar_linha(linha, numero_linha)
        self.finalizar()
        return self.arquivo

    def processar_linha(self, linha: str, numero_linha: int) -> None:
        linha = linha.rstrip("\r\n")
        if not linha.strip():
            return

        if len(linha) != TAMANHO_LINHA:
            raise ErroValidacao(
                "A linha '${0}' não contém 240 caracteres (encontrado ${1}).",
                (numero_linha, len(linha)),
                codigo="LINHA_TAMANHO",
                linha=numero_linha,
            )

        self.ultimo_numero_linha = numero_linha
        self.arquivo.qtd_linhas += 1
        tipo_registro = campo(linha, 8, 8)
        self._validar_transicao(tipo_registro, numero_linha)

        if tipo_registro != "0" and campo(linha, 1, 3) != self.arquivo.codigo_banco:
            raise ErroValidacao(
                "Linha '${0}': código do banco '${1}' diferente do header '${2}'.",
                (numero_linha, campo(linha, 1, 3), self.arquivo.codigo_banco),
                codigo="CODIGO_BANCO_DIVERGENTE",
                linha=numero_linha,
            )

        if tipo_registro == "0":
            self._processar_header_arquivo(linha, numero_linha)
        elif tipo_registro == "1":
            self._processar_header_lote(linha, numero_linha)
        elif tipo_registro == "3":
            self._processar_detalhe(linha, numero_linha)
        elif tipo_registro == "5":
            self._lote_atual.fechar(linha)
            self._lote_atual = None
            self._ultimo_registro = None
        elif tipo_registro == "9":
            self.arquivo.fechar(linha)

        self.tipo_anterior = tipo_registro

    def finalizar(self) -> None:
        if self.tipo_anterior != "9":
            raise ErroValidacao(
                "Arquivo incompleto: o trailer de arquivo (tipo '9') não foi encontrado. Última linha lida: '${0}'.",
                (self.ultimo_numero_linha,),
                codigo="ARQUIVO_INCOMPLETO",
                linha=self.ultimo_numero_linha or None,
            )

    def _validar_transicao(self, tipo_registro: str, numero_linha: int) -> None:
        if tipo_registro not in MENSAGENS_TRANSICAO:
            raise ErroValidacao(
                "Tipo de registro '${0}' desconhecido encontrado na linha '${1}'.",
                (tipo_registro, numero_linha),
                codigo="TIPO_REGISTRO_DESCONHECIDO",
                linha=numero_linha,
            )
        if self.tipo_anterior == "9":
            raise ErroValidacao(
                "Nenhum registro é esperado após o trailer do arquivo. Encontrado registro do tipo '${0}' na linha '${1}'.",
                (tipo_registro, numero_linha),
                codigo="SEQUENCIA_REGISTROS",
                linha=numero_linha,
            )
        if tipo_registro not in TRANSICOES[self.tipo_anterior]:
            raise ErroValidacao(
                MENSAGENS_TRANSICAO[tipo_registro],
                (numero_linha,),
                codigo="SEQUENCIA_REGISTROS",
                linha=numero_linha,
            )

    def _processar_header_arquivo(self, linha: str, numero_linha: int) -> None:
        # No da Versão do Layout do Arquivo 164-166
        layout = campo(linha, 164, 166)
        if layout != LAYOUT_ARQUIVO_SUPORTADO:
            raise ErroValidacao(
                "Layout de Header de Arquivo desconhecido: '${0}'.",
                (layout,),
                codigo="LAYOUT_ARQUIVO_DESCONHECIDO",
                linha=numero_linha,
                campo="layout",
            )
        self.arquivo.preencher_header(linha)

    def _processar_header_lote(self, linha: str, numero_linha: int) -> None:
        tipo = identificar_tipo_lote(campo(linha, 10, 11), campo(linha, 12, 13), numero_linha)
        layout = campo(linha, 14, 16)
        if layout not in LAYOUTS_LOTE_CONHECIDOS:
            raise ErroValidacao(
                "Layout de Header de Lote desconhecido: '${0}'.",
                (layout,),
                codigo="LAYOUT_LOTE_DESCONHECIDO",
                linha=numero_linha,
                campo="layout",
            )
        self._lote_atual = Lote.da_linha(linha, numero_linha, tipo)
        self.arquivo.lotes.append(self._lote_atual)

    def _processar_detalhe(self, linha: str, numero_linha: int) -> None:
        lote = self._lote_atual
        lote.qtd_linhas += 1
        segmento = campo(linha, 14, 14)

        # O J-52 tem branco obrigatório na posição 15 (no J principal é o tipo de movimento)
        if segmento == "J" and campo(linha, 15, 15) == " " and campo(linha, 18, 19) == "52":
            if not isinstance(self._ultimo_registro, RegistroJ):
                raise ErroCritico(
                    "Encontrado um registro detalhe J-52 sem um registro J predecessor na linha '${0}'.",
                    (numero_linha,),
                    codigo="J52_SEM_J",
                    linha=numero_linha,
                )
            self._ultimo_registro.complementar(linha, numero_linha)
            self._ultimo_registro = None
            return

        classe = SEGMENTOS_SUPORTADOS.get(segmento)
        if classe is None:
            logger.debug(
                "Registro Segmento '%s' na linha %d ignorado por não haver suporte no parser.",
                segmento,
                numero_linha,
            )
            lote.segmentos_ignorados[segmento] += 1
            self._ultimo_registro = None
            return

        registro = classe.da_linha(linha, numero_linha)
        lote.registros.append(registro)
        self._ultimo_registro = registro


def _linhas(origem):
    # Só CRLF/LF separam registros; splitlines também quebraria em \x85, \x0c etc.
    if isinstance(origem, str):
        return origem.split("\n")
    return origem


def ler_arquivo(origem, conferir_totais: bool = None, config: ConfiguracaoCNAB = None) -> ArquivoCNAB240:
    """
    Lê um arquivo CNAB 240 a partir do conteúdo (str) ou de um iterável de
    linhas (arquivo aberto em modo texto, lista de strings).

    Com ``conferir_totais`` (padrão da configuração, ligado), as quantidades e
    somatórias declaradas nos trailers são conferidas com o que foi lido.
    """
    config = config or ConfiguracaoCNAB()
    if conferir_totais is None:
        conferir_totais = config.conferir_totais

    arquivo = LeitorCNAB240().ler(_linhas(origem))

    if conferir_totais:
        erros = conferencia.conferir_totais(arquivo)
        if erros:
            raise ErroValidacao(
                "Totais declarados nos trailers não conferem: ${0}",
                ("; ".join(erros),),
                codigo="TOTAIS_DIVERGENTES",
            )

    logger.info(
        "Arquivo CNAB 240 lido: banco %s, %d lote(s), %d registro(s) de detalhe.",
        arquivo.codigo_banco,
        len(arquivo.lotes),
        len(arquivo.registros),
    )
    return arquivo


def ler_arquivo_bytes(conteudo: bytes, conferir_totais: bool = None, config: ConfiguracaoCNAB = None) -> ArquivoCNAB240:
    """Decodifica o conteúdo com o encoding configurado e faz a leitura."""
    config = config or ConfiguracaoCNAB()
    texto = conteudo.decode(config.encoding, errors="replace")
    return ler_arquivo(texto, conferir_totais=conferir_totais, config=config)
