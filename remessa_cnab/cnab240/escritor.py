"""
Geração (writer) de arquivos de remessa CNAB 240 de pagamentos.

Cada pagamento adicionado é direcionado ao lote do seu tipo (títulos do
mesmo banco, títulos de outros bancos, contas de serviço ou salário). O lote é
criado no primeiro pagamento do tipo, na ordem de inclusão, e seu header é
gravado nesse momento. Os trailers e o header de arquivo são montados em
``gerar_conteudo``.
"""

import re
from dataclasses import dataclass, field
from datetime import date, datetime
from decimal import ROUND_HALF_UP, Decimal, InvalidOperation

from ..base import (
    ESTADOS_BR,
    limpar_numero,
    validar_cnpj,
    validar_codigo_barras_arrecadacao,
    validar_codigo_barras_boleto,
    validar_cpf,
)
from ..excecoes import ErroValidacao
from ..logging import get_logger
from .campos import (
    FIM_DE_LINHA,
    alfanumerico,
    conferir_tamanho,
    formatar_data,
    formatar_data_hora,
    numerico,
    remover_acentos,
    valor_decimal,
    valor_monetario,
)
from .tipos_lote import TipoLote, constantes_lote

logger = get_logger(__name__)

CENTAVOS = Decimal("0.01")

# Atributo -> (descrição, expressão que o valor deve atender por completo)
FORMATOS_EMPRESA = {
    "codigo_banco": ("Código do Banco", r"[0-9]{3}"),
    "tipo_inscricao": ("Tipo de Inscrição", r"[01239]"),
    "numero_inscricao": ("Número de Inscrição", r"[0-9]{1,14}"),
    "codigo_convenio": ("Código do Convênio", r"[\w ]{0,20}"),
    "agencia": ("Agência", r"[0-9]{1,5}"),
    "agencia_dv": ("Dígito Verificador da Agência", r"[0-9]"),
    "conta_numero": ("Número da Conta", r"[0-9]{1,12}"),
    "conta_dv": ("Dígito Verificador da Conta", r"[0-9]"),
    "agencia_conta_dv": ("Dígito Verificador da Agência/Conta", r"[0-9]"),
    "nome_empresa": ("Nome da Empresa", r"[\w ]{0,30}"),
    "nome_banco": ("Nome do Banco", r"[\w ]{0,30}"),
    "numero_sequencial_arquivo": ("Número Sequencial", r"[0-9]{1,6}"),
    "reservado_empresa": ("Reservado da Empresa", r"[\w ]{0,20}"),
    "end_logradouro": ("Logradouro", r"[\w ]{0,30}"),
    "end_numero": ("Número do Endereço", r"[0-9]{1,5}"),
    "end_complemento": ("Complemento do Endereço", r"[\w ]{0,15}"),
    "end_cidade": ("Cidade", r"[\w ]{0,20}"),
    "end_cep": ("CEP", r"[0-9]{8}"),
}

ATRIBUTOS_OBRIGATORIOS = (
    "codigo_banco",
    "tipo_inscricao",
    "numero_inscricao",
    "agencia",
    "conta_numero",
    "nome_empresa",
    "nome_banco",
    "numero_sequencial_arquivo",
)


@dataclass
class DadosEmpresa:
    """Dados da empresa pagadora e da conta de débito, gravados nos headers."""

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
    numero_sequencial_arquivo: str = None
    reservado_empresa: str = None
    end_logradouro: str = None
    end_numero: str = None
    end_complemento: str = None
    end_cidade: str = None
    end_cep: str = None
    end_uf: str = None

    def validar(self) -> None:
        """
        Confere os atributos obrigatórios e o formato dos que foram informados.
        """
        for nome in ATRIBUTOS_OBRIGATORIOS:
            if getattr(self, nome) is None:
                raise ErroValidacao(
                    "Você deve definir o atributo ${0} para gerar o arquivo CNAB240.",
                    (FORMATOS_EMPRESA[nome][0],),
                    codigo="ATRIBUTO_OBRIGATORIO",
                    campo=nome,
                )

        for nome, (descricao, padrao) in FORMATOS_EMPRESA.items():
            valor = getattr(self, nome)
            if valor is not None and not re.fullmatch(padrao, str(valor)):
                raise ErroValidacao(
                    "Valor '${0}' inválido para o atributo ${1}.",
                    (valor, descricao),
                    codigo="ATRIBUTO_INVALIDO",
                    campo=nome,
                )

        if self.end_uf is not None and self.end_uf not in ESTADOS_BR:
            raise ErroValidacao(
                "UF '${0}' inválida.", (self.end_uf,), codigo="ATRIBUTO_INVALIDO", campo="end_uf"
            )


@dataclass
class LoteRemessa:
    """Lote em montagem: linhas já gravadas, contadores e somatória."""

    tipo: TipoLote
    numero: int
    # Registros de detalhe (sequencial 9-13); linhas complementares repetem o número do principal
    contador_registros: int = 0
    # Linhas gravadas no lote: header + detalhes. O trailer entra só na geração.
    contador_segmentos: int = 0
    acumulador_valor: Decimal = Decimal("0.00")
    linhas: list = field(default_factory=list)

    def gravar(self, linhas: list) -> None:
        self.linhas.extend(linhas)
        self.contador_segmentos += len(linhas)


def _erro(modelo, argumentos=(), codigo="VALIDACAO", campo=None):
    return ErroValidacao(modelo, argumentos, codigo=codigo, campo=campo)


def _exigir(valor, campo):
    if valor is None:
        raise _erro("O campo '${0}' é obrigatório.", (campo,), "ATRIBUTO_OBRIGATORIO", campo)
    return valor


def _exigir_data(valor, campo):
    _exigir(valor, campo)
    if not isinstance(valor, date):
        raise _erro("O campo '${0}' deve ser uma data.", (campo,), "DATA_INVALIDA", campo)
    return valor


def _centavos(numero: Decimal, campo) -> Decimal:
    # Valor gravado na linha e somado no trailer do lote
    try:
        return numero.quantize(CENTAVOS, rounding=ROUND_HALF_UP)
    except InvalidOperation:
        raise _erro(
            "Valor '${0}' inválido para o campo '${1}'.", (numero, campo), "VALOR_INVALIDO", campo
        ) from None


def _exigir_positivo(valor, campo) -> Decimal:
    numero = _centavos(valor_decimal(_exigir(valor, campo), campo), campo)
    if numero <= 0:
        raise _erro(
            "Deve ser informado um valor válido e positivo para '${0}'. Recebido: '${1}'.",
            (campo, valor),
            "VALOR_NAO_POSITIVO",
            campo,
        )
    return numero


def _exigir_nao_negativo(valor, campo) -> Decimal:
    if valor is None:
        return Decimal("0.00")
    numero = _centavos(valor_decimal(valor, campo), campo)
    if numero < 0:
        raise _erro(
            "Deve ser informado None ou um valor não negativo para '${0}'. Recebido: '${1}'.",
            (campo, valor),
            "VALOR_NEGATIVO",
            campo,
        )
    return numero


def _exigir_formato(valor, padrao, campo):
    texto = "" if valor is None else str(valor)
    if not re.fullmatch(padrao, texto):
        raise _erro(
            "Valor '${0}' inválido para o campo '${1}'.", (texto, campo), "FORMATO_INVALIDO", campo
        )
    return texto


class RemessaCNAB240:
    """
    Arquivo de remessa de pagamentos em montagem.

    Não é thread-safe: cada instância deve ser usada por um único gerador.
    """

    def __init__(self, empresa: DadosEmpresa = None, data_geracao: datetime = None):
        self.empresa = empresa or DadosEmpresa()
        self.data_geracao = data_geracao or datetime.now()
        # TipoLote -> LoteRemessa, na ordem de criação
        self.lotes = {}

    # ------------------------------------------------------------------
    # Pagamentos
    # ------------------------------------------------------------------

    def adicionar_pagamento_titulo(
        self,
        codigo_barras,
        data_vencimento,
        valor_titulo,
        valor_desconto,
        valor_mora_multa,
        data_pagamento,
        valor_pagamento,
        doc_id,
        beneficiario_nome,
        beneficiario_tipo_inscricao,
        beneficiario_numero_inscricao,
    ) -> TipoLote:
        """
        Adiciona o pagamento de um título de cobrança (boleto) pelo código de barras
        de 44 dígitos. Grava um Segmento J seguido do seu J-52.

        O lote é escolhido pelo banco emissor do boleto (posições 1-3 do código de
        barras): mesmo banco da conta de débito ou outros bancos.
        """
        self.empresa.validar()
        data_vencimento = _exigir_data(data_vencimento, "data_vencimento")
        valor_titulo = _exigir_positivo(valor_titulo, "valor_titulo")
        valor_desconto = _exigir_nao_negativo(valor_desconto, "valor_desconto")
        valor_mora_multa = _exigir_nao_negativo(valor_mora_multa, "valor_mora_multa")
        data_pagamento = _exigir_data(data_pagamento, "data_pagamento")
        valor_pagamento = _exigir_positivo(valor_pagamento, "valor_pagamento")
        doc_id = _exigir_formato(doc_id, r"[0-9]{0,20}", "doc_id")
        tipo_inscricao = _exigir_formato(beneficiario_tipo_inscricao, r"[12]", "beneficiario_tipo_inscricao")
        numero_inscricao = limpar_numero(beneficiario_numero_inscricao)
        valida = validar_cpf(numero_inscricao) if tipo_inscricao == "1" else validar_cnpj(numero_inscricao)
        if not valida:
            raise _erro(
                "Número de inscrição do beneficiário '${0}' inválido.",
                (beneficiario_numero_inscricao,),
                "INSCRICAO_INVALIDA",
                "beneficiario_numero_inscricao",
            )

        codigo_barras = limpar_numero(codigo_barras)
        erros, infos = validar_codigo_barras_boleto(codigo_barras)
        if erros:
            raise _erro(
                "Código de barras de boleto inválido: ${0}",
                (" ".join(erros),),
                "CODIGO_BARRAS_INVALIDO",
                "codigo_barras",
            )
        if infos["moeda"] != "9":
            raise _erro(
                "Pagamentos em outra moeda que não Real (código 9) não são suportados. Moeda: '${0}'.",
                (infos["moeda"],),
                "MOEDA_NAO_SUPORTADA",
                "codigo_barras",
            )

        if infos["banco"] == str(self.empresa.codigo_banco):
            tipo = TipoLote.TITULO_MESMO_BANCO
        else:
            tipo = TipoLote.TITULO_OUTROS_BANCOS

        numero_lote, sequencial = self._proximo_registro(tipo)
        empresa = self.empresa

        # Segmento J
        j = (
            numerico(empresa.codigo_banco, 3, "codigo_banco")
            + numerico(numero_lote, 4, "numero_lote")
            + "3"
            + numerico(sequencial, 5, "sequencial")
            # Segmento 'J', Tipo de Movimento '0' (inclusão; '7' seria liquidação),
            # Instrução '00' (inclusão de registro detalhe liberado)
            + "J000"
            + codigo_barras
            + alfanumerico(beneficiario_nome, 30)
            + formatar_data(data_vencimento)
            + valor_monetario(valor_titulo, 15, "valor_titulo")
            + valor_monetario(valor_desconto, 15, "valor_desconto")
            + valor_monetario(valor_mora_multa, 15, "valor_mora_multa")
            + formatar_data(data_pagamento)
            + valor_monetario(valor_pagamento, 15, "valor_pagamento")
            # Quantidade da Moeda 168-182
            + "0" * 15
            + numerico(doc_id, 20, "doc_id")
            # Nosso Número 203-222
            + " " * 20
            # Código de Moeda 223-224: '09' = Real
            + "09"
            + " " * 16
        )

        # Segmento J-52: branco na posição 15 e identificador '52' em 18-19
        j52 = (
            numerico(empresa.codigo_banco, 3, "codigo_banco")
            + numerico(numero_lote, 4, "numero_lote")
            + "3"
            + numerico(sequencial, 5, "sequencial")
            + "J 0052"
            + numerico(empresa.tipo_inscricao, 1, "tipo_inscricao")
            + numerico(empresa.numero_inscricao, 15, "numero_inscricao")
            + alfanumerico(empresa.nome_empresa, 40)
            + tipo_inscricao
            + numerico(numero_inscricao, 15, "beneficiario_numero_inscricao")
            + alfanumerico(beneficiario_nome, 40)
            # Sacador/avalista 132-187: o próprio beneficiário
            + tipo_inscricao
            + numerico(numero_inscricao, 15, "beneficiario_numero_inscricao")
            + alfanumerico(beneficiario_nome, 40)
            + " " * 53
        )

        linhas = [
            conferir_tamanho(j, "o Segmento J"),
            conferir_tamanho(j52, "o Segmento J-52"),
        ]
        self._gravar(tipo, linhas, valor_pagamento)
        return tipo

    def adicionar_pagamento_conta_servico(
        self,
        codigo_barras,
        data_vencimento,
        data_pagamento,
        valor_pagamento,
        doc_id,
        concessionaria_nome,
    ) -> TipoLote:
        """
        Adiciona o pagamento de uma conta de consumo/tributo com código de barras
        de arrecadação (inicia com '8'). Grava um Segmento O.
        """
        self.empresa.validar()
        if data_vencimento is not None:
            _exigir_data(data_vencimento, "data_vencimento")
        data_pagamento = _exigir_data(data_pagamento, "data_pagamento")
        valor_pagamento = _exigir_positivo(valor_pagamento, "valor_pagamento")
        doc_id = _exigir_formato(doc_id, r"[0-9]{0,20}", "doc_id")

        codigo_barras = limpar_numero(codigo_barras)
        erros, _ = validar_codigo_barras_arrecadacao(codigo_barras)
        if erros:
            raise _erro(
                "Código de barras de arrecadação inválido: ${0}",
                (" ".join(erros),),
                "CODIGO_BARRAS_INVALIDO",
                "codigo_barras",
            )

        tipo = TipoLote.CONTAS_SERVICO
        numero_lote, sequencial = self._proximo_registro(tipo)

        o = (
            numerico(self.empresa.codigo_banco, 3, "codigo_banco")
            + numerico(numero_lote, 4, "numero_lote")
            + "3"
            + numerico(sequencial, 5, "sequencial")
            + "O000"
            + codigo_barras
            + alfanumerico(concessionaria_nome, 30)
            + formatar_data(data_vencimento)
            + formatar_data(data_pagamento)
            + valor_monetario(valor_pagamento, 15, "valor_pagamento")
            + numerico(doc_id, 20, "doc_id")
            # Nosso Número 143-162, uso FEBRABAN 163-230, ocorrências 231-240
            + " " * 20
            + " " * 68
            + " " * 10
        )

        self._gravar(tipo, [conferir_tamanho(o, "o Segmento O")], valor_pagamento)
        return tipo

    def adicionar_pagamento_salario(
        self,
        favorecido_banco,
        favorecido_agencia,
        favorecido_agencia_dv,
        favorecido_conta,
        favorecido_conta_dv,
        favorecido_agencia_conta_dv,
        favorecido_nome,
        data_pagamento,
        valor_pagamento,
        doc_id,
        informacao_complementar,
        favorecido_cpf,
    ) -> TipoLote:
        """
        Adiciona um crédito de salário em conta. Grava um Segmento A seguido do
        Segmento B com o CPF do favorecido.
        """
        self.empresa.validar()
        favorecido_banco = _exigir_formato(favorecido_banco, r"[0-9]{3}", "favorecido_banco")
        favorecido_agencia = _exigir_formato(favorecido_agencia, r"[0-9]{1,5}", "favorecido_agencia")
        favorecido_conta = _exigir_formato(favorecido_conta, r"[0-9]{1,12}", "favorecido_conta")
        for nome, dv in (
            ("favorecido_agencia_dv", favorecido_agencia_dv),
            ("favorecido_conta_dv", favorecido_conta_dv),
            ("favorecido_agencia_conta_dv", favorecido_agencia_conta_dv),
        ):
            if dv is not None:
                _exigir_formato(dv, r"[0-9A-Za-z ]?", nome)
        data_pagamento = _exigir_data(data_pagamento, "data_pagamento")
        valor_pagamento = _exigir_positivo(valor_pagamento, "valor_pagamento")
        doc_id = _exigir_formato(doc_id, r"[0-9]{0,20}", "doc_id")

        cpf = limpar_numero(favorecido_cpf)
        if len(cpf) != 11 or not validar_cpf(cpf):
            raise _erro(
                "CPF do favorecido '${0}' inválido.",
                (favorecido_cpf,),
                "INSCRICAO_INVALIDA",
                "favorecido_cpf",
            )

        tipo = TipoLote.SALARIO
        numero_lote, sequencial = self._proximo_registro(tipo)
        prefixo = (
            numerico(self.empresa.codigo_banco, 3, "codigo_banco")
            + numerico(numero_lote, 4, "numero_lote")
            + "3"
            + numerico(sequencial, 5, "sequencial")
        )

        a = (
            prefixo
            # Segmento 'A', Tipo de Movimento '0', Instrução '00', Câmara '000'
            + "A000000"
            + favorecido_banco
            + numerico(favorecido_agencia, 5, "favorecido_agencia")
            + alfanumerico(favorecido_agencia_dv, 1)
            + numerico(favorecido_conta, 12, "favorecido_conta")
            + alfanumerico(favorecido_conta_dv, 1)
            + alfanumerico(favorecido_agencia_conta_dv, 1)
            + alfanumerico(favorecido_nome, 30)
            + alfanumerico(doc_id, 20)
            + formatar_data(data_pagamento)
            + "BRL"
            # Quantidade da Moeda 105-119
            + "0" * 15
            + valor_monetario(valor_pagamento, 15, "valor_pagamento")
            # Nosso Número 135-154, Data Real 155-162, Valor Real 163-177
            + " " * 20
            + "0" * 8
            + "0" * 15
            + alfanumerico(informacao_complementar, 40)
            # Finalidades 218-226, uso FEBRABAN 227-229
            + " " * 9
            + " " * 3
            # Aviso ao favorecido 230: '0' = não emite
            + "0"
            + " " * 10
        )

        b = (
            prefixo
            + "B"
            + " " * 3
            # Tipo de inscrição do favorecido '1' = CPF
            + "1"
            + numerico(cpf, 14, "favorecido_cpf")
            # Endereço do favorecido 33-127 não informado
            + " " * 30
            + "0" * 5
            + " " * 15
            + " " * 15
            + " " * 20
            + "0" * 5
            + " " * 3
            + " " * 2
            # Vencimento 128-135 e valores 136-210
            + "0" * 8
            + "0" * 75
            # Código do documento do favorecido 211-225
            + " " * 15
            + "0"
            + " " * 6
            + " " * 8
        )

        linhas = [
            conferir_tamanho(a, "o Segmento A"),
            conferir_tamanho(b, "o Segmento B"),
        ]
        self._gravar(tipo, linhas, valor_pagamento)
        return tipo

    # ------------------------------------------------------------------
    # Geração
    # ------------------------------------------------------------------

    def gerar_conteudo(self) -> str:
        """
        Monta o arquivo completo: header de arquivo, lotes (com seus trailers) e
        trailer de arquivo, com quebra de linha CRLF após cada registro.
        """
        self.empresa.validar()
        if not self.lotes:
            raise ErroValidacao(
                "Nenhum pagamento foi adicionado ao arquivo de remessa.",
                codigo="REMESSA_SEM_PAGAMENTOS",
            )

        linhas = [self._header_arquivo()]
        # header e trailer de arquivo
        total_registros = 2
        for lote in self.lotes.values():
            linhas.extend(lote.linhas)
            linhas.append(self._trailer_lote(lote))
            total_registros += lote.contador_segmentos + 1
        linhas.append(self._trailer_arquivo(len(self.lotes), total_registros))

        conteudo = "".join(linha + FIM_DE_LINHA for linha in linhas)
        logger.info(
            "Arquivo de remessa CNAB 240 gerado: banco %s, %d lote(s), %d registro(s).",
            self.empresa.codigo_banco,
            len(self.lotes),
            total_registros,
        )
        return remover_acentos(conteudo)

    def _proximo_registro(self, tipo: TipoLote):
        """Número do lote e sequencial que o próximo registro do tipo receberá."""
        lote = self.lotes.get(tipo)
        if lote is None:
            return len(self.lotes) + 1, 1
        return lote.numero, lote.contador_registros + 1

    def _gravar(self, tipo: TipoLote, linhas: list, valor: Decimal) -> None:
        lote = self._obter_lote(tipo)
        lote.gravar(linhas)
        lote.contador_registros += 1
        lote.acumulador_valor += valor

    def _obter_lote(self, tipo: TipoLote) -> LoteRemessa:
        lote = self.lotes.get(tipo)
        if lote is None:
            lote = LoteRemessa(tipo=tipo, numero=len(self.lotes) + 1)
            lote.gravar([self._header_lote(lote)])
            self.lotes[tipo] = lote
            logger.debug("Lote %d criado para %s.", lote.numero, tipo.name)
        return lote

    def _dados_conta(self) -> str:
        """Posições 18-102, comuns ao header de arquivo e ao header de lote."""
        e = self.empresa
        return (
            numerico(e.tipo_inscricao, 1, "tipo_inscricao")
            + numerico(e.numero_inscricao, 14, "numero_inscricao")
            + alfanumerico(e.codigo_convenio, 20)
            + numerico(e.agencia, 5, "agencia")
            + numerico(e.agencia_dv, 1, "agencia_dv")
            + numerico(e.conta_numero, 12, "conta_numero")
            + numerico(e.conta_dv, 1, "conta_dv")
            + numerico(e.agencia_conta_dv, 1, "agencia_conta_dv")
            + alfanumerico(e.nome_empresa, 30)
        )

    def _header_arquivo(self) -> str:
        e = self.empresa
        linha = (
            numerico(e.codigo_banco, 3, "codigo_banco")
            # Lote '0000', Tipo de Registro '0', uso FEBRABAN 9-17
            + "00000"
            + " " * 9
            + self._dados_conta()
            + alfanumerico(e.nome_banco, 30)
            + " " * 10
            # Código Remessa/Retorno 143: '1' = remessa
            + "1"
            + formatar_data_hora(self.data_geracao)
            + numerico(e.numero_sequencial_arquivo, 6, "numero_sequencial_arquivo")
            # Layout '103', densidade '00000', reservado do banco 172-191
            + "103"
            + "00000"
            + " " * 20
            + alfanumerico(e.reservado_empresa, 20)
            + " " * 29
        )
        return conferir_tamanho(linha, "o Header de Arquivo")

    def _header_lote(self, lote: LoteRemessa) -> str:
        e = self.empresa
        constantes = constantes_lote(lote.tipo)
        linha = (
            numerico(e.codigo_banco, 3, "codigo_banco")
            + numerico(lote.numero, 4, "numero_lote")
            # Tipo de Registro '1', Tipo da Operação 'C' (crédito)
            + "1C"
            + constantes.tipo_servico
            + constantes.forma_lancamento
            + constantes.layout
            + " "
            + self._dados_conta()
            + alfanumerico(e.nome_banco, 30)
            + " " * 10
            + alfanumerico(e.end_logradouro, 30)
            + numerico(e.end_numero, 5, "end_numero")
            + alfanumerico(e.end_complemento, 15)
            + alfanumerico(e.end_cidade, 20)
            + alfanumerico(e.end_cep, 8)
            + alfanumerico(e.end_uf, 2)
            + alfanumerico(constantes.indicativo_forma_pagamento, 2)
            + " " * 6
            + " " * 10
        )
        return conferir_tamanho(linha, f"o Header do Lote {lote.numero}")

    def _trailer_lote(self, lote: LoteRemessa) -> str:
        linha = (
            numerico(self.empresa.codigo_banco, 3, "codigo_banco")
            + numerico(lote.numero, 4, "numero_lote")
            + "5"
            + " " * 9
            # Quantidade de registros: header + detalhes + o próprio trailer
            + numerico(lote.contador_segmentos + 1, 6, "qtd_registros_lote")
            + valor_monetario(lote.acumulador_valor, 18, "somatoria_valores")
            # Somatória de quantidade de moedas 42-59
            + "0" * 18
            + " " * 181
        )
        return conferir_tamanho(linha, f"o Trailer do Lote {lote.numero}")

    def _trailer_arquivo(self, qtd_lotes: int, qtd_registros: int) -> str:
        linha = (
            numerico(self.empresa.codigo_banco, 3, "codigo_banco")
            # Lote '9999', Tipo de Registro '9'
            + "99999"
            + " " * 9
            + numerico(qtd_lotes, 6, "qtd_lotes")
            + numerico(qtd_registros, 6, "qtd_registros")
            # Quantidade de contas para conciliação 30-35
            + "000000"
            + " " * 205
        )
        return conferir_tamanho(linha, "o Trailer de Arquivo")
