import datetime

import pytest

from remessa_cnab.cnab240 import DadosEmpresa, RemessaCNAB240

# Boleto do próprio banco 341: fator 1007, valor 150,00, DV geral 1
BOLETO_ITAU = "34191" + "1007" + "0000015000" + "0" * 25
# Mesmo boleto emitido pelo banco 001: DV geral 2
BOLETO_BB = "00192" + "1007" + "0000015000" + "0" * 25
# Arrecadação, identificador de valor 6 (módulo 10), valor 150,00, DV 6
CONTA_SERVICO = "8266" + "00000015000" + "0" * 29

CPF_VALIDO = "11144477735"
CNPJ_VALIDO = "11222333000181"

DATA_GERACAO = datetime.datetime(2025, 3, 1, 10, 30, 0)


def montar_linha(*trechos):
    """Linha de 240 brancos com os trechos (posição 1-based, texto) sobrepostos."""
    linha = [" "] * 240
    for posicao, texto in trechos:
        linha[posicao - 1:posicao - 1 + len(texto)] = texto
    return "".join(linha)


@pytest.fixture
def empresa():
    return DadosEmpresa(
        codigo_banco="341",
        tipo_inscricao="2",
        numero_inscricao="12345678000190",
        codigo_convenio="CONVENIO123",
        agencia="1234",
        agencia_dv="5",
        conta_numero="123456",
        conta_dv="7",
        agencia_conta_dv="0",
        nome_empresa="EMPRESA TESTE LTDA",
        nome_banco="BANCO ITAU",
        numero_sequencial_arquivo="1",
        end_logradouro="RUA DAS FLORES",
        end_numero="100",
        end_complemento="SALA 1",
        end_cidade="SAO PAULO",
        end_cep="01001000",
        end_uf="SP",
    )


@pytest.fixture
def remessa(empresa):
    return RemessaCNAB240(empresa, data_geracao=DATA_GERACAO)


def adicionar_titulo(remessa, codigo_barras=BOLETO_ITAU, **kwargs):
    dados = dict(
        codigo_barras=codigo_barras,
        data_vencimento=datetime.date(2025, 3, 1),
        valor_titulo="150.00",
        valor_desconto=None,
        valor_mora_multa=None,
        data_pagamento=datetime.date(2025, 3, 1),
        valor_pagamento="150.00",
        doc_id="123",
        beneficiario_nome="FORNECEDOR EXEMPLO",
        beneficiario_tipo_inscricao="1",
        beneficiario_numero_inscricao=CPF_VALIDO,
    )
    dados.update(kwargs)
    return remessa.adicionar_pagamento_titulo(**dados)


def adicionar_conta_servico(remessa, **kwargs):
    dados = dict(
        codigo_barras=CONTA_SERVICO,
        data_vencimento=datetime.date(2025, 3, 10),
        data_pagamento=datetime.date(2025, 3, 5),
        valor_pagamento="150.00",
        doc_id="456",
        concessionaria_nome="COMPANHIA DE ENERGIA",
    )
    dados.update(kwargs)
    return remessa.adicionar_pagamento_conta_servico(**dados)


def adicionar_salario(remessa, **kwargs):
    dados = dict(
        favorecido_banco="341",
        favorecido_agencia="4321",
        favorecido_agencia_dv="0",
        favorecido_conta="98765",
        favorecido_conta_dv="4",
        favorecido_agencia_conta_dv=None,
        favorecido_nome="FUNCIONARIO EXEMPLO",
        data_pagamento=datetime.date(2025, 3, 5),
        valor_pagamento="2500.50",
        doc_id="789",
        informacao_complementar="SALARIO MARCO",
        favorecido_cpf=CPF_VALIDO,
    )
    dados.update(kwargs)
    return remessa.adicionar_pagamento_salario(**dados)
