"""Tabelas e validadores compartilhados (bancos, CPF/CNPJ, códigos de barras, UF)."""

from datetime import datetime, timedelta

BANCOS_CNAB = {
    "001": "Banco do Brasil",
    "070": "Banco de Brasília (BRB)",
    "104": "Caixa Economica Federal",
    "208": "BTG Pactual",
    "237": "Bradesco",
    "341": "Itau Unibanco",
    "033": "Santander",
    "756": "Sicoob",
    "748": "Sicredi",
}

ESTADOS_BR = {
    "AC", "AL", "AP", "AM", "BA", "CE", "DF", "ES",
    "GO", "MA", "MT", "MS", "MG", "PA", "PB", "PR",
    "PE", "PI", "RJ", "RN", "RS", "RO", "RR", "SC",
    "SP", "SE", "TO",
}

# Data base do fator de vencimento dos boletos (FEBRABAN)
DATA_BASE_FATOR = datetime(1997, 10, 7)


def identificar_banco(codigo):
    """
    Devolve (codigo, nome) do banco a partir do código de compensação de 3 dígitos.
    """
    return codigo, BANCOS_CNAB.get(codigo, "Banco não mapeado")


def limpar_numero(s: str) -> str:
    """
    Remove todos os caracteres que não são dígitos ASCII (0-9).
    """
    return "".join(ch for ch in (s or "") if ch in "0123456789")


def validar_cpf(cpf: str) -> bool:
    cpf = limpar_numero(cpf)
    if len(cpf) != 11:
        return False
    if cpf == cpf[0] * 11:
        return False

    soma = 0
    for i in range(9):
        soma += int(cpf[i]) * (10 - i)
    resto = (soma * 10) % 11
    if resto == 10:
        resto = 0
    if resto != int(cpf[9]):
        return False

    soma = 0
    for i in range(10):
        soma += int(cpf[i]) * (11 - i)
    resto = (soma * 10) % 11
    if resto == 10:
        resto = 0
    if resto != int(cpf[10]):
        return False

    return True


def validar_cnpj(cnpj: str) -> bool:
    cnpj = limpar_numero(cnpj)
    if len(cnpj) != 14:
        return False
    if cnpj == cnpj[0] * 14:
        return False

    pesos1 = [5, 4, 3, 2, 9, 8, 7, 6, 5, 4, 3, 2]
    pesos2 = [6] + pesos1

    soma = sum(int(cnpj[i]) * pesos1[i] for i in range(12))
    resto = soma % 11
    dv1 = 0 if resto < 2 else 11 - resto
    if dv1 != int(cnpj[12]):
        return False

    soma = sum(int(cnpj[i]) * pesos2[i] for i in range(13))
    resto = soma % 11
    dv2 = 0 if resto < 2 else 11 - resto
    if dv2 != int(cnpj[13]):
        return False

    return True


def validar_cpf_ou_cnpj(documento: str) -> bool:
    """
    Aceita CPF (11 dígitos) ou CNPJ (14 dígitos), decidindo pelo tamanho.
    """
    numeros = limpar_numero(documento)
    if len(numeros) == 11:
        return validar_cpf(numeros)
    if len(numeros) == 14:
        return validar_cnpj(numeros)
    return False


def modulo10(numero: str) -> int:
    """
    Calcula o dígito verificador pelo módulo 10 (pesos 2 e 1 alternados da direita para a esquerda).
    """
    soma = 0
    multiplicador = 2
    for d in reversed(numero):
        n = int(d)
        prod = n * multiplicador
        # se resultado tiver 2 dígitos, soma os dígitos
        if prod >= 10:
            prod = (prod // 10) + (prod % 10)
        soma += prod
        multiplicador = 1 if multiplicador == 2 else 2

    resto = soma % 10
    dv = (10 - resto) % 10
    return dv


def _soma_pesos_2_a_9(numero: str) -> int:
    soma = 0
    peso = 2
    for d in reversed(numero):
        soma += int(d) * peso
        peso += 1
        if peso > 9:
            peso = 2
    return soma


def modulo11_boleto(numero: str) -> int:
    """
    Dígito verificador geral do código de barras de boleto (módulo 11, FEBRABAN):
      - pesos de 2 a 9 (repetindo) da direita para a esquerda
      - DV = 11 - (soma % 11)
      - se resultado em [0, 1, 10, 11], utiliza-se '1'.
    """
    dv = 11 - (_soma_pesos_2_a_9(numero) % 11)
    if dv in (0, 1, 10, 11):
        dv = 1
    return dv


def modulo11_arrecadacao(numero: str) -> int:
    """
    Dígito verificador módulo 11 dos códigos de arrecadação (contas de consumo e tributos):
    resto 0 ou 1 resulta em DV 0, resto 10 resulta em DV 1.
    """
    resto = _soma_pesos_2_a_9(numero) % 11
    if resto in (0, 1):
        return 0
    if resto == 10:
        return 1
    return 11 - resto


def validar_codigo_barras_boleto(codigo: str):
    """
    Valida o código de barras (44 dígitos) de um boleto de cobrança.

    Estrutura:
      - banco emissor: 1-3
      - moeda: 4 ('9' = Real)
      - DV geral: 5
      - fator de vencimento: 6-9
      - valor: 10-19
      - campo livre: 20-44

    Retorna (erros, infos).
    """
    erros = []
    infos = {}

    numeros = limpar_numero(codigo)
    if len(numeros) != 44:
        erros.append(f"Tamanho inválido: esperado 44 dígitos, recebido {len(numeros)}.")
        return erros, infos

    banco = numeros[0:3]
    moeda = numeros[3]
    dv = int(numeros[4])
    fator = numeros[5:9]
    valor_str = numeros[9:19]

    dv_calculado = modulo11_boleto(numeros[:4] + numeros[5:])
    if dv_calculado != dv:
        erros.append(f"Dígito verificador geral inválido. Esperado {dv_calculado}, encontrado {dv}.")

    infos["codigo_barras"] = numeros
    infos["banco"] = banco
    infos["nome_banco"] = BANCOS_CNAB.get(banco, "Banco não mapeado")
    infos["moeda"] = moeda

    if fator == "0000":
        infos["vencimento"] = None
    else:
        infos["vencimento"] = (DATA_BASE_FATOR + timedelta(days=int(fator))).date()

    infos["valor_centavos"] = int(valor_str)
    infos["valor_reais"] = int(valor_str) / 100.0

    return erros, infos


def validar_codigo_barras_arrecadacao(codigo: str):
    """
    Valida o código de barras (44 dígitos) de arrecadação: contas de consumo,
    concessionárias e tributos.

    Estrutura:
      - produto: 1 ('8' = arrecadação)
      - segmento: 2
      - identificador de valor: 3 ('6'/'7' = módulo 10, '8'/'9' = módulo 11)
      - DV geral: 4
      - valor: 5-15
      - empresa/órgão e campo livre: 16-44

    Retorna (erros, infos).
    """
    erros = []
    infos = {}

    numeros = limpar_numero(codigo)
    if len(numeros) != 44:
        erros.append(f"Tamanho inválido: esperado 44 dígitos, recebido {len(numeros)}.")
        return erros, infos

    if numeros[0] != "8":
        erros.append(f"Código de arrecadação deve iniciar com '8', encontrado '{numeros[0]}'.")
        return erros, infos

    identificador = numeros[2]
    dv = int(numeros[3])
    sem_dv = numeros[:3] + numeros[4:]

    if identificador in ("6", "7"):
        dv_calculado = modulo10(sem_dv)
    elif identificador in ("8", "9"):
        dv_calculado = modulo11_arrecadacao(sem_dv)
    else:
        erros.append(f"Identificador de valor '{identificador}' inválido (esperado 6, 7, 8 ou 9).")
        return erros, infos

    if dv_calculado != dv:
        erros.append(f"Dígito verificador geral inválido. Esperado {dv_calculado}, encontrado {dv}.")

    infos["codigo_barras"] = numeros
    infos["segmento"] = numeros[1]
    infos["identificador_valor"] = identificador
    if identificador in ("6", "8"):
        infos["valor_centavos"] = int(numeros[4:15])
        infos["valor_reais"] = int(numeros[4:15]) / 100.0

    return erros, infos
