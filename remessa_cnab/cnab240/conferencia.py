"""Conferência dos totais declarados nos trailers de lote e de arquivo CNAB 240."""

from .registros import ArquivoCNAB240

# Segmentos complementares, sem valor de pagamento próprio: não impedem a conferência da somatória
SEGMENTOS_SEM_VALOR = {"B", "C", "Z"}


def validar_totais_lotes(arquivo: ArquivoCNAB240):
    """
    Confere, para cada lote, o trailer (registro tipo 5):
    - Posição 18-23 => quantidade de registros do lote (header + detalhes + trailer)
    - Posição 24-41 => somatória dos valores de pagamento

    A somatória só é conferida quando todos os segmentos com valor foram lidos.
    """
    erros = []

    for lote in arquivo.lotes:
        if lote.qtd_registros_declarada is None:
            erros.append(
                f"Lote {lote.numero}: quantidade de registros no trailer não é numérica."
            )
        elif lote.qtd_registros_declarada != lote.qtd_linhas:
            erros.append(
                f"Lote {lote.numero}: quantidade de registros informada no trailer "
                f"({lote.qtd_registros_declarada}) é diferente da quantidade real de "
                f"linhas do lote ({lote.qtd_linhas})."
            )

        if set(lote.segmentos_ignorados) - SEGMENTOS_SEM_VALOR:
            continue
        if lote.somatoria_declarada is None:
            erros.append(f"Lote {lote.numero}: somatória de valores no trailer não é numérica.")
        elif lote.somatoria_declarada != lote.valor_total:
            erros.append(
                f"Lote {lote.numero}: somatória informada no trailer ({lote.somatoria_declarada}) "
                f"é diferente da soma dos pagamentos do lote ({lote.valor_total})."
            )

    return erros


def validar_totais_arquivo(arquivo: ArquivoCNAB240):
    """
    Confere o trailer de arquivo (registro tipo 9):
    - Posição 18-23 => quantidade de lotes do arquivo
    - Posição 24-29 => quantidade de registros do arquivo (todas as linhas)
    """
    erros = []

    if arquivo.qtd_lotes_declarada is None:
        erros.append("Trailer de arquivo: quantidade de lotes não é numérica.")
    elif arquivo.qtd_lotes_declarada != len(arquivo.lotes):
        erros.append(
            f"Trailer de arquivo: quantidade de lotes informada ({arquivo.qtd_lotes_declarada}) "
            f"é diferente da quantidade real de lotes ({len(arquivo.lotes)})."
        )

    if arquivo.qtd_registros_declarada is None:
        erros.append("Trailer de arquivo: quantidade de registros não é numérica.")
    elif arquivo.qtd_registros_declarada != arquivo.qtd_linhas:
        erros.append(
            f"Trailer de arquivo: quantidade de registros informada ({arquivo.qtd_registros_declarada}) "
            f"é diferente da quantidade real de registros ({arquivo.qtd_linhas})."
        )

    return erros


def conferir_totais(arquivo: ArquivoCNAB240):
    """Executa todas as conferências de totais e retorna a lista de divergências."""
    erros = []
    erros.extend(validar_totais_lotes(arquivo))
    erros.extend(validar_totais_arquivo(arquivo))
    return erros
