"""Utilitario de linha de comando para leitura de arquivos de retorno CNAB 240."""

import os
import sys

from .base import identificar_banco
from .cnab240 import ler_arquivo_bytes
from .config import ConfiguracaoCNAB
from .excecoes import ErroCNAB
from .logging import setup_logging


def imprimir_resumo(arquivo):
    codigo_banco, nome_banco = identificar_banco(arquivo.codigo_banco)
    print(f"Banco: {codigo_banco} - {nome_banco}")
    print(f"Empresa: {(arquivo.nome_empresa or '').strip()} ({arquivo.numero_inscricao})")
    if arquivo.is_remessa is None:
        print("Tipo de arquivo: nao identificado")
    else:
        print("Tipo de arquivo:", "remessa" if arquivo.is_remessa else "retorno")
    if arquivo.data_geracao:
        print("Gerado em:", arquivo.data_geracao.strftime("%d/%m/%Y %H:%M:%S"))
    print(f"Sequencial do arquivo: {arquivo.numero_sequencial_arquivo}")

    for lote in arquivo.lotes:
        print(f"\n=== Lote {lote.numero}: {lote.tipo.name} (layout {lote.layout}) ===")
        print(f"Registros: {len(lote.registros)}   Linhas: {lote.qtd_linhas}")
        print(f"Valor total: R$ {lote.valor_total:.2f}")
        for segmento, qtd in sorted(lote.segmentos_ignorados.items()):
            print(f"Segmento {segmento} ignorado em {qtd} linha(s).")
        for registro in lote.registros:
            data = registro.data_pagamento_como_data
            data_str = data.strftime("%d/%m/%Y") if data else "--/--/----"
            ocorrencias = ",".join(registro.ocorrencias_como_lista) or "-"
            print(
                f"   - Seg. {registro.segmento} #{registro.numero_registro} "
                f"doc {registro.doc_id_como_inteiro} pago em {data_str} "
                f"R$ {registro.valor_pagamento_como_decimal:.2f} ocorrencias: {ocorrencias}"
            )


def main(argv=None):
    config = ConfiguracaoCNAB.from_env()
    setup_logging(config.log_level, config.log_format)

    argv = sys.argv[1:] if argv is None else argv
    if argv:
        caminho = argv[0]
    else:
        print("=== Leitor de arquivos CNAB 240 ===")
        caminho = input("Informe o caminho completo do arquivo de retorno (.txt): ").strip()

    if not os.path.isfile(caminho):
        print("Erro: arquivo nao encontrado. Verifique o caminho e tente novamente.")
        return 2

    with open(caminho, "rb") as f:
        conteudo = f.read()

    try:
        arquivo = ler_arquivo_bytes(conteudo, config=config)
    except ErroCNAB as erro:
        local = f" (linha {erro.linha})" if erro.linha else ""
        print(f"Erro [{erro.codigo}]{local}: {erro.mensagem}")
        return 1

    imprimir_resumo(arquivo)
    return 0


if __name__ == "__main__":
    sys.exit(main())
