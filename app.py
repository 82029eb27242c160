from flask import Flask, jsonify, request

from remessa_cnab import (
    ConfiguracaoCNAB,
    ErroCNAB,
    ler_arquivo_bytes,
    validar_codigo_barras_boleto,
)
from remessa_cnab.logging import get_logger, setup_logging

logger = get_logger(__name__)


def registro_como_dict(registro):
    """
    Converte um registro de detalhe lido (A, J ou O) em dicionário serializável.
    """
    data_pagamento = registro.data_pagamento_como_data
    dados = {
        "segmento": registro.segmento,
        "numero_registro": registro.numero_registro,
        "linha": registro.numero_linha,
        "doc_id": registro.doc_id_como_inteiro,
        "doc_id_banco": registro.doc_id_banco.strip(),
        "data_pagamento": data_pagamento.isoformat() if data_pagamento else None,
        "valor_pagamento": str(registro.valor_pagamento_como_decimal),
        "ocorrencias": registro.ocorrencias_como_lista,
    }
    if registro.segmento == "A":
        dados["favorecido_nome"] = registro.favorecido_nome.strip()
        dados["favorecido_banco"] = registro.favorecido_banco
    elif registro.segmento == "J":
        dados["codigo_barras"] = registro.codigo_barras
        dados["beneficiario_nome"] = registro.beneficiario_nome.strip()
        dados["beneficiario_numero_inscricao"] = registro.beneficiario_numero_inscricao
    elif registro.segmento == "O":
        dados["codigo_barras"] = registro.codigo_barras
        dados["concessionaria_nome"] = registro.concessionaria_nome.strip()
    return dados


def arquivo_como_dict(arquivo):
    data_geracao = arquivo.data_geracao
    return {
        "codigo_banco": arquivo.codigo_banco,
        "nome_banco": (arquivo.nome_banco or "").strip(),
        "numero_inscricao": arquivo.numero_inscricao,
        "nome_empresa": (arquivo.nome_empresa or "").strip(),
        "remessa": arquivo.is_remessa,
        "data_geracao": data_geracao.isoformat() if data_geracao else None,
        "numero_sequencial_arquivo": arquivo.numero_sequencial_arquivo,
        "lotes": [
            {
                "numero": lote.numero,
                "tipo": lote.tipo.value,
                "layout": lote.layout,
                "qtd_linhas": lote.qtd_linhas,
                "valor_total": str(lote.valor_total),
                "registros": [registro_como_dict(r) for r in lote.registros],
            }
            for lote in arquivo.lotes
        ],
    }


configuracao = ConfiguracaoCNAB.from_env()

app = Flask(__name__)


@app.route("/retorno", methods=["POST"])
def retorno():
    """
    Recebe o arquivo de retorno (campo multipart ``arquivo``) e devolve o
    conteúdo lido em JSON.
    """
    arquivo = request.files.get("arquivo")
    if not arquivo:
        return jsonify({"codigo": "ARQUIVO_AUSENTE", "mensagem": "Nenhum arquivo enviado."}), 400

    try:
        lido = ler_arquivo_bytes(arquivo.read(), config=configuracao)
    except ErroCNAB as erro:
        logger.warning("Arquivo de retorno rejeitado: %s", erro.mensagem)
        return jsonify(erro.como_dict()), 400

    return jsonify(arquivo_como_dict(lido))


@app.route("/boleto", methods=["POST"])
def boleto():
    """
    Valida o código de barras de boleto (campo ``codigo_barras``, form ou JSON).
    """
    dados = request.get_json(silent=True) or request.form
    codigo_barras = (dados.get("codigo_barras") or "").strip()
    erros, infos = validar_codigo_barras_boleto(codigo_barras)
    if infos.get("vencimento"):
        infos["vencimento"] = infos["vencimento"].isoformat()
    return jsonify({"valido": not erros, "erros": erros, "infos": infos})


if __name__ == "__main__":
    setup_logging(configuracao.log_level, configuracao.log_format)
    # debug=True é útil durante o desenvolvimento
    app.run(debug=True)
