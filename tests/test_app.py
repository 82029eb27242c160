import io

import pytest

from conftest import BOLETO_ITAU, adicionar_titulo
from app import app


@pytest.fixture
def client():
    app.config["TESTING"] = True
    with app.test_client() as client:
        yield client


def enviar(client, conteudo):
    return client.post(
        "/retorno",
        data={"arquivo": (io.BytesIO(conteudo), "retorno.txt")},
        content_type="multipart/form-data",
    )


def test_retorno_em_json(client, remessa):
    adicionar_titulo(remessa)

    resposta = enviar(client, remessa.gerar_conteudo().encode("latin-1"))

    assert resposta.status_code == 200
    dados = resposta.get_json()
    assert dados["codigo_banco"] == "341"
    assert dados["remessa"] is True
    assert dados["data_geracao"] == "2025-03-01T10:30:00"
    lote = dados["lotes"][0]
    assert lote["tipo"] == "titulo_mesmo_banco"
    assert lote["qtd_linhas"] == 4
    assert lote["valor_total"] == "150.00"
    registro = lote["registros"][0]
    assert registro["segmento"] == "J"
    assert registro["doc_id"] == 123
    assert registro["codigo_barras"] == BOLETO_ITAU
    assert registro["beneficiario_numero_inscricao"] == "000011144477735"
    assert registro["data_pagamento"] == "2025-03-01"


def test_retorno_invalido(client):
    resposta = enviar(client, b"3410000" + b"1" + b" " * 232 + b"\r\n")

    assert resposta.status_code == 400
    dados = resposta.get_json()
    assert dados["codigo"] == "SEQUENCIA_REGISTROS"
    assert dados["linha"] == 1


def test_retorno_sem_arquivo(client):
    resposta = client.post("/retorno", data={}, content_type="multipart/form-data")
    assert resposta.status_code == 400
    assert resposta.get_json()["codigo"] == "ARQUIVO_AUSENTE"


def test_boleto_valido(client):
    resposta = client.post("/boleto", json={"codigo_barras": BOLETO_ITAU})

    dados = resposta.get_json()
    assert dados["valido"] is True
    assert dados["erros"] == []
    assert dados["infos"]["banco"] == "341"
    assert dados["infos"]["valor_centavos"] == 15000


def test_boleto_invalido_por_formulario(client):
    resposta = client.post("/boleto", data={"codigo_barras": "123"})

    dados = resposta.get_json()
    assert dados["valido"] is False
    assert dados["erros"] == ["Tamanho inválido: esperado 44 dígitos, recebido 3."]
