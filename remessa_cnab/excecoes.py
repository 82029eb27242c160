"""Hierarquia de exceções do remessa_cnab."""

import re

_MARCADOR = re.compile(r"\$\{(\d+)\}")


class ErroCNAB(Exception):
    """
    Exceção base de todos os erros de leitura/geração CNAB.

    A mensagem é um modelo com marcadores posicionais ``${0}``, ``${1}``...
    substituídos por ``argumentos``. O ``codigo`` é estável e serve para o
    chamador tratar o erro sem depender do texto.
    """

    codigo_padrao = "ERRO_CNAB"

    def __init__(self, modelo, argumentos=(), codigo=None, linha=None, campo=None):
        self.modelo = modelo
        self.argumentos = tuple(argumentos)
        self.codigo = codigo or self.codigo_padrao
        self.linha = linha
        self.campo = campo
        super().__init__(self.mensagem)

    @property
    def mensagem(self) -> str:
        def _substituir(match):
            indice = int(match.group(1))
            if indice < len(self.argumentos):
                return str(self.argumentos[indice])
            return match.group(0)

        return _MARCADOR.sub(_substituir, self.modelo)

    def como_dict(self) -> dict:
        return {
            "codigo": self.codigo,
            "mensagem": self.mensagem,
            "linha": self.linha,
            "campo": self.campo,
        }


class ErroValidacao(ErroCNAB):
    """Dados de entrada inválidos: linha, campo, layout ou dígito verificador."""

    codigo_padrao = "VALIDACAO"


class ErroCritico(ErroCNAB):
    """Violação de invariante que não deveria ocorrer (falha de implementação)."""

    codigo_padrao = "CRITICO"
