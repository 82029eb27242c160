"""CNAB 240: leitura de retornos e geração de remessas de pagamento."""
from .campos import (
    FIM_DE_LINHA,
    TAMANHO_LINHA,
    alfanumerico,
    campo,
    formatar_data,
    ler_data,
    ler_valor,
    numerico,
    remover_acentos,
    valor_monetario,
)

from .conferencia import (
    conferir_totais,
    validar_totais_arquivo,
    validar_totais_lotes,
)

from .escritor import (
    DadosEmpresa,
    LoteRemessa,
    RemessaCNAB240,
)

from .leitor import (
    LeitorCNAB240,
    ler_arquivo,
    ler_arquivo_bytes,
)

from .registros import (
    ArquivoCNAB240,
    Lote,
    RegistroA,
    RegistroJ,
    RegistroO,
)

from .tipos_lote import (
    CONSTANTES_LOTE,
    TipoLote,
    identificar_tipo_lote,
)

__all__ = [
    "FIM_DE_LINHA",
    "TAMANHO_LINHA",
    "alfanumerico",
    "campo",
    "formatar_data",
    "ler_data",
    "ler_valor",
    "numerico",
    "remover_acentos",
    "valor_monetario",
    "conferir_totais",
    "validar_totais_arquivo",
    "validar_totais_lotes",
    "DadosEmpresa",
    "LoteRemessa",
    "RemessaCNAB240",
    "LeitorCNAB240",
    "ler_arquivo",
    "ler_arquivo_bytes",
    "ArquivoCNAB240",
    "Lote",
    "RegistroA",
    "RegistroJ",
    "RegistroO",
    "CONSTANTES_LOTE",
    "TipoLote",
    "identificar_tipo_lote",
]
