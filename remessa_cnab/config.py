"""Configuração do remessa_cnab."""

from dataclasses import dataclass


@dataclass
class ConfiguracaoCNAB:
    """Parâmetros de leitura/gravação dos arquivos e de logging."""

    encoding: str = "latin-1"
    log_level: str = "INFO"
    log_format: str = "standard"
    conferir_totais: bool = True

    @classmethod
    def from_env(cls) -> "ConfiguracaoCNAB":
        """Cria a configuração a partir de variáveis de ambiente."""
        import os

        return cls(
            encoding=os.getenv("CNAB_ENCODING", "latin-1"),
            log_level=os.getenv("CNAB_LOG_LEVEL", "INFO"),
            log_format=os.getenv("CNAB_LOG_FORMAT", "standard"),
            conferir_totais=os.getenv("CNAB_CONFERIR_TOTAIS", "true").lower() != "false",
        )
