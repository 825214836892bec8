from pydantic import Field
from pydantic_settings import BaseSettings
from pathlib import Path
from typing import List

# Raiz do projeto (pos_api/core/config.py -> ../..)
PROJECT_ROOT = Path(__file__).resolve().parents[2]


class Settings(BaseSettings):
    # Configurações básicas do projeto
    PROJECT_NAME: str = "POS Backend"
    PROJECT_VERSION: str = "1.0.0"
    API_STR: str = "/api"

    # String de conexão do banco (única variável obrigatória em produção)
    DATABASE_URL: str = Field("sqlite+aiosqlite:///./pos.db", env="DATABASE_URL")

    # Configurações opcionais (com valores padrão)
    ENVIRONMENT: str = "development"
    SUPPORT_EMAIL: str = "support@example.com"
    LOG_LEVEL: str = "INFO"

    # Diretório servido em /files (ancorado na raiz do projeto, não no cwd)
    STATIC_FILES_DIR: str = str(PROJECT_ROOT / "public" / "files")

    # Configurações de CORS (qualquer origem por padrão)
    BACKEND_CORS_ORIGINS: List[str] = ["*"]

    class Config:
        env_file = ".env"
        env_file_encoding = "utf-8"
        case_sensitive = True
        extra = "ignore"  # Ignora variáveis extras não declaradas


settings = Settings()
