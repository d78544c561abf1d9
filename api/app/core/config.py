"""
Configuracion central de la aplicacion.
Gestiona variables de entorno y configuraciones globales.
Soporta configuracion dinamica para desarrollo (ENVIRONMENT=development)
y produccion (ENVIRONMENT=production).
"""
import json
from typing import List
from pydantic_settings import BaseSettings
from pydantic import Field, computed_field, field_validator


ALLOWED_ENVIRONMENTS = ("development", "production", "test")
ALLOWED_LOG_LEVELS = ("TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL")


class Settings(BaseSettings):
    """
    Clase de configuracion de la aplicacion.
    Lee variables de entorno y proporciona valores por defecto.

    Configuracion de desarrollo vs produccion:
    - ENVIRONMENT: 'development', 'production' o 'test'
    - En produccion los logs de consola se serializan a JSON
    - DATABASE_URL se puede especificar completa o por componentes
    - AUTR_*: servidor remoto que se expone localmente via postgres_fdw
    """

    # Configuracion de la aplicacion
    APP_NAME: str = Field(default="Backend Template")
    APP_VERSION: str = Field(default="1.0.0")
    DEBUG: bool = Field(default=False)
    ENVIRONMENT: str = Field(default="development")
    API_PREFIX: str = Field(default="/api")

    # Configuracion del servidor
    HOST: str = Field(default="0.0.0.0")
    PORT: int = Field(default=8000)

    # Base de datos - Componentes separados (recomendado para flexibilidad)
    DATABASE_HOST: str = Field(default="localhost")
    DATABASE_PORT: int = Field(default=5432)
    DATABASE_USER: str = Field(default="postgres")
    DATABASE_PASSWORD: str = Field(default="postgres")
    DATABASE_NAME: str = Field(default="app_db")

    # Base de datos - URL completa (override de componentes si se proporciona)
    DATABASE_URL: str = Field(default="")
    DB_POOL_SIZE: int = Field(default=5)
    DB_MAX_OVERFLOW: int = Field(default=10)

    # CORS (acepta lista JSON, lista separada por comas o "*" para todos los origenes)
    CORS_ENABLED: bool = Field(default=True)
    CORS_ORIGINS: str = Field(default="http://localhost:3000")

    # Logging
    LOG_LEVEL: str = Field(default="INFO")
    LOG_FILE_ENABLED: bool = Field(default=False)
    LOG_FILE_PATH: str = Field(default="logs")

    # Paginacion
    PAGINATION_DEFAULT_LIMIT: int = Field(default=10, ge=1)
    PAGINATION_MAX_LIMIT: int = Field(default=100, ge=1)

    # FDW (postgres_fdw) hacia la base de datos remota AUTR
    AUTR_FDW_ENABLED: bool = Field(default=True)
    AUTR_FDW_SERVER_NAME: str = Field(default="autr_server")
    AUTR_FDW_LOCAL_SCHEMA: str = Field(default="autr")
    AUTR_DATABASE_HOST: str = Field(default="localhost")
    AUTR_DATABASE_PORT: int = Field(default=5432)
    AUTR_DATABASE_NAME: str = Field(default="autr_db")
    AUTR_DATABASE_USER: str = Field(default="postgres")
    AUTR_DATABASE_PASSWORD: str = Field(default="")

    @field_validator("ENVIRONMENT")
    @classmethod
    def _validate_environment(cls, value: str) -> str:
        """Restringe ENVIRONMENT a los valores soportados."""
        normalized = value.lower()
        if normalized not in ALLOWED_ENVIRONMENTS:
            raise ValueError(
                f"ENVIRONMENT debe ser uno de {ALLOWED_ENVIRONMENTS}, recibido: {value}"
            )
        return normalized

    @field_validator("LOG_LEVEL")
    @classmethod
    def _validate_log_level(cls, value: str) -> str:
        """Restringe LOG_LEVEL a los niveles que entiende loguru."""
        normalized = value.upper()
        if normalized not in ALLOWED_LOG_LEVELS:
            raise ValueError(
                f"LOG_LEVEL debe ser uno de {ALLOWED_LOG_LEVELS}, recibido: {value}"
            )
        return normalized

    @computed_field
    @property
    def effective_database_url(self) -> str:
        """
        Retorna la URL de base de datos efectiva.
        Si DATABASE_URL esta definida, la usa directamente.
        Si no, construye la URL desde los componentes individuales.
        """
        if self.DATABASE_URL:
            return self.DATABASE_URL
        return (
            f"postgresql+asyncpg://{self.DATABASE_USER}:{self.DATABASE_PASSWORD}"
            f"@{self.DATABASE_HOST}:{self.DATABASE_PORT}/{self.DATABASE_NAME}"
        )

    @computed_field
    @property
    def is_development(self) -> bool:
        """Indica si el entorno es de desarrollo."""
        return self.ENVIRONMENT == "development"

    class Config:
        """Configuracion de Pydantic."""
        env_file = ".env"
        case_sensitive = True
        extra = "ignore"  # Ignorar campos extra del .env


def get_cors_origins(cors_string: str) -> List[str]:
    """
    Parsea la configuracion de CORS.
    Acepta "*" para todos los origenes o una lista JSON.
    """
    if cors_string == "*":
        return ["*"]
    try:
        return json.loads(cors_string)
    except json.JSONDecodeError:
        # Si no es JSON valido, retornar como lista simple
        return [origin.strip() for origin in cors_string.split(",") if origin.strip()]


# Instancia global de configuración
settings = Settings()
