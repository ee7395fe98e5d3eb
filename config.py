"""
Configuración centralizada de la capa de acceso a datos usando pydantic-settings.

Este módulo maneja todas las variables de entorno y configuraciones
de manera tipada y validada.
"""
import logging
from pydantic_settings import BaseSettings, SettingsConfigDict
from pydantic import Field, field_validator

from core.pagination import PaginationStrategy


logger = logging.getLogger(__name__)


class Settings(BaseSettings):
    """Configuración cargada desde variables de entorno."""

    # Database
    database_url: str = Field(
        default="sqlite:///./members.db",
        description="URL de conexión a la base de datos"
    )

    # Application
    app_name: str = Field(
        default="Member Search",
        description="Nombre de la aplicación"
    )
    app_version: str = Field(
        default="1.0.0",
        description="Versión de la aplicación"
    )
    debug_mode: bool = Field(
        default=False,
        description="Modo debug (echo de SQL, solo para desarrollo)"
    )

    # Paginación
    default_page_size: int = Field(
        default=20,
        ge=1,
        description="Tamaño de página por defecto para búsquedas"
    )
    pagination_strategy: PaginationStrategy = Field(
        default=PaginationStrategy.COUNT_AVOIDANCE,
        description="Estrategia para calcular el total de una página"
    )

    # Logging
    log_level: str = Field(
        default="INFO",
        description="Nivel de logging (DEBUG, INFO, WARNING, ERROR, CRITICAL)"
    )

    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )

    @field_validator("log_level")
    @classmethod
    def validate_log_level(cls, v: str) -> str:
        """Valida que el nivel de logging sea válido."""
        valid_levels = ["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"]
        v_upper = v.upper()
        if v_upper not in valid_levels:
            logger.warning(
                f"Nivel de log '{v}' no válido. Usando 'INFO'. "
                f"Niveles válidos: {valid_levels}"
            )
            return "INFO"
        return v_upper

    @property
    def is_sqlite(self) -> bool:
        """Determina si la URL apunta a SQLite."""
        return self.database_url.startswith("sqlite")


# Instancia global de configuración
settings = Settings()


def configure_logging():
    """Configura el sistema de logging."""
    log_format = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    logging.basicConfig(
        level=getattr(logging, settings.log_level),
        format=log_format,
        handlers=[
            logging.StreamHandler(),
        ]
    )

    # Reducir verbosidad de librerías externas
    logging.getLogger("sqlalchemy.engine").setLevel(logging.WARNING)

    logger.info(f"Logging configurado en nivel {settings.log_level}")
    logger.info(f"Aplicación: {settings.app_name} v{settings.app_version}")
    logger.info(f"Estrategia de paginación: {settings.pagination_strategy.value}")


def get_settings() -> Settings:
    """Retorna la instancia de configuración (útil para inyección de dependencias)."""
    return settings
