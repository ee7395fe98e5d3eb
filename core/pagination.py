"""
Utilidades de paginación para búsquedas por ventana (offset/limit).

Incluye la validación de la solicitud de página, el contenedor genérico
``Page`` y la resolución del total con o sin consulta de conteo.
"""

from enum import Enum
from typing import TypeVar, Generic, List, Callable
from pydantic import BaseModel, ConfigDict, Field
import logging

from core.exceptions import InvalidPageRequest

logger = logging.getLogger(__name__)

T = TypeVar('T')


class PaginationStrategy(str, Enum):
    """Estrategias para obtener el total de elementos de una página."""
    ALWAYS_COUNT = "always_count"
    COUNT_AVOIDANCE = "count_avoidance"


class PaginationMeta(BaseModel):
    """Metadata para la paginacion."""
    page: int = Field(..., ge=0, description="Current page number (0-indexed)")
    page_size: int = Field(..., ge=1, description="Page size")
    total_items: int = Field(..., ge=0, description="Total items available")
    total_pages: int = Field(..., ge=0, description="Total pages")
    has_next: bool = Field(..., description="Has next page")
    has_previous: bool = Field(..., description="Has previous page")


class Page(BaseModel, Generic[T]):
    """Página de resultados con el total de elementos de todas las páginas."""
    content: List[T] = Field(default_factory=list, description="Items of this page")
    total: int = Field(..., ge=0, description="Total matching items across all pages")
    page: int = Field(..., ge=0, description="Page number (0-indexed)")
    size: int = Field(..., ge=1, description="Requested page size")

    model_config = ConfigDict(frozen=True)

    @property
    def total_pages(self) -> int:
        return (self.total + self.size - 1) // self.size

    @property
    def has_next(self) -> bool:
        return self.page < self.total_pages - 1

    @property
    def has_previous(self) -> bool:
        return self.page > 0

    @property
    def meta(self) -> PaginationMeta:
        return calculate_pagination_meta(self.page, self.size, self.total)


def validate_page_request(page: int, size: int) -> None:
    """
    Valida el índice y el tamaño de página antes de consultar el almacenamiento.

    Args:
        page: Número de página (0-indexed)
        size: Items por página

    Raises:
        InvalidPageRequest: Si page < 0 o size <= 0
    """
    if page < 0:
        raise InvalidPageRequest(page, size, "page debe ser >= 0")
    if size <= 0:
        raise InvalidPageRequest(page, size, "size debe ser > 0")


def calculate_pagination_meta(
    page: int,
    page_size: int,
    total_items: int
) -> PaginationMeta:
    """
    Calcula la metadata de la paginación.

    Args:
        page: Número de página actual (0-indexed)
        page_size: Items por página
        total_items: Total number of items

    Returns:
        paginationmeta objeto con valores calculados
    """
    total_pages = (total_items + page_size - 1) // page_size if page_size > 0 else 0

    return PaginationMeta(
        page=page,
        page_size=page_size,
        total_items=total_items,
        total_pages=total_pages,
        has_next=page < total_pages - 1,
        has_previous=page > 0
    )


def calculate_skip(page: int, page_size: int) -> int:
    """
    Calcula el valor de skip/offset para las consultas de la base de datos.

    Args:
        page: Número de página actual (indexado desde 0)
        page_size: Número de elementos por página

    Returns:
        Número de elementos a saltar
    """
    return page * page_size


def resolve_total(
    content_size: int,
    page: int,
    page_size: int,
    fetch_total: Callable[[], int]
) -> int:
    """
    Obtiene el total evitando la consulta de conteo cuando es deducible.

    Si la página vino incompleta (content_size < page_size) no existen más
    filas, así que el total es exactamente offset + content_size. Solo se
    llama a ``fetch_total`` cuando la página está llena, o cuando está vacía
    fuera de la primera página (no se puede saber si el offset se pasó del final).

    Args:
        content_size: Número de elementos devueltos por la consulta de ventana
        page: Número de página (0-indexed)
        page_size: Tamaño de página solicitado
        fetch_total: Función que ejecuta la consulta de conteo

    Returns:
        Total de elementos que cumplen el filtro
    """
    offset = calculate_skip(page, page_size)

    if offset == 0:
        if content_size < page_size:
            logger.debug(f"Total deducido sin conteo (primera página): {content_size}")
            return content_size
        return fetch_total()

    if content_size != 0 and content_size < page_size:
        total = offset + content_size
        logger.debug(f"Total deducido sin conteo (última página): {total}")
        return total

    return fetch_total()


def build_page(
    content: List[T],
    page: int,
    page_size: int,
    fetch_total: Callable[[], int],
    strategy: PaginationStrategy = PaginationStrategy.COUNT_AVOIDANCE
) -> Page[T]:
    """
    Arma una página aplicando la estrategia de conteo indicada.

    Args:
        content: Elementos de la página actual
        page: Número de página (0-indexed)
        page_size: Tamaño de página solicitado
        fetch_total: Función que ejecuta la consulta de conteo
        strategy: ALWAYS_COUNT siempre consulta; COUNT_AVOIDANCE solo cuando es necesario

    Returns:
        Page con el contenido y el total
    """
    if strategy == PaginationStrategy.ALWAYS_COUNT:
        total = fetch_total()
    else:
        total = resolve_total(len(content), page, page_size, fetch_total)

    return Page(content=content, total=total, page=page, size=page_size)
