""" Utilidades principales y componentes compartidos.

Este paquete contiene:

- Excepciones personalizadas
- Funciones auxiliares de paginación
"""

from .exceptions import (
    AppException,
    NotFoundException,
    InvalidPageRequest,
    ExecutionFailed,
)
from .pagination import (
    PaginationStrategy,
    PaginationMeta,
    Page,
    validate_page_request,
    calculate_pagination_meta,
    calculate_skip,
    resolve_total,
    build_page,
)

__all__ = [
    # Excepciones
    "AppException",
    "NotFoundException",
    "InvalidPageRequest",
    "ExecutionFailed",
    # paginacion
    "PaginationStrategy",
    "PaginationMeta",
    "Page",
    "validate_page_request",
    "calculate_pagination_meta",
    "calculate_skip",
    "resolve_total",
    "build_page",
]
