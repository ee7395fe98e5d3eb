"""
Excepciones personalizadas para la capa de acceso a datos.

Estas excepciones proporcionan una forma estructurada de manejar errores
y mapearlos a códigos de estado HTTP apropiados si una capa superior lo necesita.
"""

from typing import Optional, Any


class AppException(Exception):
    """Excepción base para todos los errores de la aplicación."""

    def __init__(
        self,
        message: str,
        status_code: int = 500,
        details: Optional[dict[str, Any]] = None,
    ):
        self.message = message
        self.status_code = status_code
        self.details = details or {}
        super().__init__(self.message)


class NotFoundException(AppException):
    """Excepción cuando un recurso no se encuentra."""

    def __init__(
        self,
        resource: str,
        identifier: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ):
        message = f"{resource} no encontrado"
        if identifier:
            message += f": {identifier}"
        super().__init__(message=message, status_code=404, details=details)


class InvalidPageRequest(AppException):
    """Excepción cuando el índice de página o el tamaño de página no son válidos.

    Se lanza antes de ejecutar cualquier consulta: la página debe ser >= 0
    y el tamaño > 0. No se corrigen los valores silenciosamente.
    """

    def __init__(
        self,
        page: int,
        size: int,
        reason: Optional[str] = None,
    ):
        message = f"Solicitud de página inválida (page={page}, size={size})"
        if reason:
            message += f": {reason}"
        super().__init__(
            message=message,
            status_code=400,
            details={"page": page, "size": size},
        )
        self.page = page
        self.size = size


class ExecutionFailed(AppException):
    """Excepción cuando el motor de almacenamiento no pudo completar una consulta.

    El error original del motor queda disponible en ``__cause__``.
    """

    def __init__(
        self,
        message: str = "Error de base de datos",
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(message=message, status_code=500, details=details)
