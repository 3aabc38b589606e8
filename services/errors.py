"""Errores tipados del flujo de conteos.

Todos llevan un mensaje apto para el usuario y el código HTTP con el que se
responden. Las rutas no los atrapan: el handler registrado en create_app los
convierte en {"success": false, "error": ...}.

    ConteoError
    +-- AuthorizationError      401 / 403
    +-- CheckInNotAvailable     404
    +-- ValidationError         400
    +-- TransactionError        500
"""


class ConteoError(Exception):
    status_code = 500
    default_message = "Error interno."

    def __init__(self, message: str | None = None):
        self.message = message or self.default_message
        super().__init__(self.message)


class AuthorizationError(ConteoError):
    status_code = 403
    default_message = "Acceso no autorizado."

    def __init__(self, message: str | None = None, status_code: int | None = None):
        super().__init__(message)
        if status_code is not None:
            self.status_code = status_code


class CheckInNotAvailable(ConteoError):
    """La planilla no existe o ya no está Pendiente (no se distingue afuera)."""

    status_code = 404
    default_message = "Planilla no encontrada o ya fue procesada."


class ValidationError(ConteoError):
    status_code = 400
    default_message = "Datos inválidos."


class TransactionError(ConteoError):
    status_code = 500

    def __init__(self, cause: Exception):
        self.cause = cause
        super().__init__(f"Error en la base de datos: {cause}")
