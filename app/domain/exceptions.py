# app/domain/exceptions.py

"""
Domain exceptions.

Every failure the API can report is one of these classes. Controllers and
middleware only need ``status_code``, ``internal_code``, ``message`` and
``details`` to render a response.
"""

from typing import Any, Optional


class DomainException(Exception):
    """Base class for all domain exceptions."""

    status_code: int = 400
    internal_code: str = "DOMAIN_ERROR"
    default_message: str = "Domain error."

    def __init__(self, message: Optional[str] = None, details: Any = None):
        self.message = message or self.default_message
        self.details = details
        super().__init__(self.message)


########################################################################
# Validation
########################################################################
class ValidationException(DomainException):
    status_code = 400
    internal_code = "VALIDATION_ERROR"
    default_message = "Erro de validação nos dados enviados."


########################################################################
# Authentication
########################################################################
class AuthenticationRequiredException(DomainException):
    """No bearer token was sent."""
    status_code = 401
    internal_code = "AUTHENTICATION_REQUIRED"
    default_message = "Token não fornecido"


class InvalidCredentialsException(DomainException):
    status_code = 401
    internal_code = "INVALID_CREDENTIALS"
    default_message = "Credenciais inválidas"


class TokenRevokedException(DomainException):
    """The token was revoked by a logout; the client must log in again."""
    status_code = 403
    internal_code = "SESSION_EXPIRED"
    default_message = "Sessão expirada. Faça login novamente."


class InvalidTokenException(DomainException):
    status_code = 403
    internal_code = "INVALID_TOKEN"
    default_message = "Token inválido ou expirado"


########################################################################
# Resources
########################################################################
class ResourceNotFoundException(DomainException):
    status_code = 404
    internal_code = "NOT_FOUND"
    default_message = "Recurso não encontrado"

    def __init__(self, message: Optional[str] = None, resource_id: Any = None, details: Any = None):
        self.resource_id = resource_id
        super().__init__(message=message, details=details)


class ResourceAlreadyExistsException(DomainException):
    """A unique column would be duplicated."""
    status_code = 400
    internal_code = "CONFLICT"
    default_message = "Recurso já existe"


########################################################################
# Infrastructure
########################################################################
class DatabaseOperationException(DomainException):
    status_code = 500
    internal_code = "DATABASE_ERROR"
    default_message = "Database error"

    def __init__(self, message: Optional[str] = None, original_error: Optional[BaseException] = None):
        self.original_error = original_error
        super().__init__(message=message)


class SigningKeyMissingException(DomainException):
    """The token signing secret is not configured."""
    status_code = 500
    internal_code = "CONFIGURATION_ERROR"
    default_message = "Erro interno de configuração"
