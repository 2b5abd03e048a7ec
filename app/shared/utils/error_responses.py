# app/shared/utils/error_responses.py

"""Exemplos de erro para a documentação OpenAPI dos endpoints."""


def _error_example(error: str, code: str) -> dict:
    return {"success": False, "error": error, "code": code, "details": None}


# Respostas de erro genéricas
common_errors = {
    500: {
        "description": "Internal server error",
        "content": {
            "application/json": {
                "example": _error_example("Erro interno do servidor.", "INTERNAL_SERVER_ERROR")
            }
        }
    }
}

# Erros do guard de autenticação (rotas protegidas)
guard_errors = {
    401: {
        "description": "Missing bearer token",
        "content": {
            "application/json": {
                "example": _error_example("Token não fornecido", "AUTHENTICATION_REQUIRED")
            }
        }
    },
    403: {
        "description": "Revoked, forged or expired token",
        "content": {
            "application/json": {
                "examples": {
                    "revoked_token": {
                        "summary": "Token revoked by logout",
                        "value": _error_example("Sessão expirada. Faça login novamente.", "SESSION_EXPIRED")
                    },
                    "invalid_token": {
                        "summary": "Invalid Token",
                        "value": _error_example("Token inválido ou expirado", "INVALID_TOKEN")
                    }
                }
            }
        }
    },
}

# Erros para cadastro e login
auth_errors = {
    400: {
        "description": "Bad Request (duplicate username or missing fields)",
        "content": {
            "application/json": {
                "examples": {
                    "duplicate_username": {
                        "summary": "Username already taken",
                        "value": _error_example("Usuário já existe", "CONFLICT")
                    },
                    "missing_fields": {
                        "summary": "Missing credentials",
                        "value": _error_example("Usuário e senha são obrigatórios", "VALIDATION_ERROR")
                    }
                }
            }
        }
    },
    401: {
        "description": "Unauthorized (Invalid credentials)",
        "content": {
            "application/json": {
                "example": _error_example("Credenciais inválidas", "INVALID_CREDENTIALS")
            }
        }
    },
    **common_errors
}

# Erros para clientes e pagamentos
cliente_errors = {
    400: {
        "description": "Bad Request (validation or duplicate WhatsApp)",
        "content": {
            "application/json": {
                "example": _error_example("WhatsApp já cadastrado", "CONFLICT")
            }
        }
    },
    404: {
        "description": "Customer not found",
        "content": {
            "application/json": {
                "example": _error_example("Cliente não encontrado", "NOT_FOUND")
            }
        }
    },
    **guard_errors,
    **common_errors
}
