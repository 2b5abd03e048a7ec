# app/shared/utils/messages_utils.py

"""
Sistema de mensagens multilíngue para validação e feedback da API.

Este módulo fornece suporte a tradução de mensagens em diferentes idiomas,
facilitando a internacionalização do sistema (i18n).
"""

from typing import Dict

# Dicionário principal de mensagens
MESSAGES: Dict[str, Dict[str, str]] = {
    # Password validation
    "password_empty": {
        "pt": "Senha não pode estar vazia.",
        "en": "Password cannot be empty."
    },
    "password_too_short": {
        "pt": "Senha deve ter pelo menos {min} caracteres.",
        "en": "Password must be at least {min} characters long."
    },
    "password_too_long": {
        "pt": "Senha é muito longa (máximo {max} bytes).",
        "en": "Password is too long (maximum {max} bytes)."
    },

    # Username validation
    "username_invalid": {
        "pt": "Usuário deve conter apenas letras, números, ponto, hífen ou underline.",
        "en": "Username may only contain letters, numbers, dots, hyphens or underscores."
    },

    # Cliente validation
    "name_invalid": {
        "pt": "Nome contém caracteres não permitidos.",
        "en": "Name contains forbidden characters."
    },
    "whatsapp_invalid": {
        "pt": "Número de WhatsApp inválido.",
        "en": "Invalid WhatsApp number."
    },

    # Generic fields
    "field_required": {
        "pt": "Campo '{field}' é obrigatório.",
        "en": "Field '{field}' is required."
    },
    "validation_error": {
        "pt": "Erro de validação nos dados enviados.",
        "en": "Invalid request data."
    },
    "login_fields_required": {
        "pt": "Usuário e senha são obrigatórios",
        "en": "Username and password are required"
    },

    # Auth
    "user_created": {
        "pt": "Usuário criado com sucesso",
        "en": "User created successfully"
    },
    "user_registered": {
        "pt": "Usuário cadastrado com sucesso",
        "en": "User registered successfully"
    },
    "user_already_exists": {
        "pt": "Usuário já existe",
        "en": "User already exists"
    },
    "generic_invalid_credentials": {
        "pt": "Credenciais inválidas",
        "en": "Invalid credentials"
    },
    "logout_success": {
        "pt": "Logout realizado com sucesso",
        "en": "Successfully logged out"
    },

    # Clientes / pagamentos
    "cliente_not_found": {
        "pt": "Cliente não encontrado",
        "en": "Customer not found"
    },
    "whatsapp_already_exists": {
        "pt": "WhatsApp já cadastrado",
        "en": "WhatsApp number already registered"
    },

    # Erros de servidor
    "database_error": {
        "pt": "Erro no banco de dados",
        "en": "Database error"
    },
    "internal_error": {
        "pt": "Erro interno do servidor.",
        "en": "Internal server error."
    },
    "user_create_error": {
        "pt": "Erro ao criar usuário",
        "en": "Error creating user"
    },
    "login_error": {
        "pt": "Erro no login",
        "en": "Login error"
    },
    "cliente_list_error": {
        "pt": "Erro ao listar clientes",
        "en": "Error listing customers"
    },
    "cliente_fetch_error": {
        "pt": "Erro ao buscar cliente",
        "en": "Error fetching customer"
    },
    "cliente_create_error": {
        "pt": "Erro ao criar cliente",
        "en": "Error creating customer"
    },
    "pagamento_list_error": {
        "pt": "Erro ao buscar pagamentos",
        "en": "Error fetching payments"
    },
    "pagamento_create_error": {
        "pt": "Erro ao registrar pagamento",
        "en": "Error registering payment"
    },
}


def get_message(key: str, language: str = "pt", **kwargs) -> str:
    """
    Recupera uma mensagem formatada baseada na chave e no idioma.

    Args:
        key (str): Chave da mensagem.
        language (str): Idioma desejado ('pt', 'en', etc).
        kwargs: Variáveis a serem interpoladas na mensagem.

    Returns:
        str: Mensagem finalizada.
    """
    try:
        template = MESSAGES[key][language]
    except KeyError:
        # Tenta usar português como fallback
        template = MESSAGES.get(key, {}).get("pt", f"[Mensagem não encontrada: {key}]")

    return template.format(**kwargs)


def msg(key: str, **kwargs) -> str:
    """Mensagem no idioma configurado em ``DEFAULT_LANGUAGE``."""
    from app.adapters.configuration.config import settings

    return get_message(key, settings.DEFAULT_LANGUAGE, **kwargs)
