# app/shared/utils/input_validation.py

import regex
import re
from typing import Optional, Tuple, List
from app.shared.utils.messages_utils import get_message


class InputValidator:
    """
    Classe para validação e sanitização de entradas de usuário.

    Utiliza expressões regulares para validar nomes, usuários e números de WhatsApp,
    além de verificar os limites de tamanho de senhas.
    """

    # ─────────────────────────────────────────────────────────────
    # Constantes de limites
    MAX_NAME_LENGTH = 255
    MAX_PASSWORD_BYTES = 72  # bcrypt ignora/rejeita o que passar de 72 bytes
    MIN_PASSWORD_LENGTH = 6
    MAX_STRING_INPUT_LENGTH = 1000

    # ─────────────────────────────────────────────────────────────
    # Expressões Regulares para validações

    # Nome (NAME_PATTERN):
    # - \p{L}: qualquer letra (de qualquer idioma)
    # - \p{M}: marcas de acento (acentos combinados)
    # - 0-9: números opcionais
    # - Espaço ( ), ponto (.), hífen (-) e apóstrofo (') permitidos
    NAME_PATTERN = regex.compile(
        r"^[\p{L}\p{M}0-9 .'-]+$",
        flags=regex.UNICODE
    )

    # Usuário (USERNAME_PATTERN): letras, números, ponto, hífen e underline
    USERNAME_PATTERN = re.compile(
        r"^[A-Za-z0-9._-]+$"
    )

    # WhatsApp (WHATSAPP_PATTERN):
    # - 8 a 15 dígitos depois de remover espaços, hífens, parênteses
    #   e o "+" inicial; o número é sempre gravado só com dígitos
    WHATSAPP_PATTERN = re.compile(
        r"^[0-9]{8,15}$"
    )
    WHATSAPP_SEPARATORS = re.compile(r"[\s()-]")

    # ─────────────────────────────────────────────────────────────

    @classmethod
    def validate_password(cls, password: str, language: str = "pt") -> Tuple[bool, Optional[List[str]]]:
        """
        Valida o tamanho de uma senha.

        Returns:
            (bool indicando se é válida, lista de mensagens de erro se inválida)
        """
        errors: List[str] = []

        if not password:
            errors.append(get_message("password_empty", language))
        else:
            if len(password) < cls.MIN_PASSWORD_LENGTH:
                errors.append(
                    get_message("password_too_short", language, min=cls.MIN_PASSWORD_LENGTH)
                )
            if len(password.encode("utf-8")) > cls.MAX_PASSWORD_BYTES:
                errors.append(
                    get_message("password_too_long", language, max=cls.MAX_PASSWORD_BYTES)
                )

        if errors:
            return False, errors

        return True, None

    @classmethod
    def sanitize_name(cls, name: str) -> str:
        sanitized = re.sub(r'\s+', ' ', name.strip())
        return sanitized[:cls.MAX_NAME_LENGTH]

    @classmethod
    def validate_name(cls, name: str, language: str = "pt") -> Tuple[bool, Optional[str]]:
        if not name:
            return False, get_message("field_required", language, field="nome")

        if not cls.NAME_PATTERN.match(name):
            return False, get_message("name_invalid", language)

        return True, None

    @classmethod
    def validate_username(cls, username: str, language: str = "pt") -> Tuple[bool, Optional[str]]:
        if not username:
            return False, get_message("field_required", language, field="username")

        if not cls.USERNAME_PATTERN.match(username):
            return False, get_message("username_invalid", language)

        return True, None

    @classmethod
    def normalize_whatsapp(cls, number: str) -> str:
        number = cls.WHATSAPP_SEPARATORS.sub("", number.strip())
        # "+5511..." e "5511..." são o mesmo número
        return number[1:] if number.startswith("+") else number

    @classmethod
    def validate_whatsapp(cls, number: str, language: str = "pt") -> Tuple[bool, Optional[str]]:
        if not number:
            return False, get_message("field_required", language, field="whatsapp")

        if not cls.WHATSAPP_PATTERN.match(number):
            return False, get_message("whatsapp_invalid", language)

        return True, None

    @classmethod
    def sanitize_string(cls, text: str, max_length: Optional[int] = None) -> str:
        if not max_length:
            max_length = cls.MAX_STRING_INPUT_LENGTH

        sanitized = text.strip()
        return sanitized[:max_length]
