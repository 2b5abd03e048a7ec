# app/adapters/outbound/persistence/models/user_model.py

"""
Modelo de usuário.

Usuários se cadastram com username e senha e fazem login para
obter um token de sessão.
"""

from sqlalchemy import Column, Integer, String, DateTime, func

from app.adapters.outbound.persistence.models.base_model import Base


class User(Base):
    """
    Modelo de usuário do sistema.

    Attributes:
        id: Identificador único do usuário
        username: Nome de usuário (único, utilizado para login)
        password_hash: Hash bcrypt da senha
        email: Email de contato (opcional)
        created_at: Data e hora de criação
    """
    __tablename__ = "usuarios"

    id = Column(Integer, primary_key=True, autoincrement=True)
    username = Column(String(50), unique=True, nullable=False, index=True)
    password_hash = Column(String(255), nullable=False)
    email = Column(String(255), nullable=True)
    created_at = Column(DateTime, server_default=func.now())

    def __repr__(self) -> str:
        """Representação em string do objeto User."""
        return f"<User(id={self.id}, username={self.username})>"
