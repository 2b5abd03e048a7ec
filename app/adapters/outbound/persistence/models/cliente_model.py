# app/adapters/outbound/persistence/models/cliente_model.py

from sqlalchemy import Column, Integer, String, DateTime, func

from app.adapters.outbound.persistence.models.base_model import Base


class Cliente(Base):
    """
    Cliente com plano de pagamento recorrente.

    Attributes:
        whatsapp: Número de WhatsApp (único)
        vencimento: Dia do mês em que o pagamento vence
    """
    __tablename__ = "clientes"

    id = Column(Integer, primary_key=True, autoincrement=True)
    nome = Column(String(255), nullable=False)
    whatsapp = Column(String(30), unique=True, nullable=False, index=True)
    vencimento = Column(Integer, nullable=False)
    plano = Column(String(100), nullable=False)
    endereco = Column(String(500), nullable=True)
    created_at = Column(DateTime, server_default=func.now())

    def __repr__(self) -> str:
        return f"<Cliente(id={self.id}, nome={self.nome})>"
