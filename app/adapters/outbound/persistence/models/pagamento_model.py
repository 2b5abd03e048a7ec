# app/adapters/outbound/persistence/models/pagamento_model.py

from sqlalchemy import Column, Integer, String, Date, DateTime, Numeric, ForeignKey, func

from app.adapters.outbound.persistence.models.base_model import Base


class Pagamento(Base):
    """
    Pagamento de um cliente.

    Attributes:
        cliente_id: Cliente dono do pagamento (FK obrigatória)
        valor: Valor cobrado
        data_vencimento: Data de vencimento, usada nos filtros de ano/mês
        referencia: Rótulo de referência (ex.: "03/2025")
        status: Situação do pagamento (padrão "pendente")
    """
    __tablename__ = "pagamentos"

    id = Column(Integer, primary_key=True, autoincrement=True)
    cliente_id = Column(Integer, ForeignKey("clientes.id", ondelete="CASCADE"), nullable=False, index=True)
    valor = Column(Numeric(10, 2), nullable=False)
    data_vencimento = Column(Date, nullable=False, index=True)
    referencia = Column(String(50), nullable=False)
    status = Column(String(20), nullable=False, server_default="pendente", index=True)
    created_at = Column(DateTime, server_default=func.now())

    def __repr__(self) -> str:
        return f"<Pagamento(id={self.id}, cliente_id={self.cliente_id}, status={self.status})>"
