# app/adapters/outbound/persistence/models/__init__.py

from app.adapters.outbound.persistence.models.base_model import Base, register_all_events
from app.adapters.outbound.persistence.models.user_model import User
from app.adapters.outbound.persistence.models.cliente_model import Cliente
from app.adapters.outbound.persistence.models.pagamento_model import Pagamento

register_all_events()

__all__ = ["Base", "User", "Cliente", "Pagamento"]
