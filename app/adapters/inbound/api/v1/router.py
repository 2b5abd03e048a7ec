# app/adapters/inbound/api/v1/router.py

from fastapi import APIRouter
# Manter em ordem alfabética
from app.adapters.inbound.api.v1.endpoints import (
    auth_endpoint,
    cliente_endpoint,
    health_endpoint,
    pagamento_endpoint,
)

api_router = APIRouter()

# Status do servidor
api_router.include_router(health_endpoint.router)

# Cadastro, login e logout
api_router.include_router(auth_endpoint.router)

# Recursos protegidos pelo token de sessão
api_router.include_router(cliente_endpoint.router)
api_router.include_router(pagamento_endpoint.router)
