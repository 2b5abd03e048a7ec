# app/shared/utils/success_responses.py

# Respostas de sucesso genéricas
common_success = {
    200: {
        "description": "Request processed successfully",
        "content": {
            "application/json": {
                "example": {"message": "Logout realizado com sucesso"}
            }
        }
    }
}

# Sucessos para cadastro e login
auth_success = {
    201: {
        "description": "User created successfully",
        "content": {
            "application/json": {
                "example": {"message": "Usuário criado com sucesso", "userId": 1}
            }
        }
    },
}

login_success = {
    200: {
        "description": "Session token issued",
        "content": {
            "application/json": {
                "example": {"token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9..."}
            }
        }
    }
}

health_success = {
    200: {
        "description": "Server and database are reachable",
        "content": {
            "application/json": {
                "example": {
                    "status": "online",
                    "database": "clientes",
                    "user": "postgres",
                    "time": "2025-03-01T12:00:00.000Z"
                }
            }
        }
    }
}
