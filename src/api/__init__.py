"""API: camada de borda HTTP.

Responsabilidades:
- Expor endpoints HTTP (reservas, admin, health)
- Propagar correlation_id (middleware)
- Traduzir erros de domínio/infra em respostas HTTP

NÃO PODE conter: regras de disponibilidade, acesso direto a stores.
"""
