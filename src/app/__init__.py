"""App: núcleo do serviço de reservas: orquestração e infraestrutura.

Subpastas:
- bootstrap/: composition root (factories, inicialização, wiring)
- domain/: modelos e erros de reserva
- services/: resolver de disponibilidade e serviço de reservas
- infra/: implementações concretas de IO (calendário, stores, web app)
- protocols/: contratos/interfaces
- observability/: correlation_id para logs

Padrão: app executa; api adapta; config configura; utils apoia.
"""
