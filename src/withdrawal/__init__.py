"""Withdrawal: carencia de abate para logs medicos.

Subpastas:
- bootstrap/: composition root (factories, inicializacao, wiring)
- domain/: modelos de log, quantidade, material e periodo de carencia
- services/: derivador, notificador e dono do ciclo de vida do log
- infra/: implementacoes concretas de IO (stores, messengers, calendario)
- protocols/: contratos/interfaces
- observability/: correlation_id para logs estruturados

Padrao: services decidem; infra executa; protocols isolam.
"""
