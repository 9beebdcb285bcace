"""API: camada de borda.

Responsabilidades:
- Receber callbacks do Slack (qualquer método/path)
- Decodificar o payload para modelos tipados
- Expor rotas HTTP (gateway catch-all, health)

Subpastas:
- connectors/: decodificação de payloads por plataforma
- routes/: endpoints HTTP

NÃO PODE conter: resolução de backend, reescrita de requisição, transporte.
"""
