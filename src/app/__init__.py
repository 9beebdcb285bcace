"""App, núcleo do gateway: wiring, pipeline de roteamento e infraestrutura.

Subpastas:
- bootstrap/: composition root (logging, RouteTable, ForwardingConfig)
- domain/: entidades de roteamento (BackendRoute, RouteTable, RoutingKey)
- use_cases/: decisão de roteamento a partir do body
- services/: resolução de backend e reescrita da requisição
- infra/: transporte de forwarding (httpx)
- observability/: correlation_id e métricas via logs estruturados

Padrão: api decodifica; app decide e encaminha; config carrega.
"""
