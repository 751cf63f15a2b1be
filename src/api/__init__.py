"""API — camada de borda com o gateway de pagamentos.

Responsabilidades:
- Ler e normalizar o corpo das respostas do gateway
- Decodificar entidades para os modelos de domínio
- Classificar erros reportados pelo gateway

Subpastas:
- connectors/: adapters por gateway

NÃO PODE conter: conexão, autenticação ou retry (responsabilidade do transporte).
"""
