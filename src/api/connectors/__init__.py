"""Connectors por gateway — adapters de borda para APIs externas.

Estrutura:
- braintree/: respostas XML do gateway Braintree
"""

__all__: list[str] = []
