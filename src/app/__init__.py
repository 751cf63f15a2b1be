"""App — modelos de domínio, contratos e inicialização.

Subpastas:
- bootstrap/: inicialização (logging, validação de settings)
- domain/: entidades decodificadas das respostas do gateway
- protocols/: contratos/interfaces do transporte

Padrão: app define; api adapta; config configura.
"""
