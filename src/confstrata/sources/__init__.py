# src/confstrata/sources/__init__.py

"""
Fontes de configuração entregues ao Merge Engine.

- files       → descoberta por convenção de nomes e parse YAML/JSON
- environment → `.env`, override JSON e variáveis filtradas por prefixo

Todas as fontes produzem dicionários puros; nenhuma realiza merge por conta própria,
exceto `load_files`, que delega o fold ao Merge Engine.
"""
