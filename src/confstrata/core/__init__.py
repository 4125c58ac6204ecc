# src/confstrata/core/__init__.py

"""
Core do confstrata: o Merge Engine e seus blocos fundamentais.

Componentes:
    - keys      → normalização de chaves em Canonical Key Paths
    - coercion  → regra de coerção guiada pelo tipo do destino
    - paths     → leitura/escrita por caminho pontuado
    - merge     → fold sequencial de fontes sobre um destino
    - errors    → hierarquia de exceções de configuração

Princípios fundamentais:
    - Nenhum I/O acontece neste pacote
    - Nenhum estado global é mantido
    - O merge nunca falha por dados malformados
"""
