# Moduli di calcolo del rifasamento
"""
Moduli di calcolo del motore di rifasamento.

Sottomoduli:
    - circuito: Parametri, ammettenze, rifasamento e potenze
    - forme_onda: Sintesi e analisi delle forme d'onda
"""
