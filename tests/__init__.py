# Test suite per il motore di rifasamento
"""
Suite di test per il motore di calcolo del rifasamento.

Struttura:
    - unit/: Test unitari per singoli moduli
"""
