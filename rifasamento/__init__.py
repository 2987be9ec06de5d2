# Rifasamento AC - motore di calcolo per il training sul fattore di potenza
"""
Motore di calcolo per il regime sinusoidale monofase di un carico R-L
con condensatore di rifasamento in parallelo.

Questo pacchetto trasforma tre parametri scalari (resistenza, induttanza,
capacità di rifasamento) nelle grandezze del circuito e nelle forme d'onda
nel tempo usate per i grafici dello strumento didattico.

Moduli:
    - core: Unità di misura, configurazione della rete, protezioni numeriche
    - modules.circuito: Parametri, ammettenza, rifasamento, potenze
    - modules.forme_onda: Sintesi e analisi delle forme d'onda
    - simulation: Valutazione completa con memoizzazione
"""

__version__ = "0.1.0"
__author__ = "Rifasamento Team"
