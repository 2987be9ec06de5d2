# Modulo core - Unità di misura, configurazione di rete, protezioni numeriche
"""
Modulo core del motore di rifasamento.

Contiene:
    - units: Sistema di unità di misura basato su Pint
    - constants: Configurazione della rete e range dei parametri
    - configurazione: Caricamento della configurazione da JSON
    - numerica: Protezioni per divisioni degeneri
"""

from .units import ureg, Q_, verifica_dimensioni, formatta_grandezza
from .constants import SupplyConfig, LoadRanges, CONFIGURAZIONE_DEFAULT
from .configurazione import carica_configurazione, configurazione_da_dizionario
from .numerica import EPSILON, limita_denominatore, dividi_sicuro, limita

__all__ = [
    "ureg",
    "Q_",
    "verifica_dimensioni",
    "formatta_grandezza",
    "SupplyConfig",
    "LoadRanges",
    "CONFIGURAZIONE_DEFAULT",
    "carica_configurazione",
    "configurazione_da_dizionario",
    "EPSILON",
    "limita_denominatore",
    "dividi_sicuro",
    "limita",
]
