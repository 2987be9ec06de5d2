# Modulo Forme d'onda
"""
Sintesi e analisi delle forme d'onda nel tempo su un periodo di rete.

Questo modulo implementa:
    - Sintesi di v(t), i(t), p(t) da corrente efficace e angolo di fase
    - Valore efficace, energia per ciclo e potenza media dai campioni

Equazioni principali:
    - v(t) = √2·V_eff·sin(ωt)
    - i(t) = √2·I_eff·sin(ωt - φ)
    - p(t) = v(t)·i(t)

Moduli:
    - sintesi: Generazione delle forme d'onda
    - analisi: Grandezze ricavate dai campioni
"""

from .sintesi import Waveform, genera_asse_tempi, sintetizza_forme_onda
from .analisi import (
    valore_efficace,
    energia_per_ciclo,
    potenza_media,
    fattore_potenza_da_campioni,
)

__all__ = [
    # Sintesi
    "Waveform",
    "genera_asse_tempi",
    "sintetizza_forme_onda",
    # Analisi
    "valore_efficace",
    "energia_per_ciclo",
    "potenza_media",
    "fattore_potenza_da_campioni",
]
