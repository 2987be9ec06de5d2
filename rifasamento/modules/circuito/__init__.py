# Modulo Circuito
"""
Calcolo in regime sinusoidale del carico R-L con rifasamento in parallelo.

Questo modulo implementa:
    - Parametri regolabili del carico e contenitore per l'interfaccia
    - Ammettenza del carico e del condensatore
    - Dimensionamento del condensatore per fattore di potenza unitario
    - Potenze, fattore di potenza, angolo di fase e classificazione

Equazioni principali:
    - Y = R/(R²+X_L²) - j·X_L/(R²+X_L²)    # Ammettenza carico
    - C = -B_carico / ω                     # Rifasamento unitario
    - S = V_eff²·|Y_tot|, P = S·G/|Y_tot|   # Potenze

Moduli:
    - parametri: Parametri del carico
    - impedenza: Ammettenza di carico e condensatore
    - correzione: Capacità di rifasamento e limite del cursore
    - potenza: Metriche di potenza
"""

from .impedenza import (
    Admittance,
    calcola_reattanza_induttiva,
    calcola_ammettenza_carico,
    calcola_ammettenza_condensatore,
)
from .correzione import calcola_capacita_rifasamento, calcola_limite_cursore
from .potenza import (
    PowerFactorClass,
    PowerMetrics,
    classifica_fattore_potenza,
    calcola_metriche,
)
from .parametri import LoadParameters, ParameterModel

__all__ = [
    # Impedenza
    "Admittance",
    "calcola_reattanza_induttiva",
    "calcola_ammettenza_carico",
    "calcola_ammettenza_condensatore",
    # Correzione
    "calcola_capacita_rifasamento",
    "calcola_limite_cursore",
    # Potenza
    "PowerFactorClass",
    "PowerMetrics",
    "classifica_fattore_potenza",
    "calcola_metriche",
    # Parametri
    "LoadParameters",
    "ParameterModel",
]
