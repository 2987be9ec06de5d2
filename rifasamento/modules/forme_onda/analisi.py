# Analisi numerica delle forme d'onda campionate
"""
Grandezze ricavate dai campioni delle forme d'onda.

Servono a verificare la coerenza tra le metriche calcolate in forma chiusa
e le forme d'onda sintetizzate:

    - Valore efficace: X_eff = sqrt(mean(x²))
    - Energia per ciclo: E = ∫₀ᵀ p(t) dt   (regola dei trapezi)
    - Potenza media: P = E / T
    - Fattore di potenza: PF = P / (V_eff · I_eff)

L'integrale è calcolato sul periodo chiuso [0, T]: il campione in t = T
non viene generato ed è la ripetizione periodica di quello in t = 0.
"""

import numpy as np
from scipy.integrate import trapezoid

from ...core.units import Q_
from ...core.numerica import dividi_sicuro
from .sintesi import Waveform


def valore_efficace(campioni: np.ndarray) -> float:
    """
    Calcola il valore efficace di un segnale campionato su un periodo.

    Parametri:
        campioni: Campioni uniformi su [0, T)

    Ritorna:
        Valore efficace (stessa unità dei campioni)
    """
    campioni = np.asarray(campioni, dtype=float)
    return float(np.sqrt(np.mean(campioni**2)))


def energia_per_ciclo(forma_onda: Waveform) -> "Q_":
    """
    Calcola l'energia assorbita in un periodo.

    E = ∫₀ᵀ p(t) dt

    Parametri:
        forma_onda: Forme d'onda campionate

    Ritorna:
        Energia in Joule
    """
    periodo = forma_onda.periodo.to("s").magnitude
    t = np.append(forma_onda.tempo, periodo)
    p = np.append(forma_onda.potenza, forma_onda.potenza[0])
    return Q_(float(trapezoid(p, t)), "J")


def potenza_media(forma_onda: Waveform) -> "Q_":
    """
    Calcola la potenza attiva come media della potenza istantanea.

    P = E / T

    Ritorna:
        Potenza media in W
    """
    energia = energia_per_ciclo(forma_onda).to("J").magnitude
    periodo = forma_onda.periodo.to("s").magnitude
    return Q_(energia / periodo, "W")


def fattore_potenza_da_campioni(forma_onda: Waveform) -> float:
    """
    Stima il fattore di potenza dai soli campioni.

    PF = P / (V_eff · I_eff)

    Ritorna:
        Fattore di potenza (adimensionale)
    """
    p = potenza_media(forma_onda).to("W").magnitude
    s = valore_efficace(forma_onda.tensione) * valore_efficace(forma_onda.corrente)
    return dividi_sicuro(p, s)
