# Dimensionamento del condensatore di rifasamento
"""
Calcolo della capacità di rifasamento per fattore di potenza unitario.

Il condensatore in parallelo deve annullare la suscettanza del carico:

    B_C = -B_carico
    C = B_C / ω

Il risultato non dipende dalla capacità attualmente installata: indica
quanto dovrebbe valere Ccorr, non quanto vale.

Politica sui casi limite:
    - carico già capacitivo o puramente resistivo (C < 0) → 0 μF
    - risultato non finito → 0 μF
Il calcolo non suggerisce mai di togliere capacità.
"""

import logging
import numpy as np

from ...core.units import Q_
from ...core.constants import SupplyConfig, CONFIGURAZIONE_DEFAULT
from ...core.numerica import limita
from .impedenza import calcola_ammettenza_carico

logger = logging.getLogger(__name__)


def calcola_capacita_rifasamento(
    resistenza: "Q_",
    induttanza: "Q_",
    config: SupplyConfig = CONFIGURAZIONE_DEFAULT,
) -> "Q_":
    """
    Calcola la capacità che porta a zero la suscettanza totale.

    C = -B_carico / ω

    Parametri:
        resistenza: Resistenza del carico (Ω)
        induttanza: Induttanza del carico (H o mH)
        config: Configurazione della rete

    Ritorna:
        Capacità di rifasamento in μF (mai negativa)

    Esempio:
        >>> calcola_capacita_rifasamento(Q_(100, "ohm"), Q_(200, "mH"))
        14.339 μF
    """
    ammettenza = calcola_ammettenza_carico(resistenza, induttanza, config)
    omega = config.pulsazione.magnitude

    suscettanza_richiesta = -ammettenza.suscettanza.to("S").magnitude
    c_uf = suscettanza_richiesta / omega * 1e6

    if c_uf < 0 or not np.isfinite(c_uf):
        logger.debug("Capacità di rifasamento %r non fisica, limitata a 0 μF", c_uf)
        c_uf = 0.0

    return Q_(c_uf, "uF")


def calcola_limite_cursore(
    resistenza: "Q_",
    induttanza: "Q_",
    config: SupplyConfig = CONFIGURAZIONE_DEFAULT,
) -> "Q_":
    """
    Calcola il fondo scala del cursore di Ccorr.

    limite = clamp(round(C_rif · k), [C_min, C_max])

    con k = config.moltiplicatore_limite, così il range del cursore
    comprende sempre il punto a fattore di potenza unitario.

    Parametri:
        resistenza: Resistenza del carico (Ω)
        induttanza: Induttanza del carico (H o mH)
        config: Configurazione della rete

    Ritorna:
        Limite superiore del cursore in μF
    """
    c_rif = calcola_capacita_rifasamento(resistenza, induttanza, config).magnitude
    limite = limita(
        float(round(c_rif * config.moltiplicatore_limite)),
        config.limite_capacita_min.magnitude,
        config.limite_capacita_max.magnitude,
    )
    return Q_(limite, "uF")
