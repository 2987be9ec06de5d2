# Protezioni numeriche per divisioni degeneri
"""
Protezioni numeriche condivise dal motore di calcolo.

L'unico errore possibile nel calcolo è la degenerazione numerica: una
divisione per una grandezza esattamente nulla (denominatore dell'impedenza,
modulo dell'ammettenza totale, potenza apparente). Ogni divisione di questo
tipo passa da qui e sostituisce lo zero con EPSILON, così il risultato
resta sempre finito.
"""

import logging
import math

logger = logging.getLogger(__name__)

# Valore sostituito a un denominatore esattamente nullo
EPSILON = 1e-12


def limita_denominatore(valore: float, epsilon: float = EPSILON) -> float:
    """
    Sostituisce un denominatore nullo (o NaN) con epsilon.

    Parametri:
        valore: Denominatore da proteggere
        epsilon: Valore sostitutivo (default EPSILON)

    Ritorna:
        epsilon se valore è zero o NaN, altrimenti valore invariato
    """
    if valore == 0 or math.isnan(valore):
        logger.debug("Denominatore degenere %r sostituito con %g", valore, epsilon)
        return epsilon
    return valore


def dividi_sicuro(numeratore: float, denominatore: float, epsilon: float = EPSILON) -> float:
    """
    Divisione protetta: numeratore / limita_denominatore(denominatore).

    Esempio:
        >>> dividi_sicuro(1.0, 0.0)
        1000000000000.0
    """
    return numeratore / limita_denominatore(denominatore, epsilon)


def limita(valore: float, minimo: float, massimo: float) -> float:
    """Limita valore all'intervallo chiuso [minimo, massimo]."""
    return max(minimo, min(massimo, valore))
