# Valutazione completa del circuito rifasato
"""
Pipeline di calcolo completa:

    Parametri → Ammettenza carico → Potenze → Forme d'onda
                     └→ Capacità di rifasamento / limite cursore

valuta() è una funzione pura dei parametri e della configurazione di rete.
PowerFactorSimulator aggiunge una cache indicizzata sulla tupla
(R, L, Ccorr): ripetere una valutazione con gli stessi parametri non
ricalcola nulla, e i risultati in cache sono immutabili.
"""

import logging
from collections import OrderedDict
from dataclasses import dataclass
from typing import Dict, Optional, Tuple

from ..core.units import Q_
from ..core.constants import SupplyConfig, CONFIGURAZIONE_DEFAULT
from ..modules.circuito.parametri import LoadParameters
from ..modules.circuito.impedenza import calcola_ammettenza_carico
from ..modules.circuito.correzione import calcola_capacita_rifasamento, calcola_limite_cursore
from ..modules.circuito.potenza import PowerMetrics, calcola_metriche
from ..modules.forme_onda.sintesi import Waveform, sintetizza_forme_onda

logger = logging.getLogger(__name__)


@dataclass(frozen=True, eq=False)
class EvaluationResult:
    """
    Risultato di una valutazione.

    Attributi:
        parametri: Parametri valutati
        metriche: Grandezze del circuito
        forma_onda: Forme d'onda su un periodo
        capacita_rifasamento: Capacità per fattore di potenza unitario (μF)
        limite_capacita: Fondo scala del cursore di Ccorr (μF)
    """

    parametri: LoadParameters
    metriche: PowerMetrics
    forma_onda: Waveform
    capacita_rifasamento: "Q_"
    limite_capacita: "Q_"


def valuta(
    parametri: LoadParameters,
    config: Optional[SupplyConfig] = None,
) -> EvaluationResult:
    """
    Valuta il circuito per un insieme di parametri.

    Parametri:
        parametri: Parametri del carico
        config: Configurazione della rete (default 230 V / 50 Hz)

    Ritorna:
        EvaluationResult

    Esempio:
        >>> r = valuta(LoadParameters(Q_(100, "ohm"), Q_(200, "mH"), Q_(0, "uF")))
        >>> r.metriche.classificazione
        <PowerFactorClass.INDUTTIVO: 'lagging'>
    """
    config = config or CONFIGURAZIONE_DEFAULT

    ammettenza = calcola_ammettenza_carico(parametri.resistenza, parametri.induttanza, config)
    metriche = calcola_metriche(ammettenza, parametri.capacita_correzione, config)
    forma_onda = sintetizza_forme_onda(
        metriche.corrente_efficace, metriche.angolo_fase, config
    )

    return EvaluationResult(
        parametri=parametri,
        metriche=metriche,
        forma_onda=forma_onda,
        capacita_rifasamento=calcola_capacita_rifasamento(
            parametri.resistenza, parametri.induttanza, config
        ),
        limite_capacita=calcola_limite_cursore(
            parametri.resistenza, parametri.induttanza, config
        ),
    )


class PowerFactorSimulator:
    """
    Valutatore con memoizzazione dei risultati.

    Parametri:
        config: Configurazione della rete (default 230 V / 50 Hz)
        dimensione_cache: Numero massimo di risultati conservati

    Esempio:
        >>> sim = PowerFactorSimulator()
        >>> r1 = sim.valuta(LoadParameters())
        >>> r2 = sim.valuta(LoadParameters())
        >>> r1 is r2
        True
    """

    def __init__(
        self,
        config: Optional[SupplyConfig] = None,
        dimensione_cache: int = 128,
    ):
        if dimensione_cache < 1:
            raise ValueError(f"Dimensione cache non valida: {dimensione_cache}")

        self._config = config or CONFIGURAZIONE_DEFAULT
        self._dimensione_cache = dimensione_cache
        self._cache: "OrderedDict[Tuple[float, float, float], EvaluationResult]" = OrderedDict()
        self._hits = 0
        self._misses = 0

    @property
    def config(self) -> SupplyConfig:
        """Ritorna la configurazione della rete."""
        return self._config

    def valuta(self, parametri: LoadParameters) -> EvaluationResult:
        """
        Valuta il circuito, riusando il risultato se già calcolato.

        Parametri:
            parametri: Parametri del carico

        Ritorna:
            EvaluationResult (lo stesso oggetto per parametri uguali)
        """
        chiave = parametri.chiave()

        if chiave in self._cache:
            self._hits += 1
            self._cache.move_to_end(chiave)
            logger.debug("Cache hit per %s", chiave)
            return self._cache[chiave]

        self._misses += 1
        risultato = valuta(parametri, self._config)
        self._cache[chiave] = risultato

        if len(self._cache) > self._dimensione_cache:
            self._cache.popitem(last=False)

        logger.debug("Cache miss per %s (%d risultati in cache)", chiave, len(self._cache))
        return risultato

    def svuota_cache(self):
        """Elimina tutti i risultati memorizzati."""
        self._cache.clear()
        self._hits = 0
        self._misses = 0
        logger.info("Cache dei risultati svuotata.")

    @property
    def statistiche_cache(self) -> Dict[str, int]:
        """Ritorna hits, misses e numero di risultati in cache."""
        return {
            "hits": self._hits,
            "misses": self._misses,
            "dimensione": len(self._cache),
        }
