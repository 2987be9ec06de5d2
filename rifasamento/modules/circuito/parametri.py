# Parametri regolabili del carico R-L con rifasamento
"""
Modello dei parametri del circuito.

I tre parametri regolabili dall'utente sono:
    - R: resistenza del carico (Ω), range tipico 1-500 Ω
    - L: induttanza del carico (mH), range tipico 0-2000 mH
    - Ccorr: capacità di rifasamento in parallelo (μF), da 0 al limite del cursore
      (oltre il limite il modello la accetta con un avviso nel log)

La tensione e la frequenza di rete sono fisse e arrivano dalla SupplyConfig.

LoadParameters è un'istantanea immutabile; ParameterModel è il contenitore
che l'interfaccia modifica. Ogni modifica sostituisce l'istantanea, così i
risultati calcolati su quella precedente non possono essere confusi con
quelli nuovi.
"""

import logging
from dataclasses import dataclass, field, replace
from typing import Optional, Tuple
import numpy as np

from ...core.units import Q_
from ...core.constants import SupplyConfig, LoadRanges, CONFIGURAZIONE_DEFAULT
from .correzione import calcola_capacita_rifasamento, calcola_limite_cursore

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class LoadParameters:
    """
    Istantanea dei parametri del carico.

    Attributi:
        resistenza: Resistenza del carico (Ω)
        induttanza: Induttanza del carico (mH)
        capacita_correzione: Capacità di rifasamento (μF)

    Esempio:
        >>> p = LoadParameters(Q_(100, "ohm"), Q_(0.2, "H"), Q_(0, "uF"))
        >>> p.chiave()
        (100.0, 200.0, 0.0)
    """

    resistenza: "Q_" = field(default_factory=lambda: LoadRanges.RESISTENZA_DEFAULT)
    induttanza: "Q_" = field(default_factory=lambda: LoadRanges.INDUTTANZA_DEFAULT)
    capacita_correzione: "Q_" = field(default_factory=lambda: LoadRanges.CAPACITA_DEFAULT)

    def __post_init__(self):
        # Converti alle unità dell'interfaccia (dataclass frozen)
        object.__setattr__(self, "resistenza", self.resistenza.to("ohm"))
        object.__setattr__(self, "induttanza", self.induttanza.to("mH"))
        object.__setattr__(self, "capacita_correzione", self.capacita_correzione.to("uF"))
        self._valida_parametri()

    def _valida_parametri(self):
        """Rifiuta valori non fisici e segnala quelli fuori range tipico."""
        for nome, valore in (
            ("resistenza", self.resistenza),
            ("induttanza", self.induttanza),
            ("capacita_correzione", self.capacita_correzione),
        ):
            if not np.isfinite(valore.magnitude) or valore.magnitude < 0:
                raise ValueError(f"Parametro '{nome}' non valido: {valore:~P}")

        r = self.resistenza.magnitude
        l = self.induttanza.magnitude

        if not (LoadRanges.RESISTENZA_MIN.magnitude <= r <= LoadRanges.RESISTENZA_MAX.magnitude):
            logger.warning(
                "Attenzione: resistenza %s fuori range tipico [%s - %s]",
                f"{self.resistenza:~.2fP}",
                f"{LoadRanges.RESISTENZA_MIN:~P}",
                f"{LoadRanges.RESISTENZA_MAX:~P}",
            )

        if l > LoadRanges.INDUTTANZA_MAX.magnitude:
            logger.warning(
                "Attenzione: induttanza %s fuori range tipico [%s - %s]",
                f"{self.induttanza:~.2fP}",
                f"{LoadRanges.INDUTTANZA_MIN:~P}",
                f"{LoadRanges.INDUTTANZA_MAX:~P}",
            )

    def chiave(self) -> Tuple[float, float, float]:
        """Tupla (R in Ω, L in mH, Ccorr in μF) usata per la memoizzazione."""
        return (
            float(self.resistenza.magnitude),
            float(self.induttanza.magnitude),
            float(self.capacita_correzione.magnitude),
        )

    def con(
        self,
        resistenza: Optional["Q_"] = None,
        induttanza: Optional["Q_"] = None,
        capacita_correzione: Optional["Q_"] = None,
    ) -> "LoadParameters":
        """Ritorna una copia con i parametri indicati sostituiti."""
        modifiche = {}
        if resistenza is not None:
            modifiche["resistenza"] = resistenza
        if induttanza is not None:
            modifiche["induttanza"] = induttanza
        if capacita_correzione is not None:
            modifiche["capacita_correzione"] = capacita_correzione
        return replace(self, **modifiche)


class ParameterModel:
    """
    Parametri correnti dello strumento e configurazione di rete.

    Parametri:
        config: Configurazione della rete (default 230 V / 50 Hz)
        parametri: Parametri iniziali (default R=100 Ω, L=200 mH, Ccorr=0 μF)

    Esempio:
        >>> modello = ParameterModel()
        >>> modello.induttanza = Q_(500, "mH")
        >>> modello.applica_rifasamento()
        14.42 μF
    """

    def __init__(
        self,
        config: Optional[SupplyConfig] = None,
        parametri: Optional[LoadParameters] = None,
    ):
        self._config = config or CONFIGURAZIONE_DEFAULT
        self._parametri = parametri or LoadParameters()

    @property
    def config(self) -> SupplyConfig:
        """Ritorna la configurazione della rete."""
        return self._config

    @property
    def parametri(self) -> LoadParameters:
        """Ritorna l'istantanea corrente dei parametri."""
        return self._parametri

    @property
    def resistenza(self) -> "Q_":
        """Ritorna la resistenza del carico."""
        return self._parametri.resistenza

    @resistenza.setter
    def resistenza(self, valore: "Q_"):
        """Imposta la resistenza del carico."""
        self._parametri = self._parametri.con(resistenza=valore)

    @property
    def induttanza(self) -> "Q_":
        """Ritorna l'induttanza del carico."""
        return self._parametri.induttanza

    @induttanza.setter
    def induttanza(self, valore: "Q_"):
        """Imposta l'induttanza del carico."""
        self._parametri = self._parametri.con(induttanza=valore)

    @property
    def capacita_correzione(self) -> "Q_":
        """Ritorna la capacità di rifasamento installata."""
        return self._parametri.capacita_correzione

    @capacita_correzione.setter
    def capacita_correzione(self, valore: "Q_"):
        """Imposta la capacità di rifasamento."""
        self._parametri = self._parametri.con(capacita_correzione=valore)

        limite = self.limite_capacita
        if self.capacita_correzione > limite:
            logger.warning(
                "Attenzione: capacità di rifasamento %s fuori range tipico [%s - %s]",
                f"{self.capacita_correzione:~.3fP}",
                f"{LoadRanges.CAPACITA_MIN:~P}",
                f"{limite:~P}",
            )

    @property
    def capacita_rifasamento(self) -> "Q_":
        """Capacità che porterebbe il fattore di potenza a 1 (μF)."""
        return calcola_capacita_rifasamento(self.resistenza, self.induttanza, self._config)

    @property
    def limite_capacita(self) -> "Q_":
        """Fondo scala del cursore di Ccorr (μF)."""
        return calcola_limite_cursore(self.resistenza, self.induttanza, self._config)

    def applica_rifasamento(self) -> "Q_":
        """
        Imposta Ccorr al valore di rifasamento, arrotondato a 3 decimali.

        Ritorna:
            Capacità impostata (μF)
        """
        c = round(self.capacita_rifasamento.magnitude, LoadRanges.DECIMALI_RIFASAMENTO)
        self.capacita_correzione = Q_(c, "uF")
        logger.debug("Rifasamento automatico: Ccorr = %.3f μF", c)
        return self.capacita_correzione

    def reset(self):
        """Riporta i parametri ai valori iniziali."""
        self._parametri = LoadParameters()

    def __repr__(self) -> str:
        return (
            f"ParameterModel(R={self.resistenza:~.1fP}, "
            f"L={self.induttanza:~.1fP}, "
            f"Ccorr={self.capacita_correzione:~.3fP})"
        )
