# Costanti e configurazione della rete di alimentazione
"""
Costanti della rete di alimentazione e range dei parametri di carico.

La rete è descritta da una configurazione immutabile (SupplyConfig) che
viene passata esplicitamente al motore di calcolo, così da poter provare
condizioni di alimentazione alternative senza toccare stato globale.

Valori di default:
    - Tensione efficace: 230 V
    - Frequenza: 50 Hz  →  ω = 2πf ≈ 314.16 rad/s
    - Campioni per periodo: 600
"""

from dataclasses import dataclass, field
import numpy as np

from .units import Q_


@dataclass(frozen=True)
class SupplyConfig:
    """
    Configurazione immutabile della rete e delle soglie di presentazione.

    Attributi:
        tensione_efficace: Tensione efficace di alimentazione (V)
        frequenza: Frequenza di rete (Hz)
        n_campioni: Numero di campioni per periodo delle forme d'onda
        soglia_unitaria: |PF| oltre il quale il carico è considerato a fattore unitario
        moltiplicatore_limite: Margine del cursore Ccorr rispetto al valore di rifasamento
        limite_capacita_min: Limite inferiore del cursore Ccorr (μF)
        limite_capacita_max: Limite superiore del cursore Ccorr (μF)
    """

    tensione_efficace: "Q_" = field(default_factory=lambda: Q_(230, "V"))
    frequenza: "Q_" = field(default_factory=lambda: Q_(50, "Hz"))
    n_campioni: int = 600
    soglia_unitaria: float = 0.999
    moltiplicatore_limite: float = 1.2
    limite_capacita_min: "Q_" = field(default_factory=lambda: Q_(100, "uF"))
    limite_capacita_max: "Q_" = field(default_factory=lambda: Q_(20000, "uF"))

    def __post_init__(self):
        # Normalizza le unità (dataclass frozen)
        object.__setattr__(self, "tensione_efficace", self.tensione_efficace.to("V"))
        object.__setattr__(self, "frequenza", self.frequenza.to("Hz"))
        object.__setattr__(self, "limite_capacita_min", self.limite_capacita_min.to("uF"))
        object.__setattr__(self, "limite_capacita_max", self.limite_capacita_max.to("uF"))
        self._valida()

    def _valida(self):
        """Verifica la coerenza della configurazione."""
        if not self.tensione_efficace.magnitude > 0:
            raise ValueError(f"Tensione efficace non valida: {self.tensione_efficace}")
        if not self.frequenza.magnitude > 0:
            raise ValueError(f"Frequenza non valida: {self.frequenza}")
        if self.n_campioni < 3:
            raise ValueError(f"Servono almeno 3 campioni per periodo, ricevuti {self.n_campioni}")
        if not 0 < self.soglia_unitaria <= 1:
            raise ValueError(f"Soglia di fattore unitario fuori da (0, 1]: {self.soglia_unitaria}")
        if not self.moltiplicatore_limite > 1:
            raise ValueError(
                f"Il moltiplicatore del limite deve essere > 1, ricevuto {self.moltiplicatore_limite}"
            )
        if self.limite_capacita_min > self.limite_capacita_max:
            raise ValueError(
                f"Limiti del cursore incoerenti: {self.limite_capacita_min} > {self.limite_capacita_max}"
            )

    @property
    def pulsazione(self) -> "Q_":
        """
        Pulsazione della rete.

        ω = 2πf

        Ritorna:
            Pulsazione in rad/s
        """
        return Q_(2 * np.pi * self.frequenza.magnitude, "rad/s")

    @property
    def periodo(self) -> "Q_":
        """Periodo T = 1/f in secondi."""
        return Q_(1 / self.frequenza.magnitude, "s")

    @property
    def tensione_picco(self) -> "Q_":
        """Tensione di picco V_picco = V_eff · √2."""
        return Q_(self.tensione_efficace.magnitude * np.sqrt(2), "V")


class LoadRanges:
    """
    Range dei parametri regolabili dall'interfaccia.

    Valori fuori range sono accettati dal motore (con un avviso nel log),
    i valori negativi no.
    """

    RESISTENZA_MIN = Q_(1, "ohm")
    RESISTENZA_MAX = Q_(500, "ohm")
    INDUTTANZA_MIN = Q_(0, "mH")
    INDUTTANZA_MAX = Q_(2000, "mH")
    CAPACITA_MIN = Q_(0, "uF")

    # Valori iniziali dello strumento
    RESISTENZA_DEFAULT = Q_(100, "ohm")
    INDUTTANZA_DEFAULT = Q_(200, "mH")
    CAPACITA_DEFAULT = Q_(0, "uF")

    # Arrotondamento del valore proposto dal calcolo automatico
    DECIMALI_RIFASAMENTO = 3


CONFIGURAZIONE_DEFAULT = SupplyConfig()
