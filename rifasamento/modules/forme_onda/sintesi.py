# Sintesi delle forme d'onda di tensione, corrente e potenza
"""
Generazione delle forme d'onda nel tempo su un periodo di rete.

I campioni sono uniformi sull'intervallo semiaperto [0, T):

    t_k = (k/N)·T          k = 0 … N-1
    v(t) = V_picco · sin(ωt)
    i(t) = I_picco · sin(ωt - φ)
    p(t) = v(t) · i(t)

con V_picco = V_eff·√2 e I_picco = I_eff·√2. Lo sfasamento φ è quello
calcolato dalle potenze e porta già con sé il segno (ritardo/anticipo).

Le forme d'onda sono rigenerate da zero a ogni valutazione: a parità di
ingressi il risultato è identico campione per campione.
"""

from dataclasses import dataclass
from typing import Iterator, Tuple
import numpy as np

from ...core.units import Q_
from ...core.constants import SupplyConfig, CONFIGURAZIONE_DEFAULT


@dataclass(frozen=True, eq=False)
class Waveform:
    """
    Forme d'onda campionate su un periodo.

    Gli array sono allineati per indice e in sola lettura.

    Attributi:
        tempo: Istanti di campionamento (s)
        tensione: Tensione istantanea v(t) (V)
        corrente: Corrente istantanea i(t) (A)
        potenza: Potenza istantanea p(t) = v·i (W)
        periodo: Periodo di rete T (s)
    """

    tempo: np.ndarray
    tensione: np.ndarray
    corrente: np.ndarray
    potenza: np.ndarray
    periodo: "Q_"

    def __len__(self) -> int:
        return len(self.tempo)

    def __iter__(self) -> Iterator[Tuple[float, float, float, float]]:
        # Ogni chiamata riparte dal primo campione
        for k in range(len(self.tempo)):
            yield (
                float(self.tempo[k]),
                float(self.tensione[k]),
                float(self.corrente[k]),
                float(self.potenza[k]),
            )

    @property
    def n_campioni(self) -> int:
        """Numero di campioni per periodo."""
        return len(self.tempo)


def _sola_lettura(array: np.ndarray) -> np.ndarray:
    """Blocca la scrittura sull'array."""
    array.flags.writeable = False
    return array


def genera_asse_tempi(config: SupplyConfig = CONFIGURAZIONE_DEFAULT) -> np.ndarray:
    """
    Genera gli istanti di campionamento su [0, T).

    Parametri:
        config: Configurazione della rete (frequenza e numero di campioni)

    Ritorna:
        Array di N istanti in secondi, senza l'istante t = T
    """
    n = config.n_campioni
    periodo = config.periodo.to("s").magnitude
    return np.arange(n) / n * periodo


def sintetizza_forme_onda(
    corrente_efficace: "Q_",
    angolo_fase: "Q_",
    config: SupplyConfig = CONFIGURAZIONE_DEFAULT,
) -> Waveform:
    """
    Sintetizza tensione, corrente e potenza istantanee su un periodo.

    Parametri:
        corrente_efficace: Corrente efficace (A)
        angolo_fase: Angolo di fase φ (rad o gradi)
        config: Configurazione della rete

    Ritorna:
        Waveform con N campioni allineati

    Esempio:
        >>> onde = sintetizza_forme_onda(Q_(1.9475, "A"), Q_(-0.5611, "rad"))
        >>> len(onde)
        600
    """
    omega = config.pulsazione.magnitude
    v_picco = config.tensione_picco.magnitude
    i_picco = corrente_efficace.to("A").magnitude * np.sqrt(2)
    phi = angolo_fase.to("rad").magnitude

    t = genera_asse_tempi(config)
    v = v_picco * np.sin(omega * t)
    i = i_picco * np.sin(omega * t - phi)
    p = v * i

    return Waveform(
        tempo=_sola_lettura(t),
        tensione=_sola_lettura(v),
        corrente=_sola_lettura(i),
        potenza=_sola_lettura(p),
        periodo=config.periodo,
    )
