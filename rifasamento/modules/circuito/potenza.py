# Calcolo delle potenze e del fattore di potenza
"""
Modulo per il calcolo delle potenze in regime sinusoidale monofase.

A partire dall'ammettenza del carico e dalla capacità di rifasamento
calcola corrente, potenze attiva/reattiva/apparente, fattore di potenza
e angolo di fase.

Equazioni principali:
    Y_tot = G + j(B_carico + ω·C)
    I_eff = V_eff · |Y_tot|
    S = V_eff · I_eff
    P = S · G/|Y_tot|
    Q = S · B_tot/|Y_tot|
    PF = P / S
    φ = atan2(Q, P)

Convenzione di segno (riferita al carico): Q < 0 per un carico netto
induttivo (in ritardo), Q > 0 per un carico netto capacitivo (in anticipo,
es. sovra-rifasamento).
"""

import logging
from dataclasses import dataclass
from enum import Enum
from typing import Any, Dict, List
import numpy as np

from ...core.units import Q_
from ...core.constants import SupplyConfig, CONFIGURAZIONE_DEFAULT
from ...core.numerica import limita_denominatore, dividi_sicuro
from .impedenza import Admittance, calcola_ammettenza_condensatore

logger = logging.getLogger(__name__)


class PowerFactorClass(Enum):
    """Classificazione del carico complessivo."""

    UNITARIO = "unity"        # |PF| oltre la soglia
    INDUTTIVO = "lagging"     # Q < 0, corrente in ritardo
    CAPACITIVO = "leading"    # Q >= 0, corrente in anticipo


@dataclass(frozen=True)
class PowerMetrics:
    """
    Grandezze del circuito per una valutazione.

    Attributi:
        tensione_efficace: Tensione efficace di alimentazione (V)
        corrente_efficace: Corrente efficace assorbita (A)
        potenza_apparente: Potenza apparente S (V·A)
        potenza_attiva: Potenza attiva P (W)
        potenza_reattiva: Potenza reattiva Q (V·A reattivi, negativa se induttiva)
        fattore_potenza: PF = P/S, in [-1, 1]
        angolo_fase: φ = atan2(Q, P) (rad)
        modulo_impedenza: |Z| = V_eff / I_eff (Ω)
        classificazione: Carico unitario, induttivo o capacitivo
        ammettenza_carico: Ammettenza del solo carico R-L
        ammettenza_condensatore: Ammettenza del solo condensatore
        ammettenza_totale: Ammettenza del parallelo carico + condensatore
    """

    tensione_efficace: "Q_"
    corrente_efficace: "Q_"
    potenza_apparente: "Q_"
    potenza_attiva: "Q_"
    potenza_reattiva: "Q_"
    fattore_potenza: float
    angolo_fase: "Q_"
    modulo_impedenza: "Q_"
    classificazione: PowerFactorClass
    ammettenza_carico: Admittance
    ammettenza_condensatore: Admittance
    ammettenza_totale: Admittance

    @property
    def angolo_fase_gradi(self) -> float:
        """Angolo di fase in gradi."""
        return float(np.degrees(self.angolo_fase.to("rad").magnitude))

    def to_dict(self) -> Dict[str, Any]:
        """Serializza le metriche in dizionario."""
        return {
            "Vrms_V": self.tensione_efficace.to("V").magnitude,
            "Irms_A": self.corrente_efficace.to("A").magnitude,
            "S_VA": self.potenza_apparente.to("V*A").magnitude,
            "P_W": self.potenza_attiva.to("W").magnitude,
            "Q_VAR": self.potenza_reattiva.to("V*A").magnitude,
            "PF": self.fattore_potenza,
            "phi_rad": self.angolo_fase.to("rad").magnitude,
            "phi_deg": self.angolo_fase_gradi,
            "Z_ohm": self.modulo_impedenza.to("ohm").magnitude,
            "classificazione": self.classificazione.value,
            "G_carico_S": self.ammettenza_carico.conduttanza.to("S").magnitude,
            "B_carico_S": self.ammettenza_carico.suscettanza.to("S").magnitude,
            "B_condensatore_S": self.ammettenza_condensatore.suscettanza.to("S").magnitude,
            "G_totale_S": self.ammettenza_totale.conduttanza.to("S").magnitude,
            "B_totale_S": self.ammettenza_totale.suscettanza.to("S").magnitude,
        }

    def riepilogo(self) -> List[str]:
        """
        Righe del pannello metriche, con la precisione di visualizzazione
        dello strumento didattico.

        Ritorna:
            Lista di stringhe pronte da mostrare
        """
        d = self.to_dict()
        return [
            f"Vrms: {d['Vrms_V']:.2f} V",
            f"Irms: {d['Irms_A']:.3f} A",
            f"Apparent S: {d['S_VA']:.2f} VA",
            f"Real P: {d['P_W']:.2f} W",
            f"Reactive Q: {d['Q_VAR']:.2f} VAR",
            f"Power factor: {d['PF']:.3f}",
            f"Admittance (load): {d['G_carico_S']:.4f} + j{d['B_carico_S']:.4f} S",
            f"Capacitor admittance: j{d['B_condensatore_S']:.6f} S",
        ]


def classifica_fattore_potenza(
    fattore_potenza: float,
    potenza_reattiva: float,
    soglia: float = CONFIGURAZIONE_DEFAULT.soglia_unitaria,
) -> PowerFactorClass:
    """
    Classifica il carico complessivo.

    Parametri:
        fattore_potenza: PF in [-1, 1]
        potenza_reattiva: Q in V·A reattivi (convenzione del carico)
        soglia: |PF| minimo per considerare il carico unitario

    Ritorna:
        PowerFactorClass
    """
    if abs(fattore_potenza) >= soglia:
        return PowerFactorClass.UNITARIO
    if potenza_reattiva < 0:
        return PowerFactorClass.INDUTTIVO
    return PowerFactorClass.CAPACITIVO


def calcola_metriche(
    ammettenza_carico: Admittance,
    capacita_correzione: "Q_",
    config: SupplyConfig = CONFIGURAZIONE_DEFAULT,
) -> PowerMetrics:
    """
    Calcola tutte le grandezze del circuito rifasato.

    Il modulo dell'ammettenza totale e la potenza apparente sono protetti
    con EPSILON: un circuito aperto dà valori finiti (quasi nulli) invece
    di un errore.

    Parametri:
        ammettenza_carico: Ammettenza del carico R-L
        capacita_correzione: Capacità di rifasamento in parallelo (F o μF)
        config: Configurazione della rete

    Ritorna:
        PowerMetrics
    """
    ammettenza_cond = calcola_ammettenza_condensatore(capacita_correzione, config)
    ammettenza_tot = ammettenza_carico + ammettenza_cond

    g_t = ammettenza_tot.conduttanza.to("S").magnitude
    b_t = ammettenza_tot.suscettanza.to("S").magnitude
    v_eff = config.tensione_efficace.to("V").magnitude

    y_mod = limita_denominatore(np.sqrt(g_t**2 + b_t**2))

    i_eff = v_eff * y_mod
    s = v_eff * i_eff
    p = s * (g_t / y_mod)
    q = s * (b_t / y_mod)
    pf = dividi_sicuro(p, s)
    phi = np.arctan2(q, p)

    classe = classifica_fattore_potenza(pf, q, config.soglia_unitaria)

    logger.debug(
        "Metriche: I=%.4f A, P=%.2f W, Q=%.2f VAR, PF=%.4f (%s)",
        i_eff, p, q, pf, classe.value,
    )

    return PowerMetrics(
        tensione_efficace=Q_(v_eff, "V"),
        corrente_efficace=Q_(i_eff, "A"),
        potenza_apparente=Q_(s, "V*A"),
        potenza_attiva=Q_(p, "W"),
        potenza_reattiva=Q_(q, "V*A"),
        fattore_potenza=float(pf),
        angolo_fase=Q_(float(phi), "rad"),
        modulo_impedenza=Q_(dividi_sicuro(v_eff, i_eff), "ohm"),
        classificazione=classe,
        ammettenza_carico=ammettenza_carico,
        ammettenza_condensatore=ammettenza_cond,
        ammettenza_totale=ammettenza_tot,
    )
