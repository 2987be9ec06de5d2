# Calcolo dell'ammettenza del carico R-L e del condensatore
"""
Modulo per il calcolo di impedenza e ammettenza in regime sinusoidale.

Il carico è una serie R-L alimentata a pulsazione fissa ω; il condensatore
di rifasamento è in parallelo al carico, quindi le ammettenze si sommano.

Equazioni principali:
    - Reattanza induttiva: X_L = ω·L
    - Ammettenza carico: Y = 1/(R + jX_L) = R/(R²+X_L²) - j·X_L/(R²+X_L²)
    - Ammettenza condensatore: Y_C = j·ω·C
    - Parallelo: Y_tot = Y + Y_C

Convenzione: la suscettanza induttiva è negativa (carico in ritardo),
quella capacitiva positiva.
"""

from dataclasses import dataclass

from ...core.units import Q_
from ...core.constants import SupplyConfig, CONFIGURAZIONE_DEFAULT
from ...core.numerica import limita_denominatore, dividi_sicuro


@dataclass(frozen=True)
class Admittance:
    """
    Ammettenza complessa Y = G + jB.

    Attributi:
        conduttanza: Parte reale G (S)
        suscettanza: Parte immaginaria B (S)
    """

    conduttanza: "Q_"
    suscettanza: "Q_"

    @classmethod
    def da_siemens(cls, g: float, b: float) -> "Admittance":
        """Crea un'ammettenza da valori in siemens."""
        return cls(Q_(g, "S"), Q_(b, "S"))

    def come_complesso(self) -> complex:
        """Ritorna Y come numero complesso in siemens."""
        return complex(
            self.conduttanza.to("S").magnitude,
            self.suscettanza.to("S").magnitude,
        )

    @property
    def modulo(self) -> "Q_":
        """
        Modulo dell'ammettenza.

        |Y| = sqrt(G² + B²)
        """
        return Q_(abs(self.come_complesso()), "S")

    def impedenza(self) -> complex:
        """
        Impedenza equivalente Z = 1/Y in ohm.

        Per un'ammettenza nulla (circuito aperto) il modulo è protetto con
        EPSILON e il risultato resta finito.
        """
        y = self.come_complesso()
        return dividi_sicuro(1.0, abs(y) ** 2) * y.conjugate()

    def __add__(self, altra: "Admittance") -> "Admittance":
        # Rami in parallelo
        return Admittance(
            self.conduttanza + altra.conduttanza,
            self.suscettanza + altra.suscettanza,
        )


def calcola_reattanza_induttiva(
    induttanza: "Q_",
    config: SupplyConfig = CONFIGURAZIONE_DEFAULT,
) -> "Q_":
    """
    Calcola la reattanza induttiva alla frequenza di rete.

    X_L = ω·L

    Parametri:
        induttanza: Induttanza (H o mH)
        config: Configurazione della rete

    Ritorna:
        Reattanza in ohm
    """
    omega = config.pulsazione.magnitude
    l = induttanza.to("H").magnitude
    return Q_(omega * l, "ohm")


def calcola_ammettenza_carico(
    resistenza: "Q_",
    induttanza: "Q_",
    config: SupplyConfig = CONFIGURAZIONE_DEFAULT,
) -> Admittance:
    """
    Calcola l'ammettenza del carico serie R-L.

    G = R / (R² + X_L²)
    B = -X_L / (R² + X_L²)

    Il denominatore è protetto con EPSILON: per R = 0 e L = 0 il risultato
    è un'ammettenza finita invece di un errore.

    Parametri:
        resistenza: Resistenza del carico (Ω)
        induttanza: Induttanza del carico (H o mH)
        config: Configurazione della rete

    Ritorna:
        Admittance del carico

    Esempio:
        >>> y = calcola_ammettenza_carico(Q_(100, "ohm"), Q_(200, "mH"))
        >>> y.suscettanza.to("mS")
        -4.5047 mS
    """
    r = resistenza.to("ohm").magnitude
    x_l = calcola_reattanza_induttiva(induttanza, config).magnitude

    denominatore = limita_denominatore(r**2 + x_l**2)

    return Admittance.da_siemens(r / denominatore, -x_l / denominatore)


def calcola_ammettenza_condensatore(
    capacita: "Q_",
    config: SupplyConfig = CONFIGURAZIONE_DEFAULT,
) -> Admittance:
    """
    Calcola l'ammettenza del condensatore di rifasamento (ideale, senza perdite).

    Y_C = j·ω·C

    Parametri:
        capacita: Capacità (F o μF)
        config: Configurazione della rete

    Ritorna:
        Admittance con conduttanza nulla
    """
    omega = config.pulsazione.magnitude
    c = capacita.to("F").magnitude
    return Admittance.da_siemens(0.0, omega * c)
