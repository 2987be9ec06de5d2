# Sistema di unità di misura per il motore di rifasamento
"""
Sistema di unità di misura basato su Pint.

Questo modulo fornisce un registry di unità di misura configurato per
le grandezze tipiche di un circuito monofase in regime sinusoidale
(resistenze in Ω, induttanze in mH, capacità in μF).

Uso tipico:
    from rifasamento.core.units import ureg, Q_

    resistenza = Q_(100, "ohm")
    induttanza = Q_(200, "mH")
    capacita = Q_(14.3, "uF")

    # Conversioni automatiche
    induttanza_h = induttanza.to("H")

Riferimenti:
    - Pint documentation: https://pint.readthedocs.io/
"""

import pint

# Creare il registry delle unità
ureg = pint.UnitRegistry()

# Alias per comodità - Quantity constructor
Q_ = ureg.Quantity

# Unità usate nel calcolo:
# - Resistenza / reattanza: ohm
# - Induttanza: H, mH
# - Capacità: F, uF
# - Ammettenza: S
# - Tensione: V
# - Corrente: A
# - Potenza attiva: W
# - Potenza apparente e reattiva: V * A
# - Frequenza: Hz, pulsazione rad/s
# - Angolo di fase: rad, degree

# Configurazione per output più leggibile
ureg.formatter.default_format = "~P"  # Formato compatto con simboli


def verifica_dimensioni(grandezza: pint.Quantity, dimensione_attesa: str) -> bool:
    """
    Verifica che una grandezza abbia le dimensioni attese.

    Parametri:
        grandezza: Grandezza fisica con unità
        dimensione_attesa: Stringa con l'unità attesa (es. "ohm", "mH", "uF")

    Ritorna:
        True se le dimensioni sono compatibili, False altrimenti

    Esempio:
        >>> verifica_dimensioni(Q_(200, "mH"), "H")    # True
        >>> verifica_dimensioni(Q_(200, "mH"), "ohm")  # False
    """
    try:
        grandezza.to(dimensione_attesa)
        return True
    except pint.DimensionalityError:
        return False


def formatta_grandezza(
    grandezza: pint.Quantity,
    unita_output: str = None,
    decimali: int = 3,
) -> str:
    """
    Formatta una grandezza fisica per output leggibile.

    Parametri:
        grandezza: Grandezza fisica con unità
        unita_output: Unità desiderata per l'output (opzionale)
        decimali: Cifre decimali mostrate (default 3)

    Ritorna:
        Stringa formattata della grandezza

    Esempio:
        >>> formatta_grandezza(Q_(0.2, "H"), "mH", decimali=1)
        '200.0 mH'
    """
    if unita_output:
        grandezza = grandezza.to(unita_output)
    return f"{grandezza:~.{decimali}fP}"

