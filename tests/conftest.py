# Configurazione pytest e fixture comuni
"""
Fixture e configurazione per i test del motore di rifasamento.
"""

import pytest
import sys
from pathlib import Path

# Aggiungi la radice del repository al path per gli import
root_path = Path(__file__).parent.parent
sys.path.insert(0, str(root_path))


@pytest.fixture
def unita():
    """Fixture per il registry delle unità Pint."""
    from rifasamento.core.units import ureg, Q_

    return ureg, Q_


@pytest.fixture
def config_default():
    """Configurazione di rete di default: 230 V, 50 Hz, 600 campioni."""
    from rifasamento.core.constants import SupplyConfig

    return SupplyConfig()


@pytest.fixture
def parametri_standard(unita):
    """
    Fixture per il carico di riferimento dello strumento.

    R = 100 Ω, L = 200 mH, Ccorr = 0 μF → PF ≈ 0.847 induttivo
    """
    _, Q_ = unita
    from rifasamento.modules.circuito import LoadParameters

    return LoadParameters(Q_(100, "ohm"), Q_(200, "mH"), Q_(0, "uF"))


@pytest.fixture
def parametri_resistivi(unita):
    """
    Fixture per un carico puramente resistivo.

    R = 100 Ω, L = 0 mH, Ccorr = 0 μF → PF = 1
    """
    _, Q_ = unita
    from rifasamento.modules.circuito import LoadParameters

    return LoadParameters(Q_(100, "ohm"), Q_(0, "mH"), Q_(0, "uF"))


@pytest.fixture
def simulatore(config_default):
    """Simulatore con cache piccola per i test di memoizzazione."""
    from rifasamento.simulation import PowerFactorSimulator

    return PowerFactorSimulator(config_default, dimensione_cache=4)


@pytest.fixture
def valori_attesi_standard():
    """
    Valori attesi per R = 100 Ω, L = 200 mH, Ccorr = 0 μF.

    Ritorna dizionario con le grandezze calcolate a mano.
    """
    return {
        "X_L_ohm": 62.832,
        "G_S": 0.0071695,
        "B_S": -0.0045047,
        "I_A": 1.9475,
        "S_VA": 447.93,
        "P_W": 379.3,
        "Q_VAR": -238.3,
        "PF": 0.847,
        "C_rif_uF": 14.34,
    }
