# Caricamento della configurazione di rete da file
"""
Caricamento della configurazione di rete da file JSON.

Permette di provare condizioni di alimentazione diverse (es. 120 V / 60 Hz)
senza modificare il codice. Formato del file:

    {
        "tensione_efficace": {"valore": 120, "unita": "V"},
        "frequenza": {"valore": 60, "unita": "Hz"},
        "n_campioni": 1200,
        "soglia_unitaria": 0.999
    }

I campi assenti mantengono il valore di default. Se il file non esiste si
usano i default; se è malformato viene registrato un avviso e si usano
comunque i default.

Uso tipico:
    from rifasamento.core.configurazione import carica_configurazione

    config = carica_configurazione(Path("rete_60hz.json"))
"""

import json
import logging
from dataclasses import fields
from pathlib import Path
from typing import Optional

import pint

from .units import Q_
from .constants import SupplyConfig

logger = logging.getLogger(__name__)

# Campi della configurazione che portano un'unità di misura
CAMPI_CON_UNITA = {
    "tensione_efficace",
    "frequenza",
    "limite_capacita_min",
    "limite_capacita_max",
}


def _parse_campo(nome: str, valore):
    """Converte un valore JSON nel tipo atteso dal campo."""
    if nome in CAMPI_CON_UNITA:
        return Q_(valore["valore"], valore["unita"])
    if nome == "n_campioni":
        return int(valore)
    return float(valore)


def configurazione_da_dizionario(dati: dict) -> SupplyConfig:
    """
    Costruisce una SupplyConfig da un dizionario (es. JSON decodificato).

    Parametri:
        dati: Dizionario con i campi da sovrascrivere

    Ritorna:
        SupplyConfig con i default per i campi assenti

    Solleva:
        TypeError se i dati non sono un dizionario
        KeyError se compare un campo sconosciuto o manca "valore"/"unita"
        ValueError se la configurazione risultante non è valida
    """
    if not isinstance(dati, dict):
        raise TypeError(f"Attesa una mappa di campi, ricevuto {type(dati).__name__}")

    nomi_validi = {f.name for f in fields(SupplyConfig)}
    argomenti = {}
    for nome, valore in dati.items():
        if nome not in nomi_validi:
            raise KeyError(f"Campo '{nome}' non riconosciuto. Disponibili: {sorted(nomi_validi)}")
        argomenti[nome] = _parse_campo(nome, valore)
    return SupplyConfig(**argomenti)


def carica_configurazione(percorso: Optional[Path] = None) -> SupplyConfig:
    """
    Carica la configurazione di rete da file JSON.

    Parametri:
        percorso: Percorso del file JSON (opzionale)

    Ritorna:
        SupplyConfig letta dal file, oppure quella di default
    """
    if percorso is None:
        return SupplyConfig()

    percorso = Path(percorso)
    if not percorso.exists():
        logger.debug("File di configurazione %s assente, uso i default", percorso)
        return SupplyConfig()

    try:
        with open(percorso, "r", encoding="utf-8") as f:
            dati = json.load(f)
        config = configurazione_da_dizionario(dati)
    except (json.JSONDecodeError, KeyError, TypeError, ValueError, pint.PintError) as e:
        logger.warning("Attenzione: errore caricamento %s: %s", percorso, e)
        return SupplyConfig()

    logger.info(
        "Configurazione caricata da %s: %s, %s",
        percorso,
        config.tensione_efficace,
        config.frequenza,
    )
    return config
