# Test unitari per il modulo core
"""
Test per i componenti del modulo core:
    - Unità di misura
    - Protezioni numeriche
    - SupplyConfig e caricamento da JSON
"""

import json
import logging

import numpy as np
import pint
import pytest

from rifasamento.core.units import Q_, verifica_dimensioni, formatta_grandezza
from rifasamento.core.numerica import EPSILON, limita_denominatore, dividi_sicuro, limita
from rifasamento.core.constants import SupplyConfig, LoadRanges
from rifasamento.core.configurazione import carica_configurazione, configurazione_da_dizionario


class TestUnita:
    """Test per le funzioni di supporto alle unità."""

    def test_verifica_dimensioni(self):
        """Verifica compatibilità dimensionale."""
        assert verifica_dimensioni(Q_(200, "mH"), "H")
        assert not verifica_dimensioni(Q_(200, "mH"), "ohm")

    def test_formatta_grandezza(self):
        """Verifica conversione e formattazione compatta."""
        testo = formatta_grandezza(Q_(0.2, "H"), "mH", decimali=1)

        assert testo == "200.0 mH"


class TestNumerica:
    """Test per le protezioni sulle divisioni degeneri."""

    def test_denominatore_nullo(self):
        """Uno zero esatto viene sostituito con EPSILON."""
        assert limita_denominatore(0.0) == EPSILON
        assert limita_denominatore(float("nan")) == EPSILON

    def test_denominatore_valido_invariato(self):
        """Un denominatore non nullo non viene toccato, anche se piccolo."""
        assert limita_denominatore(1e-300) == 1e-300
        assert limita_denominatore(-2.5) == -2.5

    def test_dividi_sicuro(self):
        """La divisione per zero dà un valore finito."""
        assert dividi_sicuro(1.0, 0.0) == pytest.approx(1 / EPSILON)
        assert dividi_sicuro(6.0, 3.0) == 2.0
        assert np.isfinite(dividi_sicuro(0.0, 0.0))

    def test_limita(self):
        """Verifica clamp sull'intervallo chiuso."""
        assert limita(5, 100, 20000) == 100
        assert limita(25000, 100, 20000) == 20000
        assert limita(173, 100, 20000) == 173


class TestSupplyConfig:
    """Test per la configurazione della rete."""

    def test_valori_default(self, config_default):
        """Verifica 230 V / 50 Hz / 600 campioni."""
        assert config_default.tensione_efficace.to("V").magnitude == pytest.approx(230)
        assert config_default.frequenza.to("Hz").magnitude == pytest.approx(50)
        assert config_default.n_campioni == 600
        assert config_default.soglia_unitaria == pytest.approx(0.999)
        assert config_default.moltiplicatore_limite == pytest.approx(1.2)

    def test_grandezze_derivate(self, config_default):
        """Verifica ω = 2πf, T = 1/f, V_picco = √2·V_eff."""
        assert config_default.pulsazione.to("rad/s").magnitude == pytest.approx(314.159265, rel=1e-8)
        assert config_default.periodo.to("ms").magnitude == pytest.approx(20.0)
        assert config_default.tensione_picco.to("V").magnitude == pytest.approx(325.269, rel=1e-5)

    def test_normalizzazione_unita(self):
        """Le grandezze vengono convertite alle unità di riferimento."""
        config = SupplyConfig(tensione_efficace=Q_(0.12, "kV"), frequenza=Q_(0.06, "kHz"))

        assert config.tensione_efficace.magnitude == pytest.approx(120)
        assert config.frequenza.magnitude == pytest.approx(60)

    def test_configurazione_immutabile(self, config_default):
        """La configurazione non può essere modificata."""
        with pytest.raises(AttributeError):
            config_default.n_campioni = 10

    @pytest.mark.parametrize(
        "argomenti",
        [
            {"tensione_efficace": Q_(0, "V")},
            {"frequenza": Q_(-50, "Hz")},
            {"n_campioni": 2},
            {"soglia_unitaria": 1.5},
            {"moltiplicatore_limite": 1.0},
            {"limite_capacita_min": Q_(500, "uF"), "limite_capacita_max": Q_(100, "uF")},
        ],
    )
    def test_configurazione_non_valida(self, argomenti):
        """Configurazioni incoerenti sollevano ValueError."""
        with pytest.raises(ValueError):
            SupplyConfig(**argomenti)

    def test_unita_sbagliata(self):
        """Una frequenza in volt solleva DimensionalityError."""
        with pytest.raises(pint.DimensionalityError):
            SupplyConfig(frequenza=Q_(50, "V"))

    def test_range_carico(self):
        """Verifica i range dell'interfaccia."""
        assert LoadRanges.RESISTENZA_MAX.to("ohm").magnitude == 500
        assert LoadRanges.INDUTTANZA_MAX.to("mH").magnitude == 2000
        assert LoadRanges.RESISTENZA_DEFAULT.to("ohm").magnitude == 100


class TestCaricamentoConfigurazione:
    """Test per il caricamento della configurazione da JSON."""

    def test_senza_percorso(self):
        """Senza file si ottiene la configurazione di default."""
        assert carica_configurazione() == SupplyConfig()

    def test_file_assente(self, tmp_path):
        """Un file inesistente non è un errore."""
        config = carica_configurazione(tmp_path / "assente.json")

        assert config == SupplyConfig()

    def test_file_valido(self, tmp_path):
        """I campi del file sovrascrivono i default."""
        percorso = tmp_path / "rete_60hz.json"
        percorso.write_text(
            json.dumps(
                {
                    "tensione_efficace": {"valore": 120, "unita": "V"},
                    "frequenza": {"valore": 60, "unita": "Hz"},
                    "n_campioni": 1200,
                }
            ),
            encoding="utf-8",
        )

        config = carica_configurazione(percorso)

        assert config.tensione_efficace.magnitude == pytest.approx(120)
        assert config.pulsazione.magnitude == pytest.approx(2 * np.pi * 60)
        assert config.n_campioni == 1200
        assert config.soglia_unitaria == pytest.approx(0.999)

    def test_file_malformato(self, tmp_path, caplog):
        """Un JSON malformato dà i default e un avviso nel log."""
        percorso = tmp_path / "rotto.json"
        percorso.write_text("{ non è json", encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            config = carica_configurazione(percorso)

        assert config == SupplyConfig()
        assert "errore caricamento" in caplog.text

    def test_campo_sconosciuto(self):
        """Un campo sconosciuto nel dizionario solleva KeyError."""
        with pytest.raises(KeyError):
            configurazione_da_dizionario({"fase": 3})

    def test_campo_sconosciuto_da_file(self, tmp_path, caplog):
        """Da file, un campo sconosciuto porta ai default con avviso."""
        percorso = tmp_path / "sconosciuto.json"
        percorso.write_text(json.dumps({"fase": 3}), encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            config = carica_configurazione(percorso)

        assert config == SupplyConfig()
        assert "Attenzione" in caplog.text

    def test_unita_sconosciuta_da_file(self, tmp_path, caplog):
        """Un'unità non definita porta ai default con avviso."""
        percorso = tmp_path / "unita.json"
        percorso.write_text(
            json.dumps({"tensione_efficace": {"valore": 230, "unita": "Volty"}}),
            encoding="utf-8",
        )

        with caplog.at_level(logging.WARNING):
            config = carica_configurazione(percorso)

        assert config == SupplyConfig()
        assert "errore caricamento" in caplog.text

    def test_unita_incompatibile_da_file(self, tmp_path, caplog):
        """Una frequenza espressa in volt porta ai default con avviso."""
        percorso = tmp_path / "dimensioni.json"
        percorso.write_text(
            json.dumps({"frequenza": {"valore": 50, "unita": "V"}}),
            encoding="utf-8",
        )

        with caplog.at_level(logging.WARNING):
            config = carica_configurazione(percorso)

        assert config == SupplyConfig()
        assert "errore caricamento" in caplog.text

    def test_radice_non_oggetto(self):
        """Un JSON che non è un oggetto solleva TypeError."""
        with pytest.raises(TypeError):
            configurazione_da_dizionario([1, 2])

    def test_radice_non_oggetto_da_file(self, tmp_path, caplog):
        """Da file, una lista al posto dell'oggetto porta ai default con avviso."""
        percorso = tmp_path / "lista.json"
        percorso.write_text("[1, 2]", encoding="utf-8")

        with caplog.at_level(logging.WARNING):
            config = carica_configurazione(percorso)

        assert config == SupplyConfig()
        assert "errore caricamento" in caplog.text
