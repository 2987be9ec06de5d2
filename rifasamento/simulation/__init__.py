# Modulo Simulation Engine
"""
Valutazione integrata del circuito rifasato.

Moduli:
    - motore: valuta() e PowerFactorSimulator con memoizzazione
"""

from .motore import EvaluationResult, valuta, PowerFactorSimulator

__all__ = ["EvaluationResult", "valuta", "PowerFactorSimulator"]
