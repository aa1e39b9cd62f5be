from __future__ import annotations
from celnav.core.calculator import CalculatorRegistry
from celnav.engines.calculators import make_calculator

CALCULATOR_KINDS = ("solar", "lunar")

def build_registry() -> CalculatorRegistry:
    calculators = {}
    for name in CALCULATOR_KINDS:
        calculators[name] = make_calculator(name)
    return CalculatorRegistry(calculators)
