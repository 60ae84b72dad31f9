"""
Core math modules для fincalc

Арифметика, финансовые формулы и калькулятор с аккумулятором.
"""

# Arithmetic
from src.core.math.arithmetic import (
    # Constants
    DIVISION_BY_ZERO_MESSAGE,
    PERCENT_BASE,
    # Exceptions
    DivisionByZeroError,
    # Basic operations
    add,
    divide,
    multiply,
    subtract,
    # Percentage & tax
    calculate_percentage,
    calculate_prix_ttc,
    calculate_tva,
)

# Compounding
from src.core.math.compounding import (
    TAUX_ANNUEL_MAX,
    TAUX_ANNUEL_MIN,
    InvalidArgumentError,
    calculate_interets_composes,
    compound_interest_trajectory,
)

# Stateful calculator
from src.core.math.calculator import Calculator

__all__ = [
    # Arithmetic — Constants
    "DIVISION_BY_ZERO_MESSAGE",
    "PERCENT_BASE",
    # Arithmetic — Exceptions
    "DivisionByZeroError",
    # Arithmetic — Basic operations
    "add",
    "divide",
    "multiply",
    "subtract",
    # Arithmetic — Percentage & tax
    "calculate_percentage",
    "calculate_prix_ttc",
    "calculate_tva",
    # Compounding — Constants
    "TAUX_ANNUEL_MAX",
    "TAUX_ANNUEL_MIN",
    # Compounding — Exceptions
    "InvalidArgumentError",
    # Compounding — Functions
    "calculate_interets_composes",
    "compound_interest_trajectory",
    # Calculator
    "Calculator",
]
