"""
Combat Calculation Tools

Stateless helpers for a game's combat math. The calling game layer owns all
state and decides when to use them.

Subsystems:
- value: hit rate, crit chance, physical damage, effective HP, crit damage
- tools: probability sampling and floating (jittered) numbers
- rng: per-thread random source used by tools
- numeric: 32-bit rounding and wrap-around semantics

Usage:
    from packages.calculation import attack_hit_rate, floating_number_by_range

    chance = attack_hit_rate(50, 50)          # 0.5
    damage = floating_number_by_range(100, 10)  # 90..110
"""

__version__ = "1.1.0"

# Combat Math
from .value import (
    attack_hit_rate,
    attacker_crit_chance,
    attacker_physical_damage,
    victim_effective_hp,
    critical_damage,
    UNKILLABLE_HP,
)

# Numeric Utilities
from .tools import (
    SpecifiedDirection,
    random_boolean_value,
    floating_number,
    floating_number_by_range,
    floating_number_by_range_directed,
    floating_number_by_percentage,
    floating_number_by_percentage_directed,
    floating_number_float_by_percentage,
)

# Errors
from .errors import CalculationError, InvalidArgumentError, NullReferenceError

from . import rng

__all__ = [
    # Combat Math
    "attack_hit_rate",
    "attacker_crit_chance",
    "attacker_physical_damage",
    "victim_effective_hp",
    "critical_damage",
    "UNKILLABLE_HP",
    # Numeric Utilities
    "SpecifiedDirection",
    "random_boolean_value",
    "floating_number",
    "floating_number_by_range",
    "floating_number_by_range_directed",
    "floating_number_by_percentage",
    "floating_number_by_percentage_directed",
    "floating_number_float_by_percentage",
    # Errors
    "CalculationError",
    "InvalidArgumentError",
    "NullReferenceError",
    # RNG
    "rng",
]
