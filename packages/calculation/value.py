"""
Combat Math - hit rate, crit chance, damage and survivability formulas.

Design principles:
1. Pure functions - no side effects, no state
2. Never raise: out-of-range stats map to boundary values (0.0, 1.0, UNKILLABLE_HP)
3. Bit-identical results for identical inputs

Stat contests (hit vs evade, crit vs resistance) all use the same ratio:
    chance = a / (a + b)
"""

from .numeric import INT32_MAX, round_half_up, to_float32

__all__ = [
    "attack_hit_rate",
    "attacker_crit_chance",
    "attacker_physical_damage",
    "victim_effective_hp",
    "critical_damage",
    # Constants
    "UNKILLABLE_HP",
]


# =============================================================================
# CONSTANTS
# =============================================================================

# Effective HP of a victim that can never be damaged (100% evade or reduction)
UNKILLABLE_HP = float(INT32_MAX)


# =============================================================================
# CHANCE CALCULATION
# =============================================================================

def attack_hit_rate(attacker_hit: int, victim_evade: int) -> float:
    """
    Chance that an attack connects.

    An attacker without a hit stat always hits; otherwise a victim without
    evade is never hit. The attacker check wins when both apply.

    Args:
        attacker_hit: Attacker's hit stat
        victim_evade: Victim's evade stat

    Returns:
        Probability in [0, 1]
    """
    if attacker_hit <= 0:
        return 1.0
    if victim_evade <= 0:
        return 0.0
    return attacker_hit / (attacker_hit + victim_evade)


def attacker_crit_chance(attacker_crit: int, victim_resistance: int) -> float:
    """
    Chance that an attack is a critical hit.

    Args:
        attacker_crit: Attacker's crit stat
        victim_resistance: Victim's crit resistance

    Returns:
        Probability in [0, 1]
    """
    if attacker_crit <= 0:
        return 0.0
    if victim_resistance <= 0:
        return 1.0
    return attacker_crit / (attacker_crit + victim_resistance)


# =============================================================================
# DAMAGE CALCULATION
# =============================================================================

def attacker_physical_damage(attack: float, armor: float) -> float:
    """
    Physical damage dealt through armor: attack^2 / (attack + armor).

    When attack + armor is exactly 0 the divisor is nudged away from zero:
    1. armor <= 0  -> armor + 1
    2. attack <= 0 -> attack + 1
    Both checks look at the values passed in, not the nudged ones, so
    (0, 0) becomes (1, 1) and yields 0.5.

    Args:
        attack: Attacker's physical attack
        armor: Victim's armor

    Returns:
        Damage as float
    """
    nudged_attack = attack
    nudged_armor = armor

    if attack + armor == 0:
        if armor <= 0:
            nudged_armor = armor + 1
        if attack <= 0:
            nudged_attack = attack + 1

    return nudged_attack * nudged_attack / (nudged_attack + nudged_armor)


def critical_damage(hurt: float, crits_effect: float) -> int:
    """
    Damage of a critical hit.

    The product is narrowed to single precision before rounding half-up,
    e.g. 100 * 1.5 -> 150, 0.5 * 1 -> 1, -0.5 * 1 -> 0.

    Args:
        hurt: Damage the attack would deal without the crit
        crits_effect: Crit multiplier

    Returns:
        Crit damage as int
    """
    return round_half_up(to_float32(hurt * crits_effect))


# =============================================================================
# SURVIVABILITY
# =============================================================================

def victim_effective_hp(hp: int, damage_reduction: float, evade_chance: float) -> float:
    """
    HP inflated by damage reduction and evasion.

    Returns UNKILLABLE_HP when either reduction or evasion reaches 100%.
    """
    if evade_chance >= 1.0 or damage_reduction >= 1.0:
        return UNKILLABLE_HP
    return hp / (1.0 - damage_reduction) / (1.0 - evade_chance)
