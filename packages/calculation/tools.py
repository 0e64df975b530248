"""
Numeric Utilities - probability sampling and "floating" (jittered) numbers.

A floating number is a base value moved up or down by a random magnitude:
1. Validate the range / percentage (and direction, if given)
2. Draw the magnitude uniformly from [0, bound)
3. Draw the sign with a coin flip, unless a direction forces it
4. Apply it, with 32-bit int results

The magnitude bound depends on the variant:
- by range:              floating_int_range + 1
- by percentage (int):   int(floating_percentage) * number + 1
- by percentage (float): round(float32(floating_percentage * number)) + 1

The int percentage variant truncates the percentage before multiplying, so
any percentage below 1.0 leaves the number unchanged. The two formulas
must stay distinct.

Every random helper takes an optional ``rng`` (anything with the
random.Random interface); by default the calling thread's generator is used.
"""

import logging
import random
from enum import Enum
from typing import Optional, Union

from . import rng as _rng
from .errors import InvalidArgumentError, NullReferenceError
from .numeric import INT32_MAX, round_half_up, to_float32, truncate_to_int, wrap_int32

__all__ = [
    "SpecifiedDirection",
    "random_boolean_value",
    "floating_number",
    "floating_number_by_range",
    "floating_number_by_range_directed",
    "floating_number_by_percentage",
    "floating_number_by_percentage_directed",
    "floating_number_float_by_percentage",
]

logger = logging.getLogger(__name__)


class SpecifiedDirection(Enum):
    """Forced direction for a floating number."""
    ONLY_INCREASE = "only_increase"
    ONLY_REDUCED = "only_reduced"


# =============================================================================
# INTERNAL HELPERS
# =============================================================================

def _generator(rng: Optional[random.Random]) -> random.Random:
    return rng if rng is not None else _rng.current()


def _check_range(floating_int_range: int) -> None:
    if floating_int_range < 0 or floating_int_range > INT32_MAX:
        logger.debug("Rejected floating range %r", floating_int_range)
        raise InvalidArgumentError(f"Invalid range: {floating_int_range}", floating_int_range)


def _check_percentage(floating_percentage: float) -> None:
    if floating_percentage < 0.0:
        logger.debug("Rejected floating percentage %r", floating_percentage)
        raise InvalidArgumentError(f"Invalid range: {floating_percentage}", floating_percentage)


def _check_direction(direction: Optional[SpecifiedDirection]) -> None:
    if direction is None:
        logger.debug("Rejected missing floating direction")
        raise NullReferenceError("direction must not be None")
    if not isinstance(direction, SpecifiedDirection):
        logger.debug("Rejected floating direction %r", direction)
        raise InvalidArgumentError(f"Invalid direction: {direction!r}", direction)


def _draw_magnitude(bound: int, rng: random.Random) -> int:
    """Uniform int in [0, bound)."""
    if bound <= 0:
        logger.debug("Rejected floating bound %r", bound)
        raise InvalidArgumentError(f"bound must be positive: {bound}", bound)
    return rng.randrange(bound)


def _coin_flip(rng: random.Random) -> bool:
    return bool(rng.getrandbits(1))


def _apply_direction(number: int, magnitude: int, direction: SpecifiedDirection) -> int:
    if direction is SpecifiedDirection.ONLY_INCREASE:
        return wrap_int32(number + magnitude)
    return wrap_int32(number - magnitude)


def _percentage_bound(number: int, floating_percentage: float) -> int:
    # Percentage is truncated first: int(1.9) * 100 + 1 == 101
    return wrap_int32(truncate_to_int(floating_percentage) * number + 1)


# =============================================================================
# PROBABILITY SAMPLING
# =============================================================================

def random_boolean_value(true_probability: float, *, rng: Optional[random.Random] = None) -> bool:
    """
    Return True with the given probability.

    Probabilities >= 1.0 and <= 0.0 are decided without drawing.

    Args:
        true_probability: Chance of returning True
        rng: Optional generator (defaults to the thread's generator)

    Returns:
        True if a uniform draw in [0, 1) is below true_probability
    """
    if true_probability >= 1.0:
        return True
    if true_probability <= 0.0:
        return False
    return _generator(rng).random() < true_probability


# =============================================================================
# FLOATING NUMBERS
# =============================================================================

def floating_number_by_range(
    number: int,
    floating_int_range: int,
    *,
    rng: Optional[random.Random] = None,
) -> int:
    """
    Add or subtract a random amount in [0, floating_int_range].

    Args:
        number: Base value
        floating_int_range: Largest amount to move by (non-negative)
        rng: Optional generator (defaults to the thread's generator)

    Returns:
        number +/- amount

    Raises:
        InvalidArgumentError: If floating_int_range is outside [0, INT32_MAX]
    """
    _check_range(floating_int_range)
    gen = _generator(rng)

    magnitude = _draw_magnitude(wrap_int32(floating_int_range + 1), gen)
    if _coin_flip(gen):
        return wrap_int32(number + magnitude)
    return wrap_int32(number - magnitude)


def floating_number_by_range_directed(
    number: int,
    floating_int_range: int,
    direction: SpecifiedDirection,
    *,
    rng: Optional[random.Random] = None,
) -> int:
    """
    Move number by a random amount in [0, floating_int_range] in one direction.

    Only the magnitude is drawn; the sign comes from ``direction``.

    Raises:
        InvalidArgumentError: If floating_int_range is outside [0, INT32_MAX]
            or direction is unknown
        NullReferenceError: If direction is None
    """
    _check_range(floating_int_range)
    _check_direction(direction)

    magnitude = _draw_magnitude(wrap_int32(floating_int_range + 1), _generator(rng))
    return _apply_direction(number, magnitude, direction)


def floating_number_by_percentage(
    number: int,
    floating_percentage: float,
    *,
    rng: Optional[random.Random] = None,
) -> int:
    """
    Add or subtract a random amount scaled by a percentage of number.

    The amount is drawn from [0, int(floating_percentage) * number].

    Raises:
        InvalidArgumentError: If floating_percentage < 0.0, or the bound is
            not positive (negative number)
    """
    _check_percentage(floating_percentage)
    gen = _generator(rng)

    magnitude = _draw_magnitude(_percentage_bound(number, floating_percentage), gen)
    if _coin_flip(gen):
        return wrap_int32(number + magnitude)
    return wrap_int32(number - magnitude)


def floating_number_by_percentage_directed(
    number: int,
    floating_percentage: float,
    direction: SpecifiedDirection,
    *,
    rng: Optional[random.Random] = None,
) -> int:
    """
    Percentage variant with the sign forced by ``direction``.

    Raises:
        InvalidArgumentError: If floating_percentage < 0.0, the bound is not
            positive, or direction is unknown
        NullReferenceError: If direction is None
    """
    _check_percentage(floating_percentage)
    _check_direction(direction)

    magnitude = _draw_magnitude(_percentage_bound(number, floating_percentage), _generator(rng))
    return _apply_direction(number, magnitude, direction)


def floating_number_float_by_percentage(
    number: float,
    floating_percentage: float,
    *,
    rng: Optional[random.Random] = None,
) -> int:
    """
    Float variant: amount drawn from [0, round(floating_percentage * number)].

    Unlike the int variant the percentage is not truncated. The moved value
    is truncated toward zero.

    Raises:
        InvalidArgumentError: If floating_percentage < 0.0, or the bound is
            not positive
    """
    _check_percentage(floating_percentage)
    gen = _generator(rng)

    bound = wrap_int32(round_half_up(to_float32(floating_percentage * number)) + 1)
    magnitude = _draw_magnitude(bound, gen)
    if _coin_flip(gen):
        return truncate_to_int(number + magnitude)
    return truncate_to_int(number - magnitude)


def floating_number(
    number: Union[int, float],
    spread: Union[int, float],
    direction: Optional[SpecifiedDirection] = None,
    *,
    rng: Optional[random.Random] = None,
) -> int:
    """
    Pick the floating variant from the argument types.

    - float number          -> floating_number_float_by_percentage
    - int number, int spread   -> floating_number_by_range[_directed]
    - int number, float spread -> floating_number_by_percentage[_directed]

    Raises:
        InvalidArgumentError: If a direction is given with a float number,
            or any check of the chosen variant fails
    """
    if isinstance(number, float):
        if direction is not None:
            logger.debug("Rejected floating direction %r for float number", direction)
            raise InvalidArgumentError("direction is not supported for a float number", direction)
        return floating_number_float_by_percentage(number, spread, rng=rng)

    if isinstance(spread, float):
        if direction is None:
            return floating_number_by_percentage(number, spread, rng=rng)
        return floating_number_by_percentage_directed(number, spread, direction, rng=rng)

    if direction is None:
        return floating_number_by_range(number, spread, rng=rng)
    return floating_number_by_range_directed(number, spread, direction, rng=rng)
