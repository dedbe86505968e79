from .config import get_config

SINGLE_EPSILON = 2.0 ** -23
DOUBLE_EPSILON = 2.0 ** -52

def approx_equals(a, b, epsilon=None):
    """
    True if a and b differ by less than epsilon. The default epsilon is
    math.epsilon_scale (see ezutils.config) times DOUBLE_EPSILON.
    """
    if epsilon is None:
        epsilon = get_config().math.epsilon_scale * DOUBLE_EPSILON
    return abs(a - b) < epsilon

def min_of(*values):
    if not values:
        raise ValueError("You must provide at least one value")
    return min(values)

def max_of(*values):
    if not values:
        raise ValueError("You must provide at least one value")
    return max(values)

def is_between(value, lower, upper):
    """Inclusive range check."""
    if lower > upper:
        raise ValueError(f"Lower bound {lower!r} is greater than upper bound {upper!r}")
    return lower <= value <= upper

def get_min_max(a, b):
    """Returns (min, max); a is returned first when both are equal."""
    if b < a:
        return b, a
    return a, b

def clamp(value, lower, upper):
    if lower > upper:
        raise ValueError(f"Lower bound {lower!r} is greater than upper bound {upper!r}")
    return max(lower, min(value, upper))

def wrap(value, lower, upper):
    """Wraps value into the half-open range [lower, upper)."""
    if upper <= lower:
        raise ValueError(f"Upper bound {upper!r} must be greater than lower bound {lower!r}")
    wrapped = lower + (value - lower) % (upper - lower)
    # float rounding can land exactly on upper
    return lower if wrapped >= upper else wrapped

def positive_mod(value, modulus):
    """Non-negative remainder, e.g. positive_mod(-1, 10) == 9."""
    if modulus == 0:
        raise ZeroDivisionError("modulus must not be zero")
    return value % abs(modulus)
