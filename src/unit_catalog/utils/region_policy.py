"""
Regional unit policy for the unit catalog.

The regional policy is data, not behavior: every predicate is a named set of
two-letter region codes and a region either belongs to it or not. Keeping the
table in one place keeps the policy auditable and testable on its own.

Usage:
    from unit_catalog.utils.region_policy import RegionPolicy, when, unless

    policy = RegionPolicy.for_region("US")
    policy.use_fahrenheit  # True

    # Declarative unit flags
    rule = when("use_us_customary")
    rule.evaluate(policy)  # True
"""

from dataclasses import dataclass, field
from typing import Dict, FrozenSet, Tuple


# ============================================================================
# Predicate Table
# ============================================================================

# Predicate name -> region codes for which the predicate holds.
# Sources: https://en.wikipedia.org/wiki/Metrication,
# https://en.wikipedia.org/wiki/Fahrenheit,
# https://en.wikipedia.org/wiki/Korean_units_of_measurement#Area
REGION_PREDICATES: Dict[str, FrozenSet[str]] = {
    # US + Federated States of Micronesia, Marshall Islands, Palau
    "use_us_customary_and_fahrenheit": frozenset({"US", "FM", "MH", "PW"}),
    # Above + Liberia
    "use_us_customary": frozenset({"US", "FM", "MH", "PW", "LR"}),
    # Above + the Bahamas, the Cayman Islands
    "use_fahrenheit": frozenset({"US", "FM", "MH", "PW", "BS", "KY", "LR"}),
    "use_watt_instead_of_kilowatt": frozenset({"GB"}),
    # Pyeong, a Korean floorspace unit
    "use_pyeong": frozenset({"KP", "KR"}),
    # Literal region exception for the UK teaspoon default
    "use_uk_spoon_default": frozenset({"GB"}),
}

# Predicates derived from others rather than from a region set
DERIVED_PREDICATES: Tuple[str, ...] = ("use_si",)

ALL_PREDICATES: Tuple[str, ...] = tuple(REGION_PREDICATES) + DERIVED_PREDICATES


@dataclass(frozen=True)
class RegionPolicy:
    """
    Boolean feature flags derived from a region code.

    Attributes:
        region_code: The two-letter region code the flags were derived from
        flags: Predicate name -> evaluated value, for every name in ALL_PREDICATES
    """

    region_code: str
    flags: Dict[str, bool] = field(compare=True, hash=False)

    @classmethod
    def for_region(cls, region_code: str) -> "RegionPolicy":
        """
        Evaluate every predicate for a region code.

        The code is matched exactly against the predicate sets; no case folding
        or validation is applied.
        """
        flags = {name: region_code in codes for name, codes in REGION_PREDICATES.items()}
        # Use 'Systeme International' everywhere US customary units are not used
        flags["use_si"] = not flags["use_us_customary"]
        return cls(region_code=region_code, flags=flags)

    def is_enabled(self, predicate: str) -> bool:
        """
        Get the value of a named predicate.

        Raises:
            ValueError: If the predicate name is not part of the policy table
        """
        try:
            return self.flags[predicate]
        except KeyError:
            raise ValueError(f"Unknown region predicate: {predicate}") from None

    @property
    def use_si(self) -> bool:
        return self.flags["use_si"]

    @property
    def use_us_customary(self) -> bool:
        return self.flags["use_us_customary"]

    @property
    def use_fahrenheit(self) -> bool:
        return self.flags["use_fahrenheit"]

    @property
    def use_watt_instead_of_kilowatt(self) -> bool:
        return self.flags["use_watt_instead_of_kilowatt"]

    @property
    def use_pyeong(self) -> bool:
        return self.flags["use_pyeong"]


# ============================================================================
# Declarative Flag Rules
# ============================================================================


@dataclass(frozen=True)
class FlagRule:
    """
    A unit flag expressed against the region policy.

    The rule holds when it is enabled, every predicate in all_of holds and no
    predicate in none_of holds.
    """

    all_of: Tuple[str, ...] = ()
    none_of: Tuple[str, ...] = ()
    enabled: bool = True

    def evaluate(self, policy: RegionPolicy) -> bool:
        if not self.enabled:
            return False
        if not all(policy.is_enabled(name) for name in self.all_of):
            return False
        return not any(policy.is_enabled(name) for name in self.none_of)


ALWAYS = FlagRule()
NEVER = FlagRule(enabled=False)


def when(*predicates: str) -> FlagRule:
    """Rule that holds when all the named predicates hold."""
    return FlagRule(all_of=tuple(predicates))


def unless(*predicates: str) -> FlagRule:
    """Rule that holds when none of the named predicates hold."""
    return FlagRule(none_of=tuple(predicates))
