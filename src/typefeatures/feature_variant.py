# Copyright 2022 Google LLC
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#      http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""Typographic feature variants and the feature settings they stand for.

Each family is a closed set of options. settings() maps any option to the
(type, selector) pairs a font engine understands; the mapping is a table
lookup and is defined for every option.

Options are also addressable by name, e.g. "number_case:upper" or
"stylistic_alternates:3:off", which is how config files and the command line
refer to them.
"""

from dataclasses import dataclass
import enum
import regex
from typing import Mapping, NamedTuple, Tuple, Type, Union

from typefeatures import sfnt_layout as sfnt


class FeatureSetting(NamedTuple):
    type: int
    selector: int


class NumberCase(enum.Enum):
    """Number case, also known as figure style."""

    # Lining figures: the height of uppercase letters, nothing below the baseline
    UPPER = "upper"
    # Oldstyle figures: sized like lowercase letters, may have descenders
    LOWER = "lower"


class NumberSpacing(enum.Enum):
    """Number spacing, also known as figure spacing."""

    # Tabular figures, all the same width so columns line up
    MONOSPACED = "monospaced"
    PROPORTIONAL = "proportional"


class VerticalPosition(enum.Enum):
    NORMAL = "normal"
    # Superior glyphs, as in footnotes
    SUPERSCRIPT = "superscript"
    # Inferior glyphs
    SUBSCRIPT = "subscript"
    # As in 4th
    ORDINALS = "ordinals"
    # As in H2O
    SCIENTIFIC_INFERIORS = "scientific_inferiors"


class SmallCaps(enum.Enum):
    """Small caps behavior.

    FROM_UPPERCASE and FROM_LOWERCASE are independent features; asking for
    both turns every letter into a small cap. DISABLED resets both.
    """

    DISABLED = "disabled"
    FROM_UPPERCASE = "from_uppercase"
    FROM_LOWERCASE = "from_lowercase"


MIN_STYLISTIC_ALTERNATE = 1
MAX_STYLISTIC_ALTERNATE = len(sfnt.STYLISTIC_ALT_SELECTORS)


@dataclass(frozen=True)
class StylisticAlternates:
    """Toggle one of the numbered stylistic alternate sets.

    Ordinal 0 means no stylistic alternates at all. Sets are not mutually
    exclusive, any number of them can be requested together.
    """

    ordinal: int = 0
    on: bool = True

    def __post_init__(self):
        if self.ordinal == 0:
            if not self.on:
                raise ValueError("'no alternates' cannot be turned off")
            return
        if not MIN_STYLISTIC_ALTERNATE <= self.ordinal <= MAX_STYLISTIC_ALTERNATE:
            raise ValueError(
                f"Stylistic alternate {self.ordinal} outside "
                f"{MIN_STYLISTIC_ALTERNATE}..{MAX_STYLISTIC_ALTERNATE}"
            )

    @property
    def is_none(self) -> bool:
        return self.ordinal == 0


NO_STYLISTIC_ALTERNATES = StylisticAlternates()


FeatureVariant = Union[
    NumberCase, NumberSpacing, VerticalPosition, SmallCaps, StylisticAlternates
]


_SETTINGS: Mapping[enum.Enum, Tuple[FeatureSetting, ...]] = {
    NumberCase.UPPER: (
        FeatureSetting(sfnt.NUMBER_CASE_TYPE, sfnt.UPPER_CASE_NUMBERS_SELECTOR),
    ),
    NumberCase.LOWER: (
        FeatureSetting(sfnt.NUMBER_CASE_TYPE, sfnt.LOWER_CASE_NUMBERS_SELECTOR),
    ),
    NumberSpacing.MONOSPACED: (
        FeatureSetting(sfnt.NUMBER_SPACING_TYPE, sfnt.MONOSPACED_NUMBERS_SELECTOR),
    ),
    NumberSpacing.PROPORTIONAL: (
        FeatureSetting(sfnt.NUMBER_SPACING_TYPE, sfnt.PROPORTIONAL_NUMBERS_SELECTOR),
    ),
    VerticalPosition.NORMAL: (
        FeatureSetting(sfnt.VERTICAL_POSITION_TYPE, sfnt.NORMAL_POSITION_SELECTOR),
    ),
    VerticalPosition.SUPERSCRIPT: (
        FeatureSetting(sfnt.VERTICAL_POSITION_TYPE, sfnt.SUPERIORS_SELECTOR),
    ),
    VerticalPosition.SUBSCRIPT: (
        FeatureSetting(sfnt.VERTICAL_POSITION_TYPE, sfnt.INFERIORS_SELECTOR),
    ),
    VerticalPosition.ORDINALS: (
        FeatureSetting(sfnt.VERTICAL_POSITION_TYPE, sfnt.ORDINALS_SELECTOR),
    ),
    VerticalPosition.SCIENTIFIC_INFERIORS: (
        FeatureSetting(
            sfnt.VERTICAL_POSITION_TYPE, sfnt.SCIENTIFIC_INFERIORS_SELECTOR
        ),
    ),
    # Both directions toggle independently so disabling has to reset both
    SmallCaps.DISABLED: (
        FeatureSetting(sfnt.LOWER_CASE_TYPE, sfnt.DEFAULT_LOWER_CASE_SELECTOR),
        FeatureSetting(sfnt.UPPER_CASE_TYPE, sfnt.DEFAULT_UPPER_CASE_SELECTOR),
    ),
    SmallCaps.FROM_UPPERCASE: (
        FeatureSetting(sfnt.UPPER_CASE_TYPE, sfnt.UPPER_CASE_SMALL_CAPS_SELECTOR),
    ),
    SmallCaps.FROM_LOWERCASE: (
        FeatureSetting(sfnt.LOWER_CASE_TYPE, sfnt.LOWER_CASE_SMALL_CAPS_SELECTOR),
    ),
}


def settings(variant: FeatureVariant) -> Tuple[FeatureSetting, ...]:
    """The feature settings that enable variant, in the order to apply them."""
    if isinstance(variant, StylisticAlternates):
        if variant.is_none:
            selector = sfnt.NO_STYLISTIC_ALTERNATES_SELECTOR
        else:
            on_selector, off_selector = sfnt.STYLISTIC_ALT_SELECTORS[
                variant.ordinal - 1
            ]
            selector = on_selector if variant.on else off_selector
        return (FeatureSetting(sfnt.STYLISTIC_ALTERNATIVES_TYPE, selector),)
    return _SETTINGS[variant]


_STYLISTIC_ALTERNATES = "stylistic_alternates"
_FAMILIES: Mapping[str, Type[enum.Enum]] = {
    "number_case": NumberCase,
    "number_spacing": NumberSpacing,
    "vertical_position": VerticalPosition,
    "small_caps": SmallCaps,
}
_FAMILY_NAMES = {v: k for k, v in _FAMILIES.items()}

_VARIANT_RE = regex.compile(
    r"(?P<family>[a-z_]+):(?P<member>[a-z_]+|\d+)(?::(?P<state>on|off))?"
)


def parse_variant(text: str) -> FeatureVariant:
    """Parse "family:member", or "stylistic_alternates:N[:on|off]"."""
    match = _VARIANT_RE.fullmatch(text.strip().lower())
    if not match:
        raise ValueError(f"Bad feature {text!r}; expected family:member")
    family, member, state = match.group("family", "member", "state")

    if family == _STYLISTIC_ALTERNATES:
        if member == "none" and state is None:
            return NO_STYLISTIC_ALTERNATES
        if not member.isdigit():
            raise ValueError(f"Bad feature {text!r}; expected {family}:N[:on|off]")
        return StylisticAlternates(int(member), state != "off")

    if family not in _FAMILIES:
        raise ValueError(
            f"Unknown feature family {family!r}, expected one of "
            f"{sorted(tuple(_FAMILIES) + (_STYLISTIC_ALTERNATES,))}"
        )
    if state is not None:
        raise ValueError(f"Bad feature {text!r}; {family} cannot be turned {state}")
    family_cls = _FAMILIES[family]
    try:
        return family_cls(member)
    except ValueError as e:
        raise ValueError(
            f"Unknown {family} {member!r}, expected one of "
            f"{[m.value for m in family_cls]}"
        ) from e


def variant_name(variant: FeatureVariant) -> str:
    if isinstance(variant, StylisticAlternates):
        if variant.is_none:
            return f"{_STYLISTIC_ALTERNATES}:none"
        state = "on" if variant.on else "off"
        return f"{_STYLISTIC_ALTERNATES}:{variant.ordinal}:{state}"
    return f"{_FAMILY_NAMES[type(variant)]}:{variant.value}"


def all_variants() -> Tuple[FeatureVariant, ...]:
    """Every option of every family."""
    variants = [m for family_cls in _FAMILIES.values() for m in family_cls]
    variants.append(NO_STYLISTIC_ALTERNATES)
    for ordinal in range(MIN_STYLISTIC_ALTERNATE, MAX_STYLISTIC_ALTERNATE + 1):
        variants.append(StylisticAlternates(ordinal, True))
        variants.append(StylisticAlternates(ordinal, False))
    return tuple(variants)
