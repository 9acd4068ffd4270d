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

"""OpenType feature tags equivalent to feature settings.

For places that request features by OpenType tag rather than by type and
selector, such as CSS font-feature-settings.
"""

from typing import Dict, Iterable, NamedTuple, Tuple

from typefeatures import sfnt_layout as sfnt
from typefeatures.feature_variant import FeatureSetting, FeatureVariant, settings


class OpenTypeFeature(NamedTuple):
    tag: str
    value: int


def _opentype_features() -> Dict[FeatureSetting, Tuple[OpenTypeFeature, ...]]:
    features = {
        FeatureSetting(sfnt.NUMBER_CASE_TYPE, sfnt.UPPER_CASE_NUMBERS_SELECTOR): (
            OpenTypeFeature("lnum", 1),
        ),
        FeatureSetting(sfnt.NUMBER_CASE_TYPE, sfnt.LOWER_CASE_NUMBERS_SELECTOR): (
            OpenTypeFeature("onum", 1),
        ),
        FeatureSetting(sfnt.NUMBER_SPACING_TYPE, sfnt.MONOSPACED_NUMBERS_SELECTOR): (
            OpenTypeFeature("tnum", 1),
        ),
        FeatureSetting(
            sfnt.NUMBER_SPACING_TYPE, sfnt.PROPORTIONAL_NUMBERS_SELECTOR
        ): (OpenTypeFeature("pnum", 1),),
        # normal is the absence of any vertical position feature
        FeatureSetting(sfnt.VERTICAL_POSITION_TYPE, sfnt.NORMAL_POSITION_SELECTOR): (),
        FeatureSetting(sfnt.VERTICAL_POSITION_TYPE, sfnt.SUPERIORS_SELECTOR): (
            OpenTypeFeature("sups", 1),
        ),
        FeatureSetting(sfnt.VERTICAL_POSITION_TYPE, sfnt.INFERIORS_SELECTOR): (
            OpenTypeFeature("subs", 1),
        ),
        FeatureSetting(sfnt.VERTICAL_POSITION_TYPE, sfnt.ORDINALS_SELECTOR): (
            OpenTypeFeature("ordn", 1),
        ),
        FeatureSetting(
            sfnt.VERTICAL_POSITION_TYPE, sfnt.SCIENTIFIC_INFERIORS_SELECTOR
        ): (OpenTypeFeature("sinf", 1),),
        FeatureSetting(sfnt.LOWER_CASE_TYPE, sfnt.DEFAULT_LOWER_CASE_SELECTOR): (
            OpenTypeFeature("smcp", 0),
        ),
        FeatureSetting(sfnt.LOWER_CASE_TYPE, sfnt.LOWER_CASE_SMALL_CAPS_SELECTOR): (
            OpenTypeFeature("smcp", 1),
        ),
        FeatureSetting(sfnt.UPPER_CASE_TYPE, sfnt.DEFAULT_UPPER_CASE_SELECTOR): (
            OpenTypeFeature("c2sc", 0),
        ),
        FeatureSetting(sfnt.UPPER_CASE_TYPE, sfnt.UPPER_CASE_SMALL_CAPS_SELECTOR): (
            OpenTypeFeature("c2sc", 1),
        ),
        FeatureSetting(
            sfnt.STYLISTIC_ALTERNATIVES_TYPE, sfnt.NO_STYLISTIC_ALTERNATES_SELECTOR
        ): (),
    }
    for ordinal, (on_selector, off_selector) in enumerate(
        sfnt.STYLISTIC_ALT_SELECTORS, start=1
    ):
        tag = f"ss{ordinal:02d}"
        features[FeatureSetting(sfnt.STYLISTIC_ALTERNATIVES_TYPE, on_selector)] = (
            OpenTypeFeature(tag, 1),
        )
        features[FeatureSetting(sfnt.STYLISTIC_ALTERNATIVES_TYPE, off_selector)] = (
            OpenTypeFeature(tag, 0),
        )
    return features


_OPENTYPE_FEATURES = _opentype_features()


def opentype_features(setting: FeatureSetting) -> Tuple[OpenTypeFeature, ...]:
    # Settings with no OpenType counterpart map to nothing
    return _OPENTYPE_FEATURES.get(setting, ())


def css_feature_settings(variants: Iterable[FeatureVariant]) -> str:
    """A CSS font-feature-settings value requesting variants, in order."""
    features = [
        feature
        for variant in variants
        for setting in settings(variant)
        for feature in opentype_features(setting)
    ]
    if not features:
        return "normal"
    return ", ".join(f'"{f.tag}" {f.value}' for f in features)
