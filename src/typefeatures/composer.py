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

"""Merges feature settings into a font's attribute mapping."""

from absl import logging
from typing import Any, Dict, List, Mapping, Sequence

from typefeatures import sfnt_layout as sfnt
from typefeatures.feature_variant import FeatureVariant, settings


def feature_attributes(variant: FeatureVariant) -> List[Dict[str, int]]:
    """One feature settings record per (type, selector) pair of variant."""
    return [
        {
            sfnt.FONT_FEATURE_TYPE_IDENTIFIER_KEY: setting.type,
            sfnt.FONT_FEATURE_SELECTOR_IDENTIFIER_KEY: setting.selector,
        }
        for setting in settings(variant)
    ]


def existing_feature_attributes(attributes: Mapping[str, Any]) -> List[Any]:
    """The feature settings records already in attributes.

    Anything other than a sequence of records reads as no settings at all.
    """
    features = attributes.get(sfnt.FONT_FEATURE_SETTINGS_ATTRIBUTE)
    if isinstance(features, (str, bytes)) or not isinstance(features, Sequence):
        return []
    if not all(isinstance(record, Mapping) for record in features):
        return []
    return list(features)


def apply(
    base_attributes: Mapping[str, Any], providers: Sequence[FeatureVariant]
) -> Dict[str, Any]:
    """Returns a copy of base_attributes with the settings of providers appended.

    Existing feature settings are kept, in order, ahead of the new ones; an
    unreadable existing value is dropped. Nothing is deduplicated so applying
    the same providers twice lists them twice; the font engine gives the last
    setting of a given type precedence.

    base_attributes is not modified. With no providers the copy is returned
    as-is, without a feature settings entry being added.
    """
    attributes = dict(base_attributes)
    if not providers:
        return attributes

    features = existing_feature_attributes(attributes)
    existing = len(features)
    for provider in providers:
        features.extend(feature_attributes(provider))
    attributes[sfnt.FONT_FEATURE_SETTINGS_ATTRIBUTE] = features

    logging.debug(
        "Appended %d feature settings from %d providers to %d existing",
        len(features) - existing,
        len(providers),
        existing,
    )
    return attributes
