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

"""Derives new fonts with extra features enabled.

The font system owns fonts and their descriptors. Only some platforms validate
a descriptor when a font is built from it: on macOS building a font from a bad
descriptor fails, on iOS and tvOS it always produces a font (unsupported or
malformed settings are ignored when rendering).
"""

from absl import logging
from dataclasses import dataclass
from fontTools import ttLib
from pathlib import Path
from typing import Any, Dict, Iterable, Mapping, NamedTuple, Sequence, Union
from urllib.parse import urlparse
from urllib.request import url2pathname

from typefeatures import composer
from typefeatures import sfnt_layout as sfnt
from typefeatures.feature_variant import FeatureVariant


# platform => whether building a font validates its descriptor
_PLATFORMS = {
    "ios": False,
    "macos": True,
    "tvos": False,
}
PLATFORMS = tuple(sorted(_PLATFORMS))


class FontConstructionFailure(Exception):
    """The font system refused to build a font from a descriptor."""


@dataclass(frozen=True)
class Font:
    attributes: Mapping[str, Any]
    point_size: float


def _url_to_path(url: str) -> Path:
    parsed = urlparse(url)
    if parsed.scheme == "file":
        return Path(url2pathname(parsed.path))
    return Path(url)


def _is_int(value) -> bool:
    return isinstance(value, int) and not isinstance(value, bool)


def _descriptor_errors(
    attributes: Mapping[str, Any], point_size: float
) -> Iterable[str]:
    if point_size < 0:
        yield f"Negative point size {point_size}"

    for key in (sfnt.FONT_NAME_ATTRIBUTE, sfnt.FONT_FAMILY_ATTRIBUTE):
        value = attributes.get(key)
        if value is not None and not isinstance(value, str):
            yield f"{key} must be a string, got {value!r}"

    url = attributes.get(sfnt.FONT_URL_ATTRIBUTE)
    if url is not None and not isinstance(url, str):
        yield f"{sfnt.FONT_URL_ATTRIBUTE} must be a string, got {url!r}"

    features = attributes.get(sfnt.FONT_FEATURE_SETTINGS_ATTRIBUTE, ())
    if isinstance(features, (str, bytes)) or not isinstance(features, Sequence):
        yield (
            f"{sfnt.FONT_FEATURE_SETTINGS_ATTRIBUTE} must be a sequence, "
            f"got {features!r}"
        )
        return
    for i, record in enumerate(features):
        if not isinstance(record, Mapping):
            yield f"Feature setting {i} is not a mapping: {record!r}"
            continue
        for key in (
            sfnt.FONT_FEATURE_TYPE_IDENTIFIER_KEY,
            sfnt.FONT_FEATURE_SELECTOR_IDENTIFIER_KEY,
        ):
            if not _is_int(record.get(key)):
                yield f"Feature setting {i} needs an integer {key}: {record!r}"


def _validate(attributes: Mapping[str, Any], point_size: float):
    errors = list(_descriptor_errors(attributes, point_size))
    if errors:
        for error in errors:
            logging.warning("Bad font descriptor: %s", error)
        raise FontConstructionFailure("; ".join(errors))

    url = attributes.get(sfnt.FONT_URL_ATTRIBUTE)
    if url is None:
        return
    try:
        with ttLib.TTFont(_url_to_path(url), lazy=True):
            pass
    except (OSError, ttLib.TTLibError) as e:
        logging.warning("Bad font descriptor: unable to open %s", url)
        raise FontConstructionFailure(f"Unable to open {url}") from e


class FontSystem(NamedTuple):
    platform: str
    validates_descriptors: bool

    @classmethod
    def for_platform(cls, platform: str) -> "FontSystem":
        if platform not in _PLATFORMS:
            raise ValueError(
                f"Unknown platform {platform!r}, expected one of {PLATFORMS}"
            )
        return cls(platform, _PLATFORMS[platform])

    def attributes_of(self, font: Font) -> Dict[str, Any]:
        return dict(font.attributes)

    def make_font(self, attributes: Mapping[str, Any], point_size: float) -> Font:
        if self.validates_descriptors:
            _validate(attributes, point_size)
        logging.debug(
            "%s font %s at %s",
            self.platform,
            attributes.get(sfnt.FONT_NAME_ATTRIBUTE),
            point_size,
        )
        return Font(dict(attributes), point_size)

    def load(self, font_file: Union[str, Path], point_size: float) -> Font:
        """Builds a font for a font file, named the way the file names itself."""
        font_file = Path(font_file)
        with ttLib.TTFont(font_file, lazy=True) as ttfont:
            if "name" not in ttfont:
                raise ValueError(f"No name table in {font_file}")
            name = ttfont["name"]
            ps_name = name.getDebugName(6)
            # prefer the typographic family name
            family = name.getDebugName(16) or name.getDebugName(1)

        attributes = {sfnt.FONT_URL_ATTRIBUTE: font_file.resolve().as_uri()}
        if ps_name is not None:
            attributes[sfnt.FONT_NAME_ATTRIBUTE] = ps_name
        if family is not None:
            attributes[sfnt.FONT_FAMILY_ATTRIBUTE] = family
        attributes[sfnt.FONT_SIZE_ATTRIBUTE] = point_size
        return self.make_font(attributes, point_size)


def font_with_features(
    font: Font, providers: Sequence[FeatureVariant], font_system: FontSystem
) -> Font:
    """A new font like font, at the same size, that asks for providers' features.

    Features the font doesn't support are ignored when it renders. A new font
    is built even if there are no providers.

    Raises FontConstructionFailure if font_system validates descriptors and
    rejects the result.
    """
    attributes = font_system.attributes_of(font)
    if providers:
        attributes = composer.apply(attributes, providers)
    return font_system.make_font(attributes, font.point_size)
