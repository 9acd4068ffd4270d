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

from fontTools import ttLib
from typefeatures import sfnt_layout as sfnt
from typefeatures.feature_variant import (
    NumberCase,
    NumberSpacing,
    SmallCaps,
    StylisticAlternates,
)
from typefeatures.font import (
    font_with_features,
    Font,
    FontConstructionFailure,
    FontSystem,
    PLATFORMS,
)
import pytest
from test_helper import make_test_font


_KEY = sfnt.FONT_FEATURE_SETTINGS_ATTRIBUTE


def _record(type, selector):
    return {
        sfnt.FONT_FEATURE_TYPE_IDENTIFIER_KEY: type,
        sfnt.FONT_FEATURE_SELECTOR_IDENTIFIER_KEY: selector,
    }


@pytest.mark.parametrize(
    "platform, validates",
    [
        ("ios", False),
        ("macos", True),
        ("tvos", False),
    ],
)
def test_for_platform(platform, validates):
    font_system = FontSystem.for_platform(platform)
    assert font_system.platform == platform
    assert font_system.validates_descriptors == validates


def test_for_unknown_platform():
    assert "watchos" not in PLATFORMS
    with pytest.raises(ValueError, match="Unknown platform"):
        FontSystem.for_platform("watchos")


@pytest.mark.parametrize("platform", PLATFORMS)
def test_load(tmp_path, platform):
    font_file = make_test_font(tmp_path / "Test.ttf")

    font = FontSystem.for_platform(platform).load(font_file, 17.0)

    assert font.point_size == 17.0
    assert font.attributes == {
        sfnt.FONT_NAME_ATTRIBUTE: "TestFamily-Regular",
        sfnt.FONT_FAMILY_ATTRIBUTE: "Test Family",
        sfnt.FONT_URL_ATTRIBUTE: font_file.resolve().as_uri(),
        sfnt.FONT_SIZE_ATTRIBUTE: 17.0,
    }


@pytest.mark.parametrize("platform", PLATFORMS)
def test_font_with_features(tmp_path, platform):
    font_system = FontSystem.for_platform(platform)
    font = font_system.load(make_test_font(tmp_path / "Test.ttf"), 11.0)

    derived = font_with_features(
        font, [NumberCase.UPPER, NumberSpacing.MONOSPACED], font_system
    )

    assert derived.point_size == 11.0
    assert derived.attributes[_KEY] == [
        _record(sfnt.NUMBER_CASE_TYPE, sfnt.UPPER_CASE_NUMBERS_SELECTOR),
        _record(sfnt.NUMBER_SPACING_TYPE, sfnt.MONOSPACED_NUMBERS_SELECTOR),
    ]
    # everything else carries over
    assert {k: v for k, v in derived.attributes.items() if k != _KEY} == dict(
        font.attributes
    )
    assert _KEY not in font.attributes


@pytest.mark.parametrize("platform", PLATFORMS)
def test_font_with_no_features_is_a_new_font(platform):
    font_system = FontSystem.for_platform(platform)
    font = Font({sfnt.FONT_NAME_ATTRIBUTE: "Menlo-Regular"}, 9.0)

    derived = font_with_features(font, [], font_system)

    assert derived is not font
    assert derived == font
    assert _KEY not in derived.attributes


def test_font_with_features_twice_grows_settings():
    font_system = FontSystem.for_platform("macos")
    font = Font({}, 12.0)
    providers = [SmallCaps.FROM_UPPERCASE, SmallCaps.FROM_LOWERCASE]

    once = font_with_features(font, providers, font_system)
    twice = font_with_features(once, providers, font_system)

    assert len(once.attributes[_KEY]) == 2
    assert len(twice.attributes[_KEY]) == 4


_MALFORMED = [
    {_KEY: None},
    {_KEY: "not a list"},
    {_KEY: [("21", "1")]},
    {_KEY: [{sfnt.FONT_FEATURE_TYPE_IDENTIFIER_KEY: 21}]},
    {_KEY: [_record("21", 1)]},
    {_KEY: [_record(21, True)]},
    {sfnt.FONT_NAME_ATTRIBUTE: 42},
    {sfnt.FONT_URL_ATTRIBUTE: 42},
]


@pytest.mark.parametrize("base", _MALFORMED)
def test_validating_platform_rejects_malformed(base):
    font_system = FontSystem.for_platform("macos")
    with pytest.raises(FontConstructionFailure):
        font_with_features(Font(base, 12.0), [], font_system)


@pytest.mark.parametrize(
    "base",
    [
        {_KEY: None},
        {_KEY: 42},
        {_KEY: "not a list"},
        {_KEY: [("21", "1")]},
    ],
)
def test_validating_platform_drops_unreadable_settings_when_adding(base):
    font_system = FontSystem.for_platform("macos")
    derived = font_with_features(Font(base, 12.0), [NumberCase.LOWER], font_system)
    assert derived.attributes[_KEY] == [
        _record(sfnt.NUMBER_CASE_TYPE, sfnt.LOWER_CASE_NUMBERS_SELECTOR)
    ]


@pytest.mark.parametrize(
    "base",
    [
        {_KEY: [{sfnt.FONT_FEATURE_TYPE_IDENTIFIER_KEY: 21}]},
        {_KEY: [_record(21, True)]},
        {sfnt.FONT_NAME_ATTRIBUTE: 42, _KEY: None},
    ],
)
def test_validating_platform_rejects_malformed_when_adding(base):
    font_system = FontSystem.for_platform("macos")
    with pytest.raises(FontConstructionFailure):
        font_with_features(Font(base, 12.0), [NumberCase.LOWER], font_system)


@pytest.mark.parametrize("platform", ("ios", "tvos"))
@pytest.mark.parametrize("base", _MALFORMED)
def test_non_validating_platform_accepts_malformed(platform, base):
    font_system = FontSystem.for_platform(platform)
    derived = font_with_features(Font(base, 12.0), [], font_system)
    assert derived.attributes == base


def test_validating_platform_rejects_negative_size():
    with pytest.raises(FontConstructionFailure, match="Negative point size"):
        FontSystem.for_platform("macos").make_font({}, -1.0)
    assert FontSystem.for_platform("ios").make_font({}, -1.0).point_size == -1.0


def test_validating_platform_rejects_bad_font_file(tmp_path):
    not_a_font = tmp_path / "NotAFont.ttf"
    not_a_font.write_bytes(b"This is plain text, not an sfnt font file." * 4)
    attributes = {sfnt.FONT_URL_ATTRIBUTE: not_a_font.as_uri()}

    with pytest.raises(FontConstructionFailure) as e:
        FontSystem.for_platform("macos").make_font(attributes, 12.0)
    assert isinstance(e.value.__cause__, ttLib.TTLibError)

    font = FontSystem.for_platform("ios").make_font(attributes, 12.0)
    assert font.attributes == attributes


def test_validating_platform_rejects_missing_font_file(tmp_path):
    attributes = {sfnt.FONT_URL_ATTRIBUTE: (tmp_path / "Missing.ttf").as_uri()}
    with pytest.raises(FontConstructionFailure) as e:
        FontSystem.for_platform("macos").make_font(attributes, 12.0)
    assert isinstance(e.value.__cause__, FileNotFoundError)


def test_font_file_url_may_be_a_plain_path(tmp_path):
    font_file = make_test_font(tmp_path / "Test.ttf")
    attributes = {
        sfnt.FONT_URL_ATTRIBUTE: str(font_file),
        _KEY: [_record(35, 2)],
    }
    font = font_with_features(
        Font(attributes, 12.0),
        [StylisticAlternates(1, False)],
        FontSystem.for_platform("macos"),
    )
    assert font.attributes[_KEY] == [_record(35, 2), _record(35, 3)]
