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

# Integration tests for the typefeatures cli

import subprocess
import pytest
import toml
from typefeatures import sfnt_layout as sfnt
from typefeatures.apply_features import font_toml
from typefeatures.font import Font
from test_helper import make_test_font, run_typefeatures


_KEY = sfnt.FONT_FEATURE_SETTINGS_ATTRIBUTE


def _settings(attributes):
    return [
        (
            r[sfnt.FONT_FEATURE_TYPE_IDENTIFIER_KEY],
            r[sfnt.FONT_FEATURE_SELECTOR_IDENTIFIER_KEY],
        )
        for r in attributes[_KEY]
    ]


def test_font_toml():
    font = Font(
        {
            sfnt.FONT_NAME_ATTRIBUTE: "Menlo-Regular",
            _KEY: [
                {
                    sfnt.FONT_FEATURE_TYPE_IDENTIFIER_KEY: 6,
                    sfnt.FONT_FEATURE_SELECTOR_IDENTIFIER_KEY: 0,
                }
            ],
        },
        10.0,
    )
    assert toml.loads(font_toml(font)) == {
        "point_size": 10.0,
        "attributes": dict(font.attributes),
    }


def test_font_file_with_features(tmp_path):
    font_file = make_test_font(tmp_path / "Test.ttf")

    output = run_typefeatures(
        (
            "--feature",
            "number_case:upper",
            "--feature",
            "number_spacing:monospaced",
            "--point_size",
            "18",
            font_file,
        )
    )

    result = toml.loads(output)
    assert result["point_size"] == 18.0
    attributes = result["attributes"]
    assert attributes[sfnt.FONT_NAME_ATTRIBUTE] == "TestFamily-Regular"
    assert attributes[sfnt.FONT_URL_ATTRIBUTE] == font_file.resolve().as_uri()
    assert _settings(attributes) == [(21, 1), (6, 0)]


def test_config_file_and_output_file(tmp_path):
    config_file = tmp_path / "config.toml"
    output_file = tmp_path / "font.toml"
    config_file.write_text(
        'platform = "ios"\n'
        f'output_file = "{output_file.as_posix()}"\n'
        'features = ["small_caps:disabled", "stylistic_alternates:5:on"]\n'
        "\n"
        "[attributes]\n"
        f'{sfnt.FONT_NAME_ATTRIBUTE} = "Avenir-Book"\n'
        "\n"
        f"[[attributes.{_KEY}]]\n"
        f"{sfnt.FONT_FEATURE_TYPE_IDENTIFIER_KEY} = 21\n"
        f"{sfnt.FONT_FEATURE_SELECTOR_IDENTIFIER_KEY} = 0\n"
    )

    assert run_typefeatures(("--config_file", config_file)) == ""

    attributes = toml.loads(output_file.read_text())["attributes"]
    assert attributes[sfnt.FONT_NAME_ATTRIBUTE] == "Avenir-Book"
    assert _settings(attributes) == [(21, 0), (37, 0), (38, 0), (35, 10)]


def test_css_output():
    output = run_typefeatures(
        (
            "--output_format",
            "css",
            "--feature",
            "vertical_position:ordinals",
            "--feature",
            "stylistic_alternates:11:off",
        )
    )
    assert output == '"ordn" 1, "ss11" 0\n'


def test_list_features():
    names = run_typefeatures(("--list_features",)).splitlines()
    assert len(names) == 53
    assert "small_caps:from_uppercase" in names
    assert "stylistic_alternates:20:off" in names


def test_list_features_to_configured_output_file(tmp_path):
    config_file = tmp_path / "config.toml"
    output_file = tmp_path / "features.txt"
    config_file.write_text(f'output_file = "{output_file.as_posix()}"\n')

    assert run_typefeatures(("--config_file", config_file, "--list_features")) == ""

    names = output_file.read_text().splitlines()
    assert len(names) == 53
    assert names[0] == "number_case:upper"


def test_bad_font_file_url_fails_on_macos(tmp_path):
    config_file = tmp_path / "config.toml"
    config_file.write_text(
        'platform = "macos"\n'
        "[attributes]\n"
        f'{sfnt.FONT_URL_ATTRIBUTE} = "{(tmp_path / "Missing.ttf").as_uri()}"\n'
    )
    with pytest.raises(subprocess.CalledProcessError):
        run_typefeatures(("--config_file", config_file))
