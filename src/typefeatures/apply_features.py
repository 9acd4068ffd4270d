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

"""Derive a font with extra typographic features enabled.

Prints the attributes of the derived font, or the equivalent CSS
font-feature-settings value.

Sample usage:
typefeatures --feature number_case:upper --feature number_spacing:monospaced MyFont.ttf
typefeatures --config_file features.toml --output_format css
typefeatures --list_features
"""
from absl import app
from absl import flags
from absl import logging
from pathlib import Path
import toml
from typing import Optional

from typefeatures import config, util
from typefeatures.config import FeatureConfig
from typefeatures.feature_variant import all_variants, variant_name
from typefeatures.font import Font, FontSystem, font_with_features
from typefeatures.opentype import css_feature_settings


FLAGS = flags.FLAGS


flags.DEFINE_string(
    "log_level",
    "INFO",
    "The threshold for what messages will be logged. One of DEBUG, INFO, WARN, "
    "ERROR, or FATAL.",
)
flags.DEFINE_string("config_file", None, "Config file, toml.")
flags.DEFINE_bool("list_features", False, "Print the name of every feature and exit.")


def _base_font(
    feature_config: FeatureConfig, font_system: FontSystem, font_file: Optional[Path]
) -> Font:
    if font_file is None:
        return font_system.make_font(
            feature_config.attributes, feature_config.point_size
        )
    font = font_system.load(font_file, feature_config.point_size)
    if not feature_config.attributes:
        return font
    attributes = font_system.attributes_of(font)
    attributes.update(feature_config.attributes)
    return font_system.make_font(attributes, font.point_size)


def font_toml(font: Font) -> str:
    return toml.dumps(
        {"point_size": font.point_size, "attributes": dict(font.attributes)}
    )


def _run(argv):
    logging.set_verbosity(FLAGS.log_level)

    config_file = Path(FLAGS.config_file) if FLAGS.config_file else None
    feature_config = config.load(config_file)

    if FLAGS.list_features:
        with util.file_printer(feature_config.output_file) as print:
            for variant in all_variants():
                print(variant_name(variant))
        return

    assert len(argv) <= 2, "Expected at most 1 arg, a font file"
    font_file = Path(argv[1]) if len(argv) == 2 else None
    if font_file is not None:
        assert font_file.is_file(), f"No file {font_file}"

    font_system = FontSystem.for_platform(feature_config.platform)

    base_font = _base_font(feature_config, font_system, font_file)
    logging.info(
        "Enabling %s on %s",
        ", ".join(variant_name(f) for f in feature_config.features) or "nothing",
        font_file or "configured font",
    )
    font = font_with_features(base_font, feature_config.features, font_system)

    with util.file_printer(feature_config.output_file) as print:
        if feature_config.output_format == "css":
            print(css_feature_settings(feature_config.features))
        else:
            print(font_toml(font), end="")


def main():
    # We don't seem to be __main__ when run as cli tool installed by setuptools
    app.run(_run)


if __name__ == "__main__":
    app.run(_run)
