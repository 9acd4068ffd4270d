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

from absl import flags
import importlib.resources as resources
from pathlib import Path
import toml
from types import MappingProxyType
from typing import Any, Mapping, MutableMapping, NamedTuple, Optional, Tuple

from typefeatures.feature_variant import FeatureVariant, parse_variant, variant_name
from typefeatures.font import PLATFORMS


FLAGS = flags.FLAGS


_DEFAULT_CONFIG_FILE = "_default.toml"
OUTPUT_FORMATS = ("css", "toml")


# None means flag not set; FeatureConfig class has the actual defaults.
# CLI flags override config file (which overrides default FeatureConfig).
flags.DEFINE_enum(
    "platform",
    None,
    PLATFORMS,
    "Font system to build fonts with. Only macos rejects malformed descriptors.",
)
flags.DEFINE_float("point_size", None, "Point size of the base font.", lower_bound=0)
flags.DEFINE_string("output_file", None, "Output filename ('-' means stdout).")
flags.DEFINE_enum(
    "output_format",
    None,
    OUTPUT_FORMATS,
    "Write the derived font attributes as toml, or just its css font-feature-settings.",
)
flags.DEFINE_multi_string(
    "feature",
    None,
    "Feature to enable, e.g. number_case:upper or stylistic_alternates:3:on. "
    "Repeat for more; replaces the features of the config file.",
)


class FeatureConfig(NamedTuple):
    platform: str = "macos"
    point_size: float = 12.0
    output_file: str = "-"
    output_format: str = "toml"
    features: Tuple[FeatureVariant, ...] = ()
    # extra attributes for the base font descriptor
    attributes: Mapping[str, Any] = MappingProxyType({})

    def validate(self):
        if self.platform not in PLATFORMS:
            raise ValueError(f"'platform' must be one of {PLATFORMS}")
        if self.point_size < 0:
            raise ValueError("'point_size' must be zero or positive")
        if self.output_format not in OUTPUT_FORMATS:
            raise ValueError(f"'output_format' must be one of {OUTPUT_FORMATS}")
        return self


def write(dest: Path, config: FeatureConfig):
    toml_cfg = {
        "platform": config.platform,
        "point_size": config.point_size,
        "output_file": config.output_file,
        "output_format": config.output_format,
        "features": [variant_name(f) for f in config.features],
        "attributes": dict(config.attributes),
    }
    dest.write_text(toml.dumps(toml_cfg))


def _resolve_config(config_file: Optional[Path] = None) -> MutableMapping[str, Any]:
    if config_file is None:
        default_config = resources.files("typefeatures") / "data" / _DEFAULT_CONFIG_FILE
        return toml.loads(default_config.read_text())
    return toml.load(config_file)


_DEFAULT_CONFIG = FeatureConfig()


def _pop_flag(config: MutableMapping[str, Any], name: str) -> Any:
    config_value = config.pop(name, None)
    flag_value = getattr(FLAGS, name)
    if config_value is None and flag_value is None:
        return getattr(_DEFAULT_CONFIG, name)
    return flag_value if flag_value is not None else config_value


def load(config_file: Optional[Path] = None) -> FeatureConfig:
    config = _resolve_config(config_file)

    # CLI flags will take precedence over the config file
    platform = _pop_flag(config, "platform")
    point_size = float(_pop_flag(config, "point_size"))
    output_file = _pop_flag(config, "output_file")
    output_format = _pop_flag(config, "output_format")

    features = config.pop("features", [])
    if not isinstance(features, list):
        raise ValueError(f"'features' must be an array, got {features!r}")
    if FLAGS.feature is not None:
        features = FLAGS.feature
    features = tuple(parse_variant(f) for f in features)

    attributes = config.pop("attributes", {})
    if not isinstance(attributes, Mapping):
        raise ValueError(f"'attributes' must be a table, got {attributes!r}")

    if config:
        raise ValueError(f"Unexpected config: {config}")

    return FeatureConfig(
        platform=platform,
        point_size=point_size,
        output_file=output_file,
        output_format=output_format,
        features=features,
        attributes=MappingProxyType(dict(attributes)),
    ).validate()
