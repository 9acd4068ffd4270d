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

"""Feature registry constants and font descriptor attribute keys.

Values are those of Apple's font feature registry, as published in
CoreText's SFNTLayoutTypes.h and
https://developer.apple.com/fonts/TrueType-Reference-Manual/RM09/AppendixF.html
"""


# Descriptor attribute keys
FONT_FEATURE_SETTINGS_ATTRIBUTE = "NSCTFontFeatureSettingsAttribute"
FONT_FEATURE_TYPE_IDENTIFIER_KEY = "CTFeatureTypeIdentifier"
FONT_FEATURE_SELECTOR_IDENTIFIER_KEY = "CTFeatureSelectorIdentifier"
FONT_NAME_ATTRIBUTE = "NSFontNameAttribute"
FONT_FAMILY_ATTRIBUTE = "NSFontFamilyAttribute"
FONT_SIZE_ATTRIBUTE = "NSFontSizeAttribute"
FONT_URL_ATTRIBUTE = "NSCTFontFileURLAttribute"


NUMBER_SPACING_TYPE = 6
MONOSPACED_NUMBERS_SELECTOR = 0
PROPORTIONAL_NUMBERS_SELECTOR = 1

VERTICAL_POSITION_TYPE = 10
NORMAL_POSITION_SELECTOR = 0
SUPERIORS_SELECTOR = 1
INFERIORS_SELECTOR = 2
ORDINALS_SELECTOR = 3
SCIENTIFIC_INFERIORS_SELECTOR = 4

NUMBER_CASE_TYPE = 21
LOWER_CASE_NUMBERS_SELECTOR = 0
UPPER_CASE_NUMBERS_SELECTOR = 1

STYLISTIC_ALTERNATIVES_TYPE = 35
NO_STYLISTIC_ALTERNATES_SELECTOR = 0
STYLISTIC_ALT_ONE_ON_SELECTOR = 2
STYLISTIC_ALT_ONE_OFF_SELECTOR = 3
STYLISTIC_ALT_TWO_ON_SELECTOR = 4
STYLISTIC_ALT_TWO_OFF_SELECTOR = 5
STYLISTIC_ALT_THREE_ON_SELECTOR = 6
STYLISTIC_ALT_THREE_OFF_SELECTOR = 7
STYLISTIC_ALT_FOUR_ON_SELECTOR = 8
STYLISTIC_ALT_FOUR_OFF_SELECTOR = 9
STYLISTIC_ALT_FIVE_ON_SELECTOR = 10
STYLISTIC_ALT_FIVE_OFF_SELECTOR = 11
STYLISTIC_ALT_SIX_ON_SELECTOR = 12
STYLISTIC_ALT_SIX_OFF_SELECTOR = 13
STYLISTIC_ALT_SEVEN_ON_SELECTOR = 14
STYLISTIC_ALT_SEVEN_OFF_SELECTOR = 15
STYLISTIC_ALT_EIGHT_ON_SELECTOR = 16
STYLISTIC_ALT_EIGHT_OFF_SELECTOR = 17
STYLISTIC_ALT_NINE_ON_SELECTOR = 18
STYLISTIC_ALT_NINE_OFF_SELECTOR = 19
STYLISTIC_ALT_TEN_ON_SELECTOR = 20
STYLISTIC_ALT_TEN_OFF_SELECTOR = 21
STYLISTIC_ALT_ELEVEN_ON_SELECTOR = 22
STYLISTIC_ALT_ELEVEN_OFF_SELECTOR = 23
STYLISTIC_ALT_TWELVE_ON_SELECTOR = 24
STYLISTIC_ALT_TWELVE_OFF_SELECTOR = 25
STYLISTIC_ALT_THIRTEEN_ON_SELECTOR = 26
STYLISTIC_ALT_THIRTEEN_OFF_SELECTOR = 27
STYLISTIC_ALT_FOURTEEN_ON_SELECTOR = 28
STYLISTIC_ALT_FOURTEEN_OFF_SELECTOR = 29
STYLISTIC_ALT_FIFTEEN_ON_SELECTOR = 30
STYLISTIC_ALT_FIFTEEN_OFF_SELECTOR = 31
STYLISTIC_ALT_SIXTEEN_ON_SELECTOR = 32
STYLISTIC_ALT_SIXTEEN_OFF_SELECTOR = 33
STYLISTIC_ALT_SEVENTEEN_ON_SELECTOR = 34
STYLISTIC_ALT_SEVENTEEN_OFF_SELECTOR = 35
STYLISTIC_ALT_EIGHTEEN_ON_SELECTOR = 36
STYLISTIC_ALT_EIGHTEEN_OFF_SELECTOR = 37
STYLISTIC_ALT_NINETEEN_ON_SELECTOR = 38
STYLISTIC_ALT_NINETEEN_OFF_SELECTOR = 39
STYLISTIC_ALT_TWENTY_ON_SELECTOR = 40
STYLISTIC_ALT_TWENTY_OFF_SELECTOR = 41

# (on, off) selector pairs, indexed by ordinal - 1
STYLISTIC_ALT_SELECTORS = (
    (STYLISTIC_ALT_ONE_ON_SELECTOR, STYLISTIC_ALT_ONE_OFF_SELECTOR),
    (STYLISTIC_ALT_TWO_ON_SELECTOR, STYLISTIC_ALT_TWO_OFF_SELECTOR),
    (STYLISTIC_ALT_THREE_ON_SELECTOR, STYLISTIC_ALT_THREE_OFF_SELECTOR),
    (STYLISTIC_ALT_FOUR_ON_SELECTOR, STYLISTIC_ALT_FOUR_OFF_SELECTOR),
    (STYLISTIC_ALT_FIVE_ON_SELECTOR, STYLISTIC_ALT_FIVE_OFF_SELECTOR),
    (STYLISTIC_ALT_SIX_ON_SELECTOR, STYLISTIC_ALT_SIX_OFF_SELECTOR),
    (STYLISTIC_ALT_SEVEN_ON_SELECTOR, STYLISTIC_ALT_SEVEN_OFF_SELECTOR),
    (STYLISTIC_ALT_EIGHT_ON_SELECTOR, STYLISTIC_ALT_EIGHT_OFF_SELECTOR),
    (STYLISTIC_ALT_NINE_ON_SELECTOR, STYLISTIC_ALT_NINE_OFF_SELECTOR),
    (STYLISTIC_ALT_TEN_ON_SELECTOR, STYLISTIC_ALT_TEN_OFF_SELECTOR),
    (STYLISTIC_ALT_ELEVEN_ON_SELECTOR, STYLISTIC_ALT_ELEVEN_OFF_SELECTOR),
    (STYLISTIC_ALT_TWELVE_ON_SELECTOR, STYLISTIC_ALT_TWELVE_OFF_SELECTOR),
    (STYLISTIC_ALT_THIRTEEN_ON_SELECTOR, STYLISTIC_ALT_THIRTEEN_OFF_SELECTOR),
    (STYLISTIC_ALT_FOURTEEN_ON_SELECTOR, STYLISTIC_ALT_FOURTEEN_OFF_SELECTOR),
    (STYLISTIC_ALT_FIFTEEN_ON_SELECTOR, STYLISTIC_ALT_FIFTEEN_OFF_SELECTOR),
    (STYLISTIC_ALT_SIXTEEN_ON_SELECTOR, STYLISTIC_ALT_SIXTEEN_OFF_SELECTOR),
    (STYLISTIC_ALT_SEVENTEEN_ON_SELECTOR, STYLISTIC_ALT_SEVENTEEN_OFF_SELECTOR),
    (STYLISTIC_ALT_EIGHTEEN_ON_SELECTOR, STYLISTIC_ALT_EIGHTEEN_OFF_SELECTOR),
    (STYLISTIC_ALT_NINETEEN_ON_SELECTOR, STYLISTIC_ALT_NINETEEN_OFF_SELECTOR),
    (STYLISTIC_ALT_TWENTY_ON_SELECTOR, STYLISTIC_ALT_TWENTY_OFF_SELECTOR),
)

LOWER_CASE_TYPE = 37
DEFAULT_LOWER_CASE_SELECTOR = 0
LOWER_CASE_SMALL_CAPS_SELECTOR = 1

UPPER_CASE_TYPE = 38
DEFAULT_UPPER_CASE_SELECTOR = 0
UPPER_CASE_SMALL_CAPS_SELECTOR = 1
