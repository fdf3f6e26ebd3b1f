"""Shared constants for the colorcue codec.

PIVOT is used by both halves of the codec: the Encoder folds the upper
half of the saturation/luminosity space with ``num % PIVOT`` and the
Decoder undoes it with ``score + PIVOT``. The Initializer scores words in
[0, PIVOT) and the DataChecker requires every one of those scores.
"""

HUE_MAX = 360
CHANNEL_MAX = 100

# 101 saturation values x 101 luminosity values
MAX_SL_TUPLE = (CHANNEL_MAX + 1) * (CHANNEL_MAX + 1)

# Number of distinct scores a word database needs, from 0 to PIVOT - 1.
# Scores of the upper half are folded onto [0, PIVOT) with a modulo.
PIVOT = 5102

# First index of the gray descriptors in the special word list
GRAY_START = HUE_MAX + 1

DEFAULT_SEPARATOR = ','
DEFAULT_MODE = 'hsl'
