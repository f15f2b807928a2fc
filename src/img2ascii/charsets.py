# Declared from emptiest to densest glyph
PLAIN = " .:-=+#%█"

DITHERED = " .,\"`:-=+^~*;#%▒▓█"

# Upper bucket bounds, compared with <=. Anything above the last bound lands in the final bucket.
PLAIN_THRESHOLDS = (0.111, 0.222, 0.333, 0.444, 0.555, 0.666, 0.777, 0.888)

DITHERED_THRESHOLDS = (
    0.055,
    0.111,
    0.166,
    0.222,
    0.277,
    0.333,
    0.388,
    0.444,
    0.499,
    0.555,
    0.611,
    0.666,
    0.722,
    0.777,
    0.833,
    0.888,
    0.944,
)
