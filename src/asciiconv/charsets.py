# Density ramp from darkest (most ink) to lightest; the last slot is a space
PALETTE = "@%#*+=-:. "

DARKEST = 0
LIGHTEST = len(PALETTE) - 1
