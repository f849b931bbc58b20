# Upper half block: top half takes the foreground colour, bottom half the background
UPPER_HALF_BLOCK = "▀"

# Luminance ramps, ordered dark to light (dense glyphs first)
DEFAULT_RAMP = "@%#*+=-:."

RAMPS = {
    "default": DEFAULT_RAMP,
    "dense": "@%#*=+-;:,. ",
    "detailed": "$@B%8&WM#*oahkbdpqwmZO0QLCJUYXzcvunxrjft/\\|()1{}[]?-_+~i!lI;:,^`'. ",
    "blocks": "█▓▒░ ",
}
