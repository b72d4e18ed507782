"""Lumoria adventure — light intensity in a toy star system.

Bodies closer to the star cast shadows on those farther out. Classify the
light each body receives and render it as a table, a report, or SVG.
"""

NAME = "lumoria"
DESCRIPTION = "Classify the light each planet of a star system receives"
COMMAND = "quests lumoria"
