"""Tempora adventure — synchronize the village clocks.

Parse HH:MM readings and report how far each clock drifts from the Grand
Clock Tower.
"""

NAME = "tempora"
DESCRIPTION = "Report how far each village clock drifts from the Grand Clock Tower"
COMMAND = "quests tempora"
