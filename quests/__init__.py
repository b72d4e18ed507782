"""quests — small coding adventures with a shared command line.

Lumoria classifies the light each planet of a star system receives given
the bodies closer to its star; Tempora reports village clock drift.

Usage:
    python -m quests list                # Show adventures
    python -m quests lumoria --report    # Classify Lumoria, write the report
    python -m quests tempora             # Clock drift table
"""

__version__ = "0.1.0"
