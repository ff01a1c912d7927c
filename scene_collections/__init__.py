"""Scene collections manifest: entry metadata, recovery, and persistence."""
