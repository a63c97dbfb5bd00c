"""Feature modules of Plant Keeper."""
