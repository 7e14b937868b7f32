"""Flask frontend for the spell-check engine (non-interactive check + approve-add)."""
