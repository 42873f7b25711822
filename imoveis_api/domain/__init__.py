"""Pure domain rules (validation, identifiers) with no I/O."""
