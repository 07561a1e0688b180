"""Pure conversion domain: types, instants, classification, parsing."""
