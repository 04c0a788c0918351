"""Builder-facing DSL: field boosts, fulltext options and boost scopes."""
