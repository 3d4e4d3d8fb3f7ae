"""HTTP query surface for the morph engine (FastAPI)."""
