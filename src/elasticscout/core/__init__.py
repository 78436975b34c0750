"""Query translation, index lifecycle, bulk writes and result mapping."""
