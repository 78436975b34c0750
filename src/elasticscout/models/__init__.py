"""Request, result, bulk and record-contract models."""
