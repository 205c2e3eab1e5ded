"""Base layer: descriptors, errors, logging and the shared transport."""
