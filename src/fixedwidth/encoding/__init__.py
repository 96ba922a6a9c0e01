"""Fixed-width encoding engine: layouts, value encoders, line writer."""
