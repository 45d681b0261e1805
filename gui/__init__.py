"""Background workers for the filtering engine."""
