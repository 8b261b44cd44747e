"""conky-calendar command line application."""
