"""localekit - client-side text localization.

Resolves translation keys (optionally pluralized) against an immutable
dictionary, substitutes positional arguments, and formats coarse
relative times ("3 minutes ago", "in 2 days").
"""
