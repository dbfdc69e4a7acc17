"""sanabot — Finnish Wiktionary lookups for Telegram."""

__version__ = "0.3.0"
