"""pif2pass: import 1Password interchange exports into a pass store."""

__version__ = "0.1.0"
