"""md-compose - Selection-aware Markdown formatting engine."""

__version__ = "0.1.0"
