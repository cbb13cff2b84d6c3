"""medalwiki — Olympic Games questions answered by walking Wikipedia pages."""

__version__ = "0.1.0"
