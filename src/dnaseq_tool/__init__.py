"""dnaseq-tool - batch DNA sequence reverse/complement."""

__version__ = "0.1.0"
