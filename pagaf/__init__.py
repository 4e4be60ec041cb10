"""City map builder with tile placement constrained by wave function collapse rules."""

__version__ = "0.1.0"