"""Save-data backup metadata, configuration, backup sets, title discovery and batch menu state for Wii U and vWii titles."""

__version__ = "0.1.0"