"""Custom exceptions - SoC principle"""

class ToggleError(Exception):
    """Base exception for the book toggle service"""
    pass

class AlreadyActiveError(ToggleError):
    """Collection already has documents (state is ON)"""
    pass

class AlreadyInactiveError(ToggleError):
    """Collection is empty (state is OFF)"""
    pass

class InvalidSeedError(ToggleError):
    """Seed dataset is not a usable array of records"""
    pass

class SeedReadError(ToggleError):
    """Seed dataset file could not be read"""
    pass

class StoreError(ToggleError):
    """Document store operation failed"""
    pass

class ConfigurationError(ToggleError):
    """Startup configuration is missing or invalid"""
    pass
