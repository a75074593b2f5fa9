class ConfigurationError(ValueError):
    """Raised when a driving profile or scenario setting cannot be used."""
