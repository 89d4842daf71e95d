class ConfigWriteError(Exception):
    """Raised when the persisted configuration could not be replaced."""
