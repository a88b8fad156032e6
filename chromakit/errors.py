class InvalidFormat(ValueError):
    """Raised when a hexadecimal color string cannot be parsed."""
