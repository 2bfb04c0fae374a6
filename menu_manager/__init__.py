"""Menu Manager: staged catalog editing with a publish history."""

__version__ = "0.1.0"
