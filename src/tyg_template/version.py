"""Single source of truth for the tyg_template version string."""

__version__: str = "0.1.0"
