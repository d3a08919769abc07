__version__ = "0.1.0"

__all__ = [
    "__version__",
    "budgets",
    "cli",
    "config",
    "errors",
    "exit_codes",
    "logging",
    "manifest",
    "reporting",
]
