"""Velo Assist - code actions and boilerplate generation for Velo state management."""

try:
    from importlib.metadata import version

    __version__ = version("velo-assist")
except Exception:
    __version__ = "0.0.0.dev0+local"  # Fallback for development
