"""Warriors, wizards and the combat and magic weapons they carry."""

__version__ = "0.1.0"
__all__ = ["__version__"]