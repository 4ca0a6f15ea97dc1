from .options_repository import OptionsRepository

__all__ = [
    'OptionsRepository'
]
