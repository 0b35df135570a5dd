from .en import TRANSLATIONS as EN
from .ru import TRANSLATIONS as RU

LOCALES = {
    "en": EN,
    "ru": RU,
}

__all__ = ["LOCALES"]
