"""Resource format importers.

Exports:
    Importer: Protocol for custom formats
    AndroidImporter: Android strings.xml
    decode_android_text: Android escape decoding and dialect conversion
    guess_locale_from_filename: Locale tag encoded in a resource file name

Python 3.13+.
"""

from i18nres.locale_utils import guess_locale_from_filename

from .android import AndroidImporter, decode_android_text
from .base import Importer

__all__ = [
    "AndroidImporter",
    "Importer",
    "decode_android_text",
    "guess_locale_from_filename",
]
