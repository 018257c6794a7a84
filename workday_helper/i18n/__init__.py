"""Internationalization (i18n) module for English/Italian holiday names."""

from workday_helper.i18n.translator import Translator

__all__ = ["Translator"]
