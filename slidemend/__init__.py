"""
slidemend - Markup repair for generated slide decks

Repairs the raw HTML that content generators embed in markdown slides so a
strict template compiler accepts the deck, with escalating build fallbacks
when repair alone is not enough.
"""

__version__ = "0.1.0"
__author__ = "slidemend Team"
