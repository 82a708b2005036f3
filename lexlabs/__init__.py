"""Lexical analysers, token models, an LL(1) grammar parser and a syntax tree for toy languages."""

__version__ = "0.1.0"