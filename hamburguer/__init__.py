"""Burger menu scraping, model-made order recommendations and an Alexa-ready review service."""

__version__ = "0.1.0"