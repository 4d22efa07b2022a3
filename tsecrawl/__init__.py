"""Crawler toolkit: queue, hash table, car list, integration, URL normalisation, web pages and a one-level crawler."""

__version__ = "0.1.0"