"""
Adaptateurs de scraping du site amont.

- HiAnimeFetcher : recuperation HTTP des pages (implemente IPageFetcher)
- extractor : conversion HTML -> entites du domaine
- selectors : chaines de repli des selecteurs CSS par champ
"""

from anidesk.adapters.scraping.fetcher import HiAnimeFetcher

__all__ = [
    "HiAnimeFetcher",
]
