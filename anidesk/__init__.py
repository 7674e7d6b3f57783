"""
AniDesk - Proxy de scraping HiAnime et client terminal.

Ce package recupere les pages du site amont, les normalise en JSON
et les expose via une petite API REST, consommee par un client CLI.

Architecture : Hexagonale (Ports et Adaptateurs)
- core/ : Couche domaine (entités, ports, erreurs)
- services/ : Couche application (catalogue, session de navigation)
- adapters/ : Couche infrastructure (scraping, client REST, CLI)
- web/ : API FastAPI (dispatcher des endpoints)
"""

__version__ = "0.1.0"
