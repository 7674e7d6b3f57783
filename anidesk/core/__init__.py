"""
Couche domaine (core).

Contient les entités, ports (interfaces abstraites) et erreurs métier.
Cette couche n'a AUCUNE dépendance vers l'infrastructure (HTTP, HTML, frameworks).

Sous-packages :
- entities/ : Entités transitoires (AnimeSummary, AnimeDetails, Genre, Episode)
- ports/ : Interfaces abstraites définissant les contrats pour les adaptateurs
- errors : Hiérarchie d'exceptions AniDeskError
"""
