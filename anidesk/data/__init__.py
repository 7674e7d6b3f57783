"""Donnees statiques du client (catalogue d'echantillon)."""
