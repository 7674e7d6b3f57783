"""Routes de l'API : santé, catalogue, épisodes."""
