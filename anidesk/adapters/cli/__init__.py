"""Interface CLI du client AniDesk (Typer + Rich)."""
