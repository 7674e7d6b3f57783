"""
Couche infrastructure : scraping amont, client REST et interface CLI.
"""
