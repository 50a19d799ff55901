"""
Couche adaptateurs (infrastructure).

Les adaptateurs relient le domaine (core/) au monde exterieur:
- api/ : Client HTTP de l'API TVmaze (httpx)

core/ ne depend jamais des adaptateurs.
"""
