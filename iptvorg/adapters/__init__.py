"""
Couche adaptateurs (infrastructure).

Les adaptateurs implementent les ports definis dans core/ports/ et fournissent
des implementations concretes pour les systemes externes.

Sous-packages :
- cli/ : Interface ligne de commande (Typer)
- parsing/ : Lecture et ecriture du format M3U

Chaque adaptateur depend de core/ mais core/ ne depend jamais des adaptateurs.
"""
