"""
Couche services (cas d'utilisation).

Les services orchestrent la logique du domaine :
- classifier : attribution d'une catégorie à chaque entrée
- series_organizer : reconstruction série/saison/épisode
- ingest : pipeline complet texte -> bibliothèque organisée
- library : lecture, export et modification unitaire de la bibliothèque stockée
- playlist_tools : recherche, tri, déduplication, fusion, statistiques

Les services dependent des ports (interfaces) de core/, jamais des
implementations concretes des adaptateurs.
"""
