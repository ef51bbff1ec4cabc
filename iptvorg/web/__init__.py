"""API HTTP (FastAPI) d'IPTVOrg."""
