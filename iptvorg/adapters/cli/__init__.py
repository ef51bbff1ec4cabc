"""Adaptateur CLI (typer + rich) d'IPTVOrg."""
