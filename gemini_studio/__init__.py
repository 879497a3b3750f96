"""Gemini-backed BannerCraft and PlantDoctor services."""
