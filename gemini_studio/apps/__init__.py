"""UI-facing controllers for the two apps."""

from .banner_craft import BannerCraftApp
from .plant_doctor import PlantDoctorApp

__all__ = ["BannerCraftApp", "PlantDoctorApp"]
